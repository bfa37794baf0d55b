"""Minimal sanity checks for the Aztec MCP tools against a running sandbox."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from aztec_mcp.aztec_api import default_client  # noqa: E402
from aztec_mcp.formatting import format_tool_result  # noqa: E402
from aztec_mcp.mcp import handle_tool_call  # noqa: E402

# Optional tx hash for a receipt lookup; skipped if unset.
SAMPLE_TX_HASH = os.getenv("AZTEC_SAMPLE_TX_HASH")
# Opt-in to log fetching (can be heavier on a busy node).
RUN_LOGS = os.getenv("RUN_LOGS_SANITY", "false").lower() in {"1", "true", "yes"}


async def _show(label: str, name: str, args=None) -> None:
    print(f"{label}:", format_tool_result(await handle_tool_call(name, args or {})))


async def main() -> None:
    print("Endpoints:", default_client.get_urls())
    await _show("Health", "aztec_health_check")
    await _show("Node info", "aztec_get_node_info")
    await _show("Block number", "aztec_get_block_number")
    await _show("Accounts", "aztec_get_accounts")
    await _show("Create account", "aztec_create_account", {"alias": "sanity"})

    if SAMPLE_TX_HASH:
        await _show("Receipt", "aztec_get_transaction_receipt", {"txHash": SAMPLE_TX_HASH})

    if RUN_LOGS:
        await _show("Logs (block 1)", "aztec_get_logs", {"fromBlock": 1, "toBlock": 2})

    await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
