"""MCP resources: live network status plus static markdown guides."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable, Dict, List

from aztec_mcp import docs

NETWORK_STATUS_URI = "aztec://network/status"
JSON_MIME = "application/json"
MARKDOWN_MIME = "text/markdown"

RESOURCES: List[Dict[str, str]] = [
    {
        "uri": NETWORK_STATUS_URI,
        "name": "Network Status",
        "description": "Current Aztec network status, block height, and sync information",
        "mimeType": JSON_MIME,
    },
    {
        "uri": "aztec://docs/getting-started",
        "name": "Getting Started Guide",
        "description": "Complete guide to setting up and using Aztec for development",
        "mimeType": MARKDOWN_MIME,
    },
    {
        "uri": "aztec://docs/noir-contracts",
        "name": "Noir Contract Development",
        "description": "Comprehensive guide to writing Noir smart contracts for Aztec",
        "mimeType": MARKDOWN_MIME,
    },
    {
        "uri": "aztec://docs/privacy-patterns",
        "name": "Privacy Patterns",
        "description": "Best practices for building privacy-preserving applications on Aztec",
        "mimeType": MARKDOWN_MIME,
    },
    {
        "uri": "aztec://docs/accounts",
        "name": "Account Abstraction",
        "description": "Understanding Aztec's native account abstraction and account contracts",
        "mimeType": MARKDOWN_MIME,
    },
    {
        "uri": "aztec://docs/bridging",
        "name": "L1-L2 Bridging",
        "description": "Guide to bridging assets between Ethereum L1 and Aztec L2",
        "mimeType": MARKDOWN_MIME,
    },
    {
        "uri": "aztec://docs/cli-reference",
        "name": "CLI Quick Reference",
        "description": "Quick reference for aztec and aztec-wallet CLI commands",
        "mimeType": MARKDOWN_MIME,
    },
]

GUIDES: Dict[str, str] = {
    "aztec://docs/getting-started": docs.GETTING_STARTED,
    "aztec://docs/noir-contracts": docs.NOIR_CONTRACTS,
    "aztec://docs/privacy-patterns": docs.PRIVACY_PATTERNS,
    "aztec://docs/accounts": docs.ACCOUNTS,
    "aztec://docs/bridging": docs.BRIDGING,
    "aztec://docs/cli-reference": docs.CLI_REFERENCE,
}


class UnknownResourceError(LookupError):
    def __init__(self, uri: str) -> None:
        super().__init__(f"Unknown resource: {uri}")
        self.uri = uri


def list_resources() -> List[Dict[str, str]]:
    return [dict(resource) for resource in RESOURCES]


async def get_resource_content(
    uri: str, get_network_status: Callable[[], Awaitable[Any]]
) -> Dict[str, str]:
    """
    Resolve a resource URI to ``{"mimeType", "text"}``.

    ``get_network_status`` is only awaited for the network status resource.

    Raises:
        UnknownResourceError: the URI is not one of ``RESOURCES``.
    """
    if uri == NETWORK_STATUS_URI:
        status = await get_network_status()
        return {"mimeType": JSON_MIME, "text": json.dumps(status, indent=2)}
    guide = GUIDES.get(uri)
    if guide is None:
        raise UnknownResourceError(uri)
    return {"mimeType": MARKDOWN_MIME, "text": guide}
