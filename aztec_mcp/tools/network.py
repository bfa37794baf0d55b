"""Network and node tools. All of these are live calls."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.aztec_api import AztecClient


async def get_node_info(client: AztecClient, args: Mapping[str, Any]) -> Any:
    return await client.get_node_info()


async def get_block_number(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    return {"blockNumber": await client.get_block_number()}


async def get_block(client: AztecClient, args: Mapping[str, Any]) -> Any:
    return await client.get_block(args.get("blockNumber"))


async def get_current_base_fee(client: AztecClient, args: Mapping[str, Any]) -> Any:
    return await client.get_current_base_fee()


async def get_logs(client: AztecClient, args: Mapping[str, Any]) -> Any:
    return await client.get_logs(
        tx_hash=args.get("txHash"),
        from_block=args.get("fromBlock"),
        to_block=args.get("toBlock"),
        contract_address=args.get("contractAddress"),
    )


async def get_l1_contract_addresses(client: AztecClient, args: Mapping[str, Any]) -> Any:
    return await client.get_l1_contract_addresses()


async def get_protocol_contract_addresses(client: AztecClient, args: Mapping[str, Any]) -> Any:
    return await client.get_protocol_contract_addresses()


async def health_check(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    return await client.health_check()
