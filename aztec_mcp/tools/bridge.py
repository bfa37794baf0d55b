"""L1 bridge and cross-chain messaging tools."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.aztec_api import AztecClient
from aztec_mcp.tools.commands import AZTEC, instruction, option, quoted_option, switch


async def get_l1_to_l2_message_witness(
    client: AztecClient, args: Mapping[str, Any]
) -> Dict[str, Any]:
    message_hash = args.get("messageHash")
    witness = await client.get_l1_to_l2_message_witness(
        args.get("contractAddress"), message_hash, args.get("secret")
    )
    if not witness:
        return {"error": "Message witness not found", "messageHash": message_hash}
    return witness


def bridge_erc20(args: Mapping[str, Any]) -> Dict[str, Any]:
    """Flags: ``-t``, ``-p``, ``--mint``, ``--private``, in that order."""
    amount = args.get("amount")
    recipient = args.get("recipient")
    is_private = bool(args.get("private", False))
    command = (
        f"{AZTEC} bridge-erc20 {amount} {recipient}"
        + option("-t", args.get("tokenAddress"))
        + option("-p", args.get("portalAddress"))
        + switch("--mint", args.get("mint"))
        + switch("--private", is_private)
    )
    return instruction(
        "Bridge ERC20 tokens from L1 to Aztec L2",
        command,
        amount=amount,
        recipient=recipient,
        private=is_private,
    )


def get_l1_balance(args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    token_address = args.get("tokenAddress")
    return instruction(
        "Get L1 ERC20 balance",
        f"{AZTEC} get-l1-balance {address} -t {token_address}",
        address=address,
        tokenAddress=token_address,
    )


def deploy_l1_contracts(args: Mapping[str, Any]) -> Dict[str, Any]:
    command = (
        f"{AZTEC} deploy-l1-contracts"
        + option("-pk", args.get("privateKey"))
        + quoted_option("-m", args.get("mnemonic"))
        + switch("--test-accounts", args.get("testAccounts"))
        + switch("--sponsored-fpc", args.get("sponsoredFpc"))
    )
    return instruction(
        "Deploy L1 infrastructure contracts",
        command,
        note="This deploys rollup, registry, inbox, outbox, and other L1 contracts",
        warning="Admin operation - requires sufficient L1 ETH",
    )


def get_canonical_fpc_address(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Get canonical SponsoredFPC address",
        f"{AZTEC} get-canonical-sponsored-fpc-address",
        note="Returns the FPC address for current network version",
    )
