"""Account management tools."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.aztec_api import AztecClient
from aztec_mcp.tools.commands import AZTEC_WALLET, instruction, option, switch

DEFAULT_ACCOUNT_TYPE = "schnorr"


async def get_accounts(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    return {"accounts": await client.get_registered_accounts()}


async def register_sender(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    await client.register_sender(address)
    return {"success": True, "message": f"Registered sender: {address}"}


async def get_account_public_key(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    public_key = await client.get_account_public_key(address)
    return {"address": address, "publicKey": public_key}


def create_account(args: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the ``aztec-wallet create-account`` command.

    Flag order is fixed: ``-t <type>``, ``-a <alias>``, ``--public-deploy``.
    ``secretKey`` is accepted but never placed on the command line.
    """
    account_type = args.get("type") or DEFAULT_ACCOUNT_TYPE
    command = (
        f"{AZTEC_WALLET} create-account -t {account_type}"
        + option("-a", args.get("alias"))
        + switch("--public-deploy", args.get("publicDeploy"))
    )
    return instruction(
        "Account creation requires aztec-wallet CLI",
        command,
        type=account_type,
        note="Run this command in terminal with Aztec sandbox running",
    )


def deploy_account(args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    command = f"{AZTEC_WALLET} deploy-account {address}" + switch(
        "--skip-initialization", args.get("skipInitialization")
    )
    return instruction("Account deployment requires aztec-wallet CLI", command, address=address)


def import_test_accounts(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Import test accounts from sandbox",
        f"{AZTEC_WALLET} import-test-accounts",
        note="This imports pre-funded accounts from the sandbox for testing",
    )
