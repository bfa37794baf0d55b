"""Contract deployment, registration and inspection tools."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.aztec_api import AztecClient
from aztec_mcp.tools.commands import (
    AZTEC,
    AZTEC_WALLET,
    args_option,
    instruction,
    option,
    string_list,
    switch,
)


async def get_contract_info(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    info = await client.get_contract_instance(address)
    if not info:
        return {"error": "Contract not found", "address": address}
    return info


async def list_example_contracts(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        "contracts": client.get_available_example_contracts(),
        "note": "These contracts are available from @aztec/noir-contracts.js",
        "usage": "Use with aztec-wallet deploy <ContractName> --from <account>",
    }


async def is_contract_deployed(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    deployed = await client.is_contract_publicly_deployed(address)
    return {"address": address, "isDeployed": deployed}


def deploy_contract(args: Mapping[str, Any]) -> Dict[str, Any]:
    """Flags: ``--from``, ``--args``, ``-a``, ``--salt``, ``--public-deploy``."""
    artifact = args.get("artifact")
    sender = args.get("from")
    contract_args = string_list(args, "args")
    command = (
        f"{AZTEC_WALLET} deploy {artifact} --from {sender}"
        + args_option(contract_args)
        + option("-a", args.get("alias"))
        + option("--salt", args.get("salt"))
        + switch("--public-deploy", args.get("publicDeploy"))
    )
    return instruction(
        "Contract deployment requires aztec-wallet CLI",
        command,
        artifact=artifact,
        **{"from": sender},
        args=contract_args,
    )


def register_contract(args: Mapping[str, Any]) -> Dict[str, Any]:
    address = args.get("address")
    artifact = args.get("artifact")
    command = (
        f"{AZTEC_WALLET} register-contract {address} {artifact}"
        + option("-a", args.get("alias"))
        + option("-k", args.get("publicKey"))
    )
    return instruction("Register contract in PXE", command, address=address, artifact=artifact)


def inspect_contract(args: Mapping[str, Any]) -> Dict[str, Any]:
    artifact = args.get("artifact")
    return instruction(
        "Inspect contract functions",
        f"{AZTEC} inspect-contract {artifact}",
        artifact=artifact,
        note="This lists all external callable functions for the contract",
    )


def compute_selector(args: Mapping[str, Any]) -> Dict[str, Any]:
    signature = args.get("functionSignature")
    return instruction(
        "Compute function selector",
        f'{AZTEC} compute-selector "{signature}"',
        functionSignature=signature,
        note="Returns the 4-byte selector for the function",
    )
