"""Transaction and authorization-witness tools."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.aztec_api import AztecClient
from aztec_mcp.tools.commands import AZTEC_WALLET, args_option, instruction, string_list


def _call_target(args: Mapping[str, Any]) -> tuple[Any, Any, Any]:
    return args.get("contractAddress"), args.get("functionName"), args.get("from")


async def get_transaction_receipt(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    return await client.get_transaction_receipt(args.get("txHash"))


async def get_pending_transactions(client: AztecClient, args: Mapping[str, Any]) -> Dict[str, Any]:
    return {"pendingTxs": await client.get_pending_txs()}


def send_transaction(args: Mapping[str, Any]) -> Dict[str, Any]:
    contract_address, function_name, sender = _call_target(args)
    tx_args = string_list(args, "args")
    auth_witnesses = string_list(args, "authWitnesses")
    command = (
        f"{AZTEC_WALLET} send {function_name} -ca {contract_address} -f {sender}"
        + args_option(tx_args)
    )
    if auth_witnesses:
        command += " --auth-witness " + ",".join(auth_witnesses)
    return instruction(
        "Send transaction via aztec-wallet",
        command,
        contractAddress=contract_address,
        functionName=function_name,
        **{"from": sender},
        args=tx_args,
    )


def simulate_transaction(args: Mapping[str, Any]) -> Dict[str, Any]:
    contract_address, function_name, sender = _call_target(args)
    tx_args = string_list(args, "args")
    command = (
        f"{AZTEC_WALLET} simulate {function_name} -ca {contract_address} -f {sender}"
        + args_option(tx_args)
    )
    return instruction(
        "Simulate transaction (dry run)",
        command,
        contractAddress=contract_address,
        functionName=function_name,
        **{"from": sender},
        args=tx_args,
        note="Simulation shows return values and gas estimation without executing",
    )


def estimate_gas(args: Mapping[str, Any]) -> Dict[str, Any]:
    contract_address, function_name, sender = _call_target(args)
    command = (
        f"{AZTEC_WALLET} simulate {function_name} -ca {contract_address} -f {sender}"
        + args_option(string_list(args, "args"))
        + " --estimate-gas-only"
    )
    return instruction(
        "Estimate gas for transaction",
        command,
        contractAddress=contract_address,
        functionName=function_name,
        **{"from": sender},
        note="Returns DA gas, L2 gas, and estimated fee",
    )


def create_authwit(args: Mapping[str, Any]) -> Dict[str, Any]:
    contract_address, function_name, sender = _call_target(args)
    caller = args.get("caller")
    command = (
        f"{AZTEC_WALLET} create-authwit {function_name} {caller} -ca {contract_address} -f {sender}"
        + args_option(string_list(args, "args"))
    )
    return instruction(
        "Create authorization witness for private delegation",
        command,
        functionName=function_name,
        caller=caller,
        contractAddress=contract_address,
        **{"from": sender},
    )


def authorize_action(args: Mapping[str, Any]) -> Dict[str, Any]:
    contract_address, function_name, sender = _call_target(args)
    caller = args.get("caller")
    command = (
        f"{AZTEC_WALLET} authorize-action {function_name} {caller} -ca {contract_address} -f {sender}"
    )
    return instruction(
        "Authorize public action on behalf of account",
        command,
        functionName=function_name,
        caller=caller,
        contractAddress=contract_address,
        **{"from": sender},
    )
