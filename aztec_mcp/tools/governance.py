"""Governance tools (instruction synthesis only)."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.tools.commands import AZTEC, instruction, option, switch


def deposit_governance_tokens(args: Mapping[str, Any]) -> Dict[str, Any]:
    amount = args.get("amount")
    command = (
        f"{AZTEC} deposit-governance-tokens -a {amount}"
        + option("--recipient", args.get("recipient"))
        + switch("--mint", args.get("mint"))
        + option("-p", args.get("privateKey"))
    )
    return instruction("Deposit governance tokens for voting", command, amount=amount)


def propose_governance(args: Mapping[str, Any]) -> Dict[str, Any]:
    payload_address = args.get("payloadAddress")
    command = f"{AZTEC} propose-with-lock -p {payload_address}" + option(
        "-pk", args.get("privateKey")
    )
    return instruction(
        "Create governance proposal",
        command,
        payloadAddress=payload_address,
        note="Requires locked governance tokens",
    )


def vote_on_proposal(args: Mapping[str, Any]) -> Dict[str, Any]:
    proposal_id = args.get("proposalId")
    vote_amount = args.get("voteAmount")
    in_favor = bool(args.get("inFavor"))
    command = (
        f"{AZTEC} vote-on-governance-proposal -p {proposal_id} -a {vote_amount}"
        f" --in-favor {'yea' if in_favor else 'nay'}"
        + option("-pk", args.get("privateKey"))
    )
    return instruction(
        "Vote on governance proposal",
        command,
        proposalId=proposal_id,
        voteAmount=vote_amount,
        inFavor=in_favor,
    )


def execute_proposal(args: Mapping[str, Any]) -> Dict[str, Any]:
    proposal_id = args.get("proposalId")
    command = (
        f"{AZTEC} execute-governance-proposal -p {proposal_id}"
        + switch("--wait true", args.get("wait"))
        + option("-pk", args.get("privateKey"))
    )
    return instruction("Execute passed governance proposal", command, proposalId=proposal_id)
