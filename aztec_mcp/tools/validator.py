"""Validator and sequencer administration tools (instruction synthesis only)."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.tools.commands import AZTEC, instruction, option

DEFAULT_SEQUENCER_COMMAND = "list"


def add_validator(args: Mapping[str, Any]) -> Dict[str, Any]:
    attester = args.get("attester")
    withdrawer = args.get("withdrawer")
    command = (
        f"{AZTEC} add-l1-validator --attester {attester} --withdrawer {withdrawer}"
        f" --bls-secret-key {args.get('blsSecretKey')}"
        + option("-pk", args.get("privateKey"))
    )
    return instruction(
        "Add validator to L1 rollup contract",
        command,
        attester=attester,
        withdrawer=withdrawer,
        note="Requires stake deposit",
    )


def remove_validator(args: Mapping[str, Any]) -> Dict[str, Any]:
    validator = args.get("validator")
    command = f"{AZTEC} remove-l1-validator --validator {validator}" + option(
        "-pk", args.get("privateKey")
    )
    return instruction("Remove validator from L1 rollup", command, validator=validator)


def get_sequencers(args: Mapping[str, Any]) -> Dict[str, Any]:
    subcommand = args.get("command") or DEFAULT_SEQUENCER_COMMAND
    command = f"{AZTEC} sequencers {subcommand}" + option(
        "--block-number", args.get("blockNumber")
    )
    text = "List sequencers" if subcommand == "list" else "Get next sequencer"
    return instruction(text, command)


def advance_epoch(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Advance to next epoch (devnet only)",
        f"{AZTEC} advance-epoch",
        note="Uses L1 cheat codes to warp time - only works on local devnet",
        warning="This is a testing utility, not for production",
    )


def prune_rollup(args: Mapping[str, Any]) -> Dict[str, Any]:
    command = (
        f"{AZTEC} prune-rollup"
        + option("--rollup", args.get("rollupAddress"))
        + option("-pk", args.get("privateKey"))
    )
    return instruction("Prune pending chain on rollup", command, note="Removes stale pending blocks")
