"""Key and secret generation tools (instruction synthesis only)."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aztec_mcp.tools.commands import AZTEC, instruction, option, quoted_option, switch


def _wants_json(args: Mapping[str, Any]) -> bool:
    # Defaults to JSON output; only an explicit false turns it off.
    return args.get("json") is not False


def generate_keys(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Generate encryption and signing keys",
        f"{AZTEC} generate-keys" + switch("--json", _wants_json(args)),
        note="Generates a new key pair for Aztec accounts",
        output="Returns encryptionPrivateKey, encryptionPublicKey, signingPrivateKey, signingPublicKey",
    )


def generate_secret_and_hash(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Generate secret and its hash",
        f"{AZTEC} generate-secret-and-hash",
        note="Generates a random Fr field element and computes its Aztec hash",
        usage="Useful for creating secrets for private claims and messages",
    )


def generate_bls_keypair(args: Mapping[str, Any]) -> Dict[str, Any]:
    command = (
        f"{AZTEC} generate-bls-keypair"
        + quoted_option("--mnemonic", args.get("mnemonic"))
        + option("--ikm", args.get("ikm"))
        + option("--bls-path", args.get("blsPath"))
        + switch("--compressed", args.get("compressed"))
        + " --json"
    )
    return instruction(
        "Generate BLS keypair for validator operations",
        command,
        note="BLS keys are used for validator attestations",
    )


def generate_p2p_key(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Generate LibP2P peer private key",
        f"{AZTEC} generate-p2p-private-key",
        note="Used for P2P networking between Aztec nodes",
    )


def generate_l1_account(args: Mapping[str, Any]) -> Dict[str, Any]:
    return instruction(
        "Generate Ethereum L1 account",
        f"{AZTEC} generate-l1-account" + switch("--json", _wants_json(args)),
        note="Generates a new Ethereum private key and address",
    )
