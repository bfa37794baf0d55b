"""Tool implementations, one module per catalog category."""

from . import account, bridge, contract, crypto, governance, network, transaction, validator

__all__ = [
    "account",
    "bridge",
    "contract",
    "crypto",
    "governance",
    "network",
    "transaction",
    "validator",
]
