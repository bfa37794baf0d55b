"""Helpers for assembling deterministic ``aztec`` / ``aztec-wallet`` command lines."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

AZTEC = "aztec"
AZTEC_WALLET = "aztec-wallet"


def option(flag: str, value: Any) -> str:
    """Return `` <flag> <value>`` or an empty string when value is unset or empty."""
    if value is None or value == "":
        return ""
    return f" {flag} {value}"


def quoted_option(flag: str, value: Optional[str]) -> str:
    if not value:
        return ""
    return f' {flag} "{value}"'


def switch(flag: str, enabled: Any) -> str:
    return f" {flag}" if enabled else ""


def args_option(values: Optional[Iterable[Any]]) -> str:
    """Render constructor/function arguments as `` --args a b c``."""
    items = [str(value) for value in values or []]
    if not items:
        return ""
    return " --args " + " ".join(items)


def string_list(args: Mapping[str, Any], key: str) -> list[str]:
    values = args.get(key) or []
    return [str(value) for value in values]


def instruction(text: str, command: str, **extra: Any) -> Dict[str, Any]:
    """Build the ``{instruction, command, ...}`` payload returned to the host."""
    return {"instruction": text, "command": command, **extra}
