"""
Configuration helpers for the Aztec MCP server.

This module centralizes endpoint URL selection, default timeouts, and logging
settings. Every value can be overridden from the environment; nothing is read
from disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Sandbox defaults: PXE and node share one port unless told otherwise.
DEFAULT_PXE_URL = "http://localhost:8080"
DEFAULT_NODE_URL = "http://localhost:8080"
DEFAULT_L1_RPC_URL = "http://localhost:8545"
DEFAULT_HTTP_TIMEOUT = 10.0


def _first_env(*names: str, default: str) -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def _load_timeout() -> float:
    raw_timeout = os.getenv("AZTEC_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return DEFAULT_HTTP_TIMEOUT
    return DEFAULT_HTTP_TIMEOUT


def load_pxe_url() -> str:
    return _first_env("AZTEC_PXE_URL", "PXE_URL", default=DEFAULT_PXE_URL)


def load_node_url() -> str:
    return _first_env("AZTEC_NODE_URL", default=DEFAULT_NODE_URL)


def load_l1_rpc_url() -> str:
    return _first_env("ETHEREUM_HOST", "L1_RPC_URL", default=DEFAULT_L1_RPC_URL)


LOG_LEVEL = os.getenv("AZTEC_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("AZTEC_MCP_LOG_FORMAT", "json")  # json or plain


@dataclass(slots=True)
class AztecConfig:
    """Runtime configuration for the Aztec PXE, node, and L1 endpoints."""

    pxe_url: str = DEFAULT_PXE_URL
    # None or "" means "use the PXE URL" (single combined sandbox service).
    node_url: Optional[str] = DEFAULT_NODE_URL
    l1_rpc_url: str = DEFAULT_L1_RPC_URL
    timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


def load_config() -> AztecConfig:
    """
    Build a configuration from the current environment.

    Lookup order:
        PXE URL: AZTEC_PXE_URL, PXE_URL, then http://localhost:8080
        Node URL: AZTEC_NODE_URL, then http://localhost:8080
        L1 URL: ETHEREUM_HOST, L1_RPC_URL, then http://localhost:8545
    """
    return AztecConfig(
        pxe_url=load_pxe_url(),
        node_url=load_node_url(),
        l1_rpc_url=load_l1_rpc_url(),
        timeout=_load_timeout(),
        log_level=os.getenv("AZTEC_MCP_LOG_LEVEL", "INFO"),
        log_format=os.getenv("AZTEC_MCP_LOG_FORMAT", "json"),
    )


default_config = load_config()
