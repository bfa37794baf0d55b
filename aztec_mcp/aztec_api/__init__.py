"""JSON-RPC client wrappers for the Aztec node and PXE."""

from .transport import (
    AztecApiError,
    DecodeError,
    HttpError,
    JsonRpcTransport,
    RpcError,
    TransportError,
)
from .client import AztecClient, UrlUpdate, default_client

__all__ = [
    "AztecClient",
    "AztecApiError",
    "DecodeError",
    "HttpError",
    "JsonRpcTransport",
    "RpcError",
    "TransportError",
    "UrlUpdate",
    "default_client",
]
