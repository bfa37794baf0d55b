"""
JSON-RPC 2.0 transport over HTTP POST.

One call in, one unwrapped ``result`` out. Failures are raised as distinct
exception types so the facade and the host can tell connectivity problems
apart from upstream RPC errors. There are no retries here.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
JSON_HEADERS = {"Content-Type": "application/json"}


class AztecApiError(Exception):
    """Base exception for every transport-level failure."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code


class TransportError(AztecApiError):
    """Raised when the endpoint cannot be reached (refused, timeout, DNS)."""


class HttpError(AztecApiError):
    """Raised when the endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, status_text: str = "") -> None:
        super().__init__(f"HTTP error: {status_code} {status_text}", status_code=status_code)
        self.status_text = status_text


class DecodeError(AztecApiError):
    """Raised when the response body is not a JSON-RPC envelope."""


class RpcError(AztecApiError):
    """Raised when the envelope carries an ``error`` member."""

    def __init__(self, code: Optional[int], message: str, data: Any = None) -> None:
        super().__init__(f"RPC error: {message} (code: {code})", code=code)
        self.rpc_message = message
        self.data = data


def build_envelope(method: str, params: Sequence[Any], request_id: int) -> Dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "method": method,
        "params": list(params),
        "id": request_id,
    }


class JsonRpcTransport:
    """Single-shot JSON-RPC client; owns the request-id counter."""

    def __init__(
        self,
        *,
        timeout: Optional[float] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None
        self._request_id = 0

    @property
    def last_request_id(self) -> int:
        return self._request_id

    def _next_id(self) -> int:
        self._request_id += 1
        return self._request_id

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            if self._timeout is None:
                self._client = httpx.AsyncClient()
            else:
                self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _unwrap(self, response: httpx.Response) -> Any:
        if not 200 <= response.status_code < 300:
            raise HttpError(response.status_code, getattr(response, "reason_phrase", "") or "")

        try:
            body = response.json()
        except ValueError as exc:
            raise DecodeError(
                "Invalid JSON in RPC response.", status_code=response.status_code
            ) from exc

        if not isinstance(body, dict):
            raise DecodeError("Unexpected RPC response envelope.", status_code=response.status_code)

        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                raise RpcError(error.get("code"), str(error.get("message", "")), error.get("data"))
            raise RpcError(None, str(error))

        return body.get("result")

    async def call(self, url: str, method: str, params: Optional[List[Any]] = None) -> Any:
        """
        POST one JSON-RPC request and return its ``result`` member.

        Raises:
            TransportError: connection refused, timeout, DNS failure.
            HttpError: non-2xx HTTP status.
            DecodeError: body is not a JSON object.
            RpcError: the envelope carries an ``error`` member.
        """
        envelope = build_envelope(method, params or [], self._next_id())
        client = await self._get_client()
        logger.debug("rpc method=%s id=%s url=%s", method, envelope["id"], url)
        try:
            response = await client.post(url, json=envelope, headers=JSON_HEADERS)
        except httpx.RequestError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        return self._unwrap(response)
