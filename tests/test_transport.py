import httpx
import pytest

from aztec_mcp.aztec_api import (
    AztecApiError,
    DecodeError,
    HttpError,
    JsonRpcTransport,
    RpcError,
    TransportError,
)
from aztec_mcp.aztec_api.transport import build_envelope


class MockResponse:
    def __init__(self, status_code: int, json_body=None, *, reason_phrase: str = "OK", invalid_json=False):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self._json = json_body
        self._invalid_json = invalid_json

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._json


class MockAsyncClient:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    async def post(self, url, json=None, headers=None):
        self.calls.append({"url": url, "json": json, "headers": headers})
        if not self.responses:
            raise RuntimeError("No mock responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    async def aclose(self):
        return None


def test_build_envelope_shape():
    assert build_envelope("node_getInfo", [], 7) == {
        "jsonrpc": "2.0",
        "method": "node_getInfo",
        "params": [],
        "id": 7,
    }


@pytest.mark.asyncio
async def test_call_posts_envelope_and_returns_result():
    mock = MockAsyncClient([MockResponse(200, {"jsonrpc": "2.0", "id": 1, "result": 42})])
    transport = JsonRpcTransport(async_client=mock)
    result = await transport.call("http://node:8080", "aztec_getBlockNumber")
    assert result == 42
    call = mock.calls[0]
    assert call["url"] == "http://node:8080"
    assert call["headers"] == {"Content-Type": "application/json"}
    assert call["json"] == {
        "jsonrpc": "2.0",
        "method": "aztec_getBlockNumber",
        "params": [],
        "id": 1,
    }


@pytest.mark.asyncio
async def test_request_ids_strictly_increase():
    mock = MockAsyncClient([MockResponse(200, {"result": None}) for _ in range(3)])
    transport = JsonRpcTransport(async_client=mock)
    for _ in range(3):
        await transport.call("http://pxe", "pxe_getPendingTxs")
    ids = [call["json"]["id"] for call in mock.calls]
    assert ids == [1, 2, 3]
    assert transport.last_request_id == 3


@pytest.mark.asyncio
async def test_missing_result_is_none():
    mock = MockAsyncClient([MockResponse(200, {"jsonrpc": "2.0", "id": 1})])
    transport = JsonRpcTransport(async_client=mock)
    assert await transport.call("http://pxe", "pxe_registerSender", ["0x1"]) is None
    assert mock.calls[0]["json"]["params"] == ["0x1"]


@pytest.mark.asyncio
async def test_non_2xx_raises_http_error():
    mock = MockAsyncClient([MockResponse(503, None, reason_phrase="Service Unavailable")])
    transport = JsonRpcTransport(async_client=mock)
    with pytest.raises(HttpError) as excinfo:
        await transport.call("http://node", "node_getInfo")
    assert excinfo.value.status_code == 503
    assert str(excinfo.value) == "HTTP error: 503 Service Unavailable"


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error():
    mock = MockAsyncClient([MockResponse(200, invalid_json=True)])
    transport = JsonRpcTransport(async_client=mock)
    with pytest.raises(DecodeError):
        await transport.call("http://node", "node_getInfo")


@pytest.mark.asyncio
async def test_non_object_body_raises_decode_error():
    mock = MockAsyncClient([MockResponse(200, [1, 2, 3])])
    transport = JsonRpcTransport(async_client=mock)
    with pytest.raises(DecodeError):
        await transport.call("http://node", "node_getInfo")


@pytest.mark.asyncio
async def test_rpc_error_carries_code_and_message():
    body = {"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "Method not found"}}
    mock = MockAsyncClient([MockResponse(200, body)])
    transport = JsonRpcTransport(async_client=mock)
    with pytest.raises(RpcError) as excinfo:
        await transport.call("http://pxe", "pxe_unknown")
    err = excinfo.value
    assert err.code == -32601
    assert err.rpc_message == "Method not found"
    assert str(err) == "RPC error: Method not found (code: -32601)"


@pytest.mark.asyncio
async def test_connection_failure_raises_transport_error():
    request = httpx.Request("POST", "http://down:8080")
    mock = MockAsyncClient([httpx.ConnectError("Connection refused", request=request)])
    transport = JsonRpcTransport(async_client=mock)
    with pytest.raises(TransportError) as excinfo:
        await transport.call("http://down:8080", "node_getInfo")
    assert "http://down:8080" in str(excinfo.value)
    assert isinstance(excinfo.value, AztecApiError)


@pytest.mark.asyncio
async def test_aclose_leaves_injected_client_open():
    closed = []

    class TrackingClient(MockAsyncClient):
        async def aclose(self):
            closed.append(True)

    transport = JsonRpcTransport(async_client=TrackingClient([]))
    await transport.aclose()
    assert closed == []
