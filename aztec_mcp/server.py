"""FastAPI application exposing the Aztec tools to MCP hosts."""

from __future__ import annotations

import json
import logging
import os
import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict, Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from aztec_mcp import mcp
from aztec_mcp.aztec_api import UrlUpdate, default_client
from aztec_mcp.catalog import TOOL_CATEGORIES, TOOL_COUNT
from aztec_mcp.config import default_config
from aztec_mcp.formatting import format_tool_result
from aztec_mcp.metrics import default_metrics
from aztec_mcp.resources import RESOURCES, UnknownResourceError, get_resource_content, list_resources

logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"
MCP_SERVER_NAME = "aztec-noir-mcp"
MCP_SERVER_VERSION = APP_VERSION

SERVER_INFO: Dict[str, Any] = {
    "name": MCP_SERVER_NAME,
    "version": APP_VERSION,
    "description": "MCP server for Aztec Network - Privacy-first zkRollup with Noir contracts",
    "features": {
        "tools": TOOL_COUNT,
        "resources": len(RESOURCES),
        "categories": len(TOOL_CATEGORIES),
    },
}

# JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
RESOURCE_NOT_FOUND = -32002

HEALTH_STATUS = {"status": "ok"}


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in ("tool", "request_id", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        return json.dumps(payload, default=str)


def _configure_logging() -> None:
    level = getattr(logging, default_config.log_level.upper(), logging.INFO)
    if default_config.log_format.lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler])
    else:
        logging.basicConfig(level=level)


_configure_logging()


class ToolCallError(Exception):
    """A tool failed; carries the tool name and the original error text."""

    def __init__(self, tool: str, arguments: Mapping[str, Any], cause: BaseException) -> None:
        self.tool = tool
        self.arguments = dict(arguments)
        self.cause = cause
        self.error = str(cause) or cause.__class__.__name__
        super().__init__(f"Tool '{tool}' failed: {self.error}")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info(
        "Starting %s %s with %d tools", MCP_SERVER_NAME, APP_VERSION, TOOL_COUNT
    )
    logger.info("Endpoints %s", default_client.get_urls())
    yield
    await default_client.aclose()


app = FastAPI(
    title="Aztec MCP Server",
    description="Aztec node, PXE and CLI tool surface for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


async def run_tool(
    tool_name: str, arguments: Mapping[str, Any], request_id: Optional[str] = None
) -> str:
    """
    Dispatch a tool and format its result as text.

    Raises:
        mcp.UnknownToolError: the tool is not in the catalog.
        ToolCallError: the tool raised; wraps the original exception.
    """
    try:
        result = await mcp.handle_tool_call(tool_name, arguments, default_client)
    except mcp.UnknownToolError:
        logger.warning(
            "tool=%s outcome=unknown request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )
        default_metrics.incr_unknown_tool()
        raise
    except Exception as exc:
        error = ToolCallError(tool_name, arguments, exc)
        logger.error(
            "tool=%s outcome=error error=%s request_id=%s",
            tool_name,
            error.error,
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": error.error},
        )
        default_metrics.record_tool(tool_name, success=False)
        raise error from exc

    logger.info(
        "tool=%s outcome=success request_id=%s",
        tool_name,
        request_id,
        extra={"tool": tool_name, "request_id": request_id},
    )
    default_metrics.record_tool(tool_name, success=True)
    return format_tool_result(result)


async def _network_status() -> Dict[str, Any]:
    try:
        return await default_client.health_check()
    except Exception:
        logger.exception("Unexpected error while checking network status")
        return {
            "error": "Unable to connect to Aztec network",
            "hint": "Ensure the Aztec sandbox is running: aztec start --sandbox",
        }


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight liveness endpoint for this server (not the Aztec network)."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    return JSONResponse(content=default_metrics.snapshot())


@app.get("/info")
async def info() -> JSONResponse:
    return JSONResponse(content=SERVER_INFO)


@app.get("/config/urls")
async def get_urls() -> JSONResponse:
    return JSONResponse(content=default_client.get_urls())


@app.post("/config/urls")
async def update_urls(request: Request) -> JSONResponse:
    """Apply a partial endpoint update; absent or empty fields are ignored."""
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body."})
    if not isinstance(body, dict):
        return JSONResponse(status_code=400, content={"error": "Expected a JSON object."})
    default_client.set_urls(UrlUpdate.from_mapping(body))
    return JSONResponse(content=default_client.get_urls())


@app.post("/tools/{tool_name}")
async def call_tool_route(tool_name: str, request: Request) -> JSONResponse:
    """Call one tool with a JSON object of arguments (empty body allowed)."""
    request_id = getattr(request.state, "request_id", None)
    raw = await request.body()
    try:
        arguments = json.loads(raw) if raw else {}
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Invalid JSON body."})
    if not isinstance(arguments, dict):
        return JSONResponse(status_code=400, content={"error": "Expected a JSON object."})
    try:
        text = await run_tool(tool_name, arguments, request_id)
    except mcp.UnknownToolError as exc:
        return JSONResponse(status_code=404, content={"error": str(exc)})
    except ToolCallError as exc:
        return JSONResponse(status_code=502, content={"error": str(exc), "tool": tool_name})
    return JSONResponse(content={"tool": tool_name, "text": text})


@app.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """
    JSON-RPC 2.0 gateway for MCP hosts.

    Supported methods:
      - initialize
      - tools/list (alias list_tools)
      - tools/call (alias call_tool)
      - resources/list
      - resources/read
      - notifications/initialized (no response body)
    """
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()

    def _respond(
        payload: Dict[str, Any],
        status_code: int = 200,
        *,
        outcome: str,
        method_label: Optional[str] = None,
        tool_label: Optional[str] = None,
        error_code: Optional[int] = None,
    ) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        logger.debug(
            "mcp outcome=%s method=%s tool=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            outcome,
            method_label,
            tool_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"request_id": request_id, "tool": tool_label, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload)

    def _error(
        rpc_id: Any,
        code: int,
        message: str,
        *,
        method_label: Optional[str],
        tool_label: Optional[str] = None,
        data: Any = None,
        status_code: int = 200,
    ) -> JSONResponse:
        return _respond(
            _jsonrpc_error_payload(rpc_id, code, message, data=data),
            status_code=status_code,
            outcome="error",
            method_label=method_label,
            tool_label=tool_label,
            error_code=code,
        )

    def _success(rpc_id: Any, result: Any, *, method_label: str, tool_label: Optional[str] = None) -> JSONResponse:
        return _respond(
            _jsonrpc_success_payload(rpc_id, result),
            outcome="success",
            method_label=method_label,
            tool_label=tool_label,
        )

    try:
        body = await request.json()
    except ValueError:
        return _error(None, PARSE_ERROR, "Parse error", method_label=None, status_code=400)

    if not isinstance(body, dict):
        return _error(None, INVALID_REQUEST, "Invalid request", method_label=None, status_code=400)

    method = body.get("method")
    rpc_id = body.get("id")
    raw_params = body.get("params")
    if raw_params is None:
        params: Dict[str, Any] = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        return _error(rpc_id, INVALID_PARAMS, "Invalid params", method_label=method)

    if not method:
        return _error(rpc_id, INVALID_REQUEST, "Invalid request", method_label=None)

    if method == "initialize":
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            return _error(rpc_id, INVALID_PARAMS, "Invalid params", method_label=method)
        result = {
            "protocolVersion": protocol_version,
            "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
            "capabilities": {
                "tools": {"listChanged": False},
                "resources": {"listChanged": False},
            },
        }
        return _success(rpc_id, result, method_label=method)

    if method in ("notifications/initialized", "initialized"):
        logger.debug(
            "mcp initialized notification received request_id=%s",
            request_id,
            extra={"request_id": request_id},
        )
        return Response(status_code=204)

    if method in ("list_tools", "tools/list"):
        return _success(rpc_id, {"tools": mcp.list_tools()}, method_label=method)

    if method in ("call_tool", "tools/call"):
        tool_name = params.get("name") or params.get("tool")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = params.get("params") or {}
        if not isinstance(tool_name, str) or not tool_name.strip():
            return _error(rpc_id, INVALID_PARAMS, "Invalid params", method_label=method)
        if not isinstance(arguments, dict):
            return _error(rpc_id, INVALID_PARAMS, "Invalid params", method_label=method, tool_label=tool_name)
        try:
            text = await run_tool(tool_name, arguments, request_id)
        except mcp.UnknownToolError as exc:
            return _error(rpc_id, INVALID_PARAMS, str(exc), method_label=method, tool_label=tool_name)
        except ToolCallError as exc:
            return _error(
                rpc_id,
                INTERNAL_ERROR,
                str(exc),
                method_label=method,
                tool_label=tool_name,
                data={"tool": exc.tool, "arguments": exc.arguments, "error": exc.error},
            )
        return _success(
            rpc_id,
            {"content": [{"type": "text", "text": text}]},
            method_label=method,
            tool_label=tool_name,
        )

    if method == "resources/list":
        return _success(rpc_id, {"resources": list_resources()}, method_label=method)

    if method == "resources/read":
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            return _error(rpc_id, INVALID_PARAMS, "Invalid params", method_label=method)
        try:
            content = await get_resource_content(uri, _network_status)
        except UnknownResourceError as exc:
            return _error(
                rpc_id,
                RESOURCE_NOT_FOUND,
                f"Resource '{uri}' not found: {exc}",
                method_label=method,
                data={"uri": uri},
            )
        return _success(
            rpc_id,
            {"contents": [{"uri": uri, "mimeType": content["mimeType"], "text": content["text"]}]},
            method_label=method,
        )

    return _error(rpc_id, METHOD_NOT_FOUND, "Method not found", method_label=method)


def _jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def _jsonrpc_error_payload(rpc_id: Any, code: int, message: str, *, data: Any = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": rpc_id, "error": error}


def main() -> None:
    """Run the server with uvicorn (``aztec-mcp`` console script)."""
    import uvicorn

    uvicorn.run(
        "aztec_mcp.server:app",
        host=os.getenv("AZTEC_MCP_HOST", "127.0.0.1"),
        port=int(os.getenv("AZTEC_MCP_PORT", "8000")),
    )


# Run with: uvicorn aztec_mcp.server:app --reload
