"""REST adapter — convenience routes that reduce to dispatcher calls.

Every route is one :meth:`MethodDispatcher.dispatch` call repackaged as a
plain JSON body.  Failures carry only the message text; JSON-RPC error
codes never leak onto these routes.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from mcp_pool.gateway.jsonrpc import JsonRpcAdapter, install_jsonrpc_route
from mcp_pool.protocols.dispatcher import PROTOCOL_VERSION, SUPPORTED_METHODS
from mcp_pool.protocols.errors import InvalidParamsError
from mcp_pool.protocols.models import Outcome
from mcp_pool.utils.timestamps import utc_timestamp

if TYPE_CHECKING:
    from mcp_pool.protocols.dispatcher import MethodDispatcher


def resource_uri(provider_name: str, tail: str) -> str:
    """Reassemble a wildcard path tail into a provider-scheme URI."""
    scheme = f"{provider_name}://"
    return tail if tail.startswith(scheme) else f"{scheme}{tail}"


def render_rest(outcome: Outcome, success: dict[str, Any], **context: Any) -> Response:
    """Render *outcome* as ``{success, ...}`` or ``{success: false, error}``.

    *success* is the body for a successful outcome; *context* fields (the
    tool name, the URI) are added to failure bodies.
    """
    if outcome.no_response:
        return Response(status_code=204)
    if outcome.failure is not None:
        return JSONResponse(
            status_code=outcome.failure.kind.http_status,
            content={"success": False, "error": outcome.failure.message, **context},
        )
    return JSONResponse(content={"success": True, **success})


def describe_provider(provider_name: str) -> dict[str, Any]:
    """Static capability description served on ``GET /{provider}``."""
    return {
        "transport": "MCP-over-HTTP",
        "protocol": "JSON-RPC 2.0",
        "version": PROTOCOL_VERSION,
        "server": f"{provider_name}-mcp-server",
        "methods": list(SUPPORTED_METHODS),
        "usage": "POST with JSON-RPC 2.0 payload",
        "endpoints": {
            "/health": "Health check",
            "/tools": "List available tools (REST)",
            "/resources": "List available resources (REST)",
            "/": "MCP JSON-RPC endpoint (POST)",
        },
    }


def build_provider_router(provider_name: str, dispatcher: MethodDispatcher) -> APIRouter:
    """Build the JSON-RPC and REST routes for one registered provider."""
    router = APIRouter(prefix=f"/{provider_name}", tags=[provider_name])
    registry = dispatcher.registry

    async def health() -> dict[str, Any]:
        return {
            "status": "healthy",
            "service": f"{provider_name}-mcp",
            "timestamp": utc_timestamp(),
            "mcp_process": "running" if provider_name in registry else "stopped",
        }

    async def info() -> dict[str, Any]:
        return describe_provider(provider_name)

    async def list_tools() -> Response:
        outcome = await dispatcher.dispatch(provider_name, "tools/list")
        tools = (outcome.value or {}).get("tools", []) if outcome.ok else []
        return render_rest(outcome, {"tools": tools, "count": len(tools)})

    async def list_resources() -> Response:
        outcome = await dispatcher.dispatch(provider_name, "resources/list")
        resources = (outcome.value or {}).get("resources", []) if outcome.ok else []
        return render_rest(outcome, {"resources": resources, "count": len(resources)})

    async def call_tool(tool_name: str, request: Request) -> Response:
        try:
            arguments = await json_body(request)
        except InvalidParamsError as exc:
            return render_rest(Outcome.from_error(exc), {}, tool=tool_name)
        outcome = await dispatcher.dispatch(
            provider_name,
            "tools/call",
            {"name": tool_name, "arguments": arguments},
        )
        return render_rest(outcome, {"tool": tool_name, "result": outcome.value}, tool=tool_name)

    async def read_resource(tail: str) -> Response:
        uri = resource_uri(provider_name, tail)
        outcome = await dispatcher.dispatch(provider_name, "resources/read", {"uri": uri})
        contents = (outcome.value or {}).get("contents", []) if outcome.ok else []
        return render_rest(outcome, {"uri": uri, "contents": contents}, uri=uri)

    router.add_api_route("/health", health, methods=["GET"], name=f"{provider_name}:health")
    router.add_api_route("", info, methods=["GET"], name=f"{provider_name}:info")
    install_jsonrpc_route(router, provider_name, JsonRpcAdapter(dispatcher))
    router.add_api_route("/tools", list_tools, methods=["GET"], name=f"{provider_name}:tools")
    router.add_api_route(
        "/resources", list_resources, methods=["GET"], name=f"{provider_name}:resources"
    )
    router.add_api_route(
        "/tools/{tool_name}", call_tool, methods=["POST"], name=f"{provider_name}:call_tool"
    )
    router.add_api_route(
        "/resources/{tail:path}",
        read_resource,
        methods=["GET"],
        name=f"{provider_name}:read_resource",
    )
    return router


async def json_body(request: Request) -> Any:
    """Decode a request body; an empty body means ``{}``."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidParamsError(f"request body is not valid JSON ({exc})") from exc
