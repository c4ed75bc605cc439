"""JSON-RPC adapter — one JSON-RPC 2.0 channel per provider.

Each inbound call is handled on its own: validate the envelope, classify it
as request or notification, dispatch, and render the outcome.  Envelope
failures are answered here and never reach the dispatcher.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from mcp_pool.protocols.errors import ErrorKind, InvalidRequestError
from mcp_pool.protocols.models import JsonRpcRequest, Outcome

if TYPE_CHECKING:
    from mcp_pool.protocols.dispatcher import MethodDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonRpcReply:
    """What the transport should send back: a status and an optional body."""

    status_code: int
    payload: dict[str, Any] | None = None


class JsonRpcAdapter:
    """Terminates JSON-RPC calls and maps dispatcher outcomes to envelopes."""

    def __init__(self, dispatcher: MethodDispatcher) -> None:
        self._dispatcher = dispatcher

    async def handle_raw(self, provider_name: str, body: bytes) -> JsonRpcReply:
        """Decode *body* and handle it; undecodable bodies get an id-less error."""
        try:
            message: Any = json.loads(body) if body else None
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("Undecodable JSON-RPC body for %s: %s", provider_name, exc)
            return _invalid_request(None, "body is not valid JSON")
        return await self.handle(provider_name, message)

    async def handle(self, provider_name: str, message: Any) -> JsonRpcReply:
        """Handle one decoded JSON-RPC message."""
        if not isinstance(message, dict):
            return _invalid_request(None, "expected a JSON object")

        # Read the id before validating so malformed envelopes can still echo it.
        request_id = message.get("id")
        if not isinstance(request_id, int | str) or isinstance(request_id, bool):
            request_id = None

        try:
            request = JsonRpcRequest.model_validate(message)
        except ValidationError as exc:
            error = exc.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "request"
            return _invalid_request(request_id, f"{field}: {error['msg']}")

        logger.debug("%s JSON-RPC %s id=%s", provider_name, request.method, request_id)
        outcome = await self._dispatcher.dispatch(provider_name, request.method, request.params)

        if request.is_notification or outcome.no_response:
            return JsonRpcReply(status_code=204)

        return render_outcome(outcome, request_id)


def render_outcome(outcome: Outcome, request_id: int | str | None) -> JsonRpcReply:
    """Render a request's outcome as a JSON-RPC response envelope."""
    status = 200 if outcome.failure is None else outcome.failure.kind.http_status
    return JsonRpcReply(status_code=status, payload=outcome.to_jsonrpc(request_id).to_wire())


def _invalid_request(request_id: int | str | None, detail: str = "") -> JsonRpcReply:
    outcome = Outcome.from_error(InvalidRequestError(detail))
    return JsonRpcReply(
        status_code=ErrorKind.INVALID_REQUEST.http_status,
        payload=outcome.to_jsonrpc(request_id).to_wire(),
    )


def install_jsonrpc_route(router: APIRouter, provider_name: str, adapter: JsonRpcAdapter) -> None:
    """Add ``POST /`` on *router* as *provider_name*'s JSON-RPC endpoint."""

    async def jsonrpc_endpoint(request: Request) -> Response:
        reply = await adapter.handle_raw(provider_name, await request.body())
        if reply.payload is None:
            return Response(status_code=reply.status_code)
        return JSONResponse(status_code=reply.status_code, content=reply.payload)

    router.add_api_route(
        "",
        jsonrpc_endpoint,
        methods=["POST"],
        name=f"{provider_name}:jsonrpc",
        summary=f"{provider_name} JSON-RPC 2.0 endpoint",
    )
