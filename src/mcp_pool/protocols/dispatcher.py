"""MethodDispatcher — maps protocol methods onto provider operations.

The dispatcher is the single translation point between providers and the
adapters: whatever a provider raises or returns, :meth:`dispatch` hands back
an :class:`~mcp_pool.protocols.models.Outcome`.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from opentelemetry import trace

from mcp_pool.protocols.errors import (
    GatewayError,
    InternalError,
    InvalidParamsError,
    MethodNotSupportedError,
    ToolExecutionError,
)
from mcp_pool.protocols.models import Outcome, is_notification
from mcp_pool.utils.telemetry import (
    ATTR_ERROR_KIND,
    ATTR_METHOD,
    ATTR_OUTCOME,
    ATTR_PROVIDER,
    ATTR_RESOURCE_URI,
    ATTR_TOOL_NAME,
    get_tracer,
)

if TYPE_CHECKING:
    from mcp_pool.protocols.provider import Provider
    from mcp_pool.protocols.registry import ProviderRegistry

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_VERSION = "1.0.0"

SUPPORTED_METHODS = (
    "initialize",
    "tools/list",
    "tools/call",
    "resources/list",
    "resources/read",
    "ping",
)

_Handler = Callable[[str, "Provider", dict[str, Any]], Awaitable[Any]]


class MethodDispatcher:
    """Routes ``(provider, method, params)`` to the right provider operation.

    Usage::

        dispatcher = MethodDispatcher(registry)
        outcome = await dispatcher.dispatch("convex", "tools/list", {})
        if outcome.ok:
            print(outcome.value["tools"])
    """

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry
        self._handlers: dict[str, _Handler] = {
            "initialize": self._initialize,
            "ping": self._ping,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
            "resources/list": self._list_resources,
            "resources/read": self._read_resource,
        }

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    async def dispatch(
        self,
        provider_name: str,
        method: str,
        params: Any = None,
    ) -> Outcome:
        """Run *method* against *provider_name* and normalize the result."""
        with _tracer.start_as_current_span("mcp_pool.dispatch") as span:
            span.set_attribute(ATTR_PROVIDER, provider_name)
            span.set_attribute(ATTR_METHOD, method)

            outcome = await self._dispatch(provider_name, method, params)

            if outcome.failure is not None:
                span.set_attribute(ATTR_OUTCOME, "failure")
                span.set_attribute(ATTR_ERROR_KIND, outcome.failure.kind.value)
            else:
                span.set_attribute(ATTR_OUTCOME, "ack" if outcome.no_response else "success")
            return outcome

    async def _dispatch(self, provider_name: str, method: str, params: Any) -> Outcome:
        try:
            provider = self._registry.get(provider_name)

            if is_notification(method):
                logger.debug("Notification %s for %s acknowledged", method, provider_name)
                return Outcome.acknowledged()

            handler = self._handlers.get(method)
            if handler is None:
                raise MethodNotSupportedError(method)

            if params is None:
                params = {}
            elif not isinstance(params, dict):
                raise InvalidParamsError("params must be an object")

            return Outcome.success(await handler(provider_name, provider, params))
        except GatewayError as exc:
            logger.warning("%s on %s failed: %s", method, provider_name, exc)
            return Outcome.from_error(exc)
        except Exception as exc:
            logger.exception("Unexpected error calling %s on %s", method, provider_name)
            return Outcome.from_error(InternalError(str(exc)))

    # -- method handlers ---------------------------------------------------

    async def _initialize(self, provider_name: str, _provider: Provider, _params: dict[str, Any]) -> Any:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"tools": {}, "resources": {}},
            "serverInfo": {"name": f"{provider_name}-mcp-server", "version": SERVER_VERSION},
        }

    async def _ping(self, _name: str, _provider: Provider, _params: dict[str, Any]) -> Any:
        return {"status": "pong"}

    async def _list_tools(self, _name: str, provider: Provider, _params: dict[str, Any]) -> Any:
        tools = await provider.list_tools()
        return {"tools": [tool.model_dump(by_alias=True) for tool in tools]}

    async def _list_resources(self, _name: str, provider: Provider, _params: dict[str, Any]) -> Any:
        resources = await provider.list_resources()
        return {"resources": [res.model_dump(by_alias=True) for res in resources]}

    async def _read_resource(self, _name: str, provider: Provider, params: dict[str, Any]) -> Any:
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            raise InvalidParamsError("'uri' is required")

        trace.get_current_span().set_attribute(ATTR_RESOURCE_URI, uri)
        contents = await provider.read_resource(uri)
        return {"contents": [item.model_dump(by_alias=True) for item in contents]}

    async def _call_tool(self, _name: str, provider: Provider, params: dict[str, Any]) -> Any:
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidParamsError("'name' is required")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidParamsError("'arguments' must be an object")

        trace.get_current_span().set_attribute(ATTR_TOOL_NAME, name)
        result = await provider.call_tool(name, arguments)

        # Providers may also report trouble in-band instead of raising.
        if result.is_error:
            raise ToolExecutionError(name, result.text)
        return {"content": [part.model_dump() for part in result.content]}
