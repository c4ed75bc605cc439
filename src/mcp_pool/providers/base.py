"""StaticProvider — a provider built from catalog data at construction time.

Concrete providers hand the base class their tool descriptors with an async
handler for each, and their resource descriptors with a reader for each.
The base class owns lookup, argument validation and error wrapping, so the
catalogs contain only domain content.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from mcp_pool.protocols.errors import (
    GatewayError,
    InvalidParamsError,
    ResourceNotFoundError,
    ToolExecutionError,
    ToolNotFoundError,
)
from mcp_pool.protocols.models import (
    ResourceContent,
    ResourceDescriptor,
    ToolCallResult,
    ToolDescriptor,
)

logger = logging.getLogger(__name__)

ToolHandler = Callable[[dict[str, Any]], Awaitable[ToolCallResult]]
ResourceReader = Callable[[], str]


@dataclass(frozen=True)
class ToolEntry:
    """A tool descriptor paired with the coroutine that executes it."""

    descriptor: ToolDescriptor
    handler: ToolHandler


@dataclass(frozen=True)
class ResourceEntry:
    """A resource descriptor paired with the function that renders it."""

    descriptor: ResourceDescriptor
    reader: ResourceReader


class StaticProvider:
    """Serves a fixed catalog of tools and resources.

    Satisfies the :class:`~mcp_pool.protocols.provider.Provider` protocol.
    The catalog is fixed once the constructor returns.
    """

    def __init__(
        self,
        name: str,
        tools: list[ToolEntry],
        resources: list[ResourceEntry],
    ) -> None:
        self.name = name
        self._tools = {entry.descriptor.name: entry for entry in tools}
        self._resources = {entry.descriptor.uri: entry for entry in resources}
        self._validators = {
            tool_name: Draft7Validator(entry.descriptor.input_schema)
            for tool_name, entry in self._tools.items()
        }

    async def list_tools(self) -> list[ToolDescriptor]:
        return [entry.descriptor for entry in self._tools.values()]

    async def list_resources(self) -> list[ResourceDescriptor]:
        return [entry.descriptor for entry in self._resources.values()]

    async def read_resource(self, uri: str) -> list[ResourceContent]:
        entry = self._resources.get(uri)
        if entry is None:
            raise ResourceNotFoundError(uri)
        return [
            ResourceContent(uri=uri, mime_type=entry.descriptor.mime_type, text=entry.reader())
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        entry = self._tools.get(name)
        if entry is None:
            raise ToolNotFoundError(name)

        error = best_match(self._validators[name].iter_errors(arguments))
        if error is not None:
            raise InvalidParamsError(f"{name}: {error.message}")

        try:
            return await entry.handler(arguments)
        except GatewayError:
            raise
        except Exception as exc:
            logger.debug("Tool %s.%s raised", self.name, name, exc_info=True)
            raise ToolExecutionError(name, str(exc)) from exc


def json_text(payload: Any) -> str:
    """Pretty-print *payload* the way the resource readers serve it."""
    return json.dumps(payload, indent=2, ensure_ascii=False)
