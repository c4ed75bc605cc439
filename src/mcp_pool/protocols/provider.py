"""Provider protocol — the four operations the gateway consumes.

Anything that satisfies :class:`Provider` can be registered with the
:class:`~mcp_pool.protocols.registry.ProviderRegistry`; the dispatcher never
looks past these methods into a provider's own transport plumbing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from mcp_pool.protocols.models import (
        ResourceContent,
        ResourceDescriptor,
        ToolCallResult,
        ToolDescriptor,
    )


@runtime_checkable
class Provider(Protocol):
    """Lists and executes the tools and resources of one named service."""

    async def list_tools(self) -> list[ToolDescriptor]:
        """Return the provider's tool catalog."""
        ...

    async def list_resources(self) -> list[ResourceDescriptor]:
        """Return the provider's resource catalog."""
        ...

    async def read_resource(self, uri: str) -> list[ResourceContent]:
        """Return the content blocks for *uri*.

        Raises :class:`~mcp_pool.protocols.errors.ResourceNotFoundError` for
        an unknown URI.
        """
        ...

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> ToolCallResult:
        """Execute the tool *name* with *arguments*.

        Raises :class:`~mcp_pool.protocols.errors.ToolNotFoundError` or
        :class:`~mcp_pool.protocols.errors.ToolExecutionError`.
        """
        ...
