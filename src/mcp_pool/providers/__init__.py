"""Built-in providers and the default registry."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from mcp_pool.protocols.errors import ProviderNotFoundError
from mcp_pool.protocols.provider import Provider
from mcp_pool.protocols.registry import ProviderRegistry
from mcp_pool.providers.base import StaticProvider
from mcp_pool.providers.convex import ConvexProvider
from mcp_pool.providers.material_ui import MaterialUIProvider

BUILTIN_PROVIDERS: dict[str, Callable[[], Provider]] = {
    "convex": ConvexProvider,
    "material-ui": MaterialUIProvider,
}


def build_default_registry(enabled: Iterable[str] | None = None) -> ProviderRegistry:
    """Instantiate the built-in providers and return an unsealed registry.

    *enabled* restricts the registry to the named providers; an unknown name
    raises :class:`ProviderNotFoundError` instead of being skipped.
    """
    names = list(BUILTIN_PROVIDERS) if enabled is None else list(enabled)
    registry = ProviderRegistry()
    for name in names:
        factory = BUILTIN_PROVIDERS.get(name)
        if factory is None:
            raise ProviderNotFoundError(name)
        registry.register(name, factory())
    return registry


__all__ = [
    "BUILTIN_PROVIDERS",
    "ConvexProvider",
    "MaterialUIProvider",
    "StaticProvider",
    "build_default_registry",
]
