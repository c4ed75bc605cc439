"""ProviderRegistry — the name-to-provider map built once at startup."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from mcp_pool.protocols.errors import (
    DuplicateProviderError,
    ProviderNotFoundError,
    RegistrySealedError,
)
from mcp_pool.protocols.provider import Provider


class ProviderRegistry:
    """Holds live provider instances keyed by name.

    Providers are registered while the process starts up; :meth:`seal` is
    called before any adapter accepts traffic, after which the registry is
    read-only.

    Usage::

        registry = ProviderRegistry()
        registry.register("convex", ConvexProvider())
        registry.seal()

        provider = registry.get("convex")
    """

    def __init__(self) -> None:
        self._providers: dict[str, Provider] = {}
        self._sealed = False

    @classmethod
    def from_mapping(cls, providers: Mapping[str, Provider]) -> ProviderRegistry:
        """Build and seal a registry from an existing mapping."""
        registry = cls()
        for name, provider in providers.items():
            registry.register(name, provider)
        registry.seal()
        return registry

    def register(self, name: str, provider: Provider) -> None:
        """Add *provider* under *name*.

        Raises:
            TypeError: If *provider* does not implement :class:`Provider`.
        """
        if not isinstance(provider, Provider):
            raise TypeError(f"{type(provider).__name__} does not implement Provider")
        if self._sealed:
            raise RegistrySealedError(name)
        if name in self._providers:
            raise DuplicateProviderError(name)
        self._providers[name] = provider

    def seal(self) -> None:
        """Freeze the registry; further registration raises."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> Provider:
        """Return the provider registered as *name*."""
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFoundError(name) from None

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._providers)
