"""mcp-pool — one HTTP endpoint multiplexing several MCP tool providers."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from mcp_pool.gateway.app import create_app as create_app
    from mcp_pool.protocols.dispatcher import MethodDispatcher as MethodDispatcher
    from mcp_pool.protocols.registry import ProviderRegistry as ProviderRegistry

_LAZY_EXPORTS = {
    "create_app": "mcp_pool.gateway.app",
    "MethodDispatcher": "mcp_pool.protocols.dispatcher",
    "ProviderRegistry": "mcp_pool.protocols.registry",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'mcp_pool' has no attribute {name!r}")
