"""HTTP gateway — JSON-RPC and REST adapters over the method dispatcher."""

from mcp_pool.gateway.app import create_app
from mcp_pool.gateway.jsonrpc import JsonRpcAdapter, JsonRpcReply
from mcp_pool.gateway.rest import build_provider_router, resource_uri

__all__ = [
    "JsonRpcAdapter",
    "JsonRpcReply",
    "build_provider_router",
    "create_app",
    "resource_uri",
]
