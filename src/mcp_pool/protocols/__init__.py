"""Protocol layer — provider interface, registry, and method dispatch."""

from mcp_pool.protocols.dispatcher import MethodDispatcher
from mcp_pool.protocols.errors import (
    DuplicateProviderError,
    ErrorKind,
    GatewayError,
    InternalError,
    InvalidParamsError,
    InvalidRequestError,
    MethodNotSupportedError,
    ProviderNotFoundError,
    RegistrySealedError,
    ResourceNotFoundError,
    ToolExecutionError,
    ToolNotFoundError,
)
from mcp_pool.protocols.models import Outcome
from mcp_pool.protocols.provider import Provider
from mcp_pool.protocols.registry import ProviderRegistry

__all__ = [
    "DuplicateProviderError",
    "ErrorKind",
    "GatewayError",
    "InternalError",
    "InvalidParamsError",
    "InvalidRequestError",
    "MethodDispatcher",
    "MethodNotSupportedError",
    "Outcome",
    "Provider",
    "ProviderNotFoundError",
    "ProviderRegistry",
    "RegistrySealedError",
    "ResourceNotFoundError",
    "ToolExecutionError",
    "ToolNotFoundError",
]
