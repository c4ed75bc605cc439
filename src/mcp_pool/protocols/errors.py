"""Shared error types for the gateway protocol layer.

Every failure the dispatcher can report carries an :class:`ErrorKind`.
Adapters render the kind, never the exception type: the JSON-RPC adapter
as a numeric code, the REST adapter as an HTTP status.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Normalized failure categories shared by every adapter."""

    INVALID_REQUEST = "invalid_request"
    METHOD_NOT_SUPPORTED = "method_not_supported"
    PROVIDER_NOT_FOUND = "provider_not_found"
    TOOL_NOT_FOUND = "tool_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_PARAMS = "invalid_params"
    TOOL_EXECUTION_ERROR = "tool_execution_error"
    INTERNAL_ERROR = "internal_error"

    @property
    def jsonrpc_code(self) -> int:
        return _JSONRPC_CODES[self]

    @property
    def http_status(self) -> int:
        return _HTTP_STATUSES[self]


_JSONRPC_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: -32600,
    ErrorKind.METHOD_NOT_SUPPORTED: -32601,
    ErrorKind.INVALID_PARAMS: -32602,
    ErrorKind.INTERNAL_ERROR: -32603,
    ErrorKind.TOOL_EXECUTION_ERROR: -32000,
    ErrorKind.PROVIDER_NOT_FOUND: -32001,
    ErrorKind.RESOURCE_NOT_FOUND: -32002,
    ErrorKind.TOOL_NOT_FOUND: -32003,
}

_HTTP_STATUSES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.INVALID_PARAMS: 400,
    ErrorKind.METHOD_NOT_SUPPORTED: 400,
    ErrorKind.PROVIDER_NOT_FOUND: 404,
    ErrorKind.TOOL_NOT_FOUND: 404,
    ErrorKind.RESOURCE_NOT_FOUND: 404,
    ErrorKind.TOOL_EXECUTION_ERROR: 500,
    ErrorKind.INTERNAL_ERROR: 500,
}


class GatewayError(Exception):
    """Base error for all protocol-layer failures."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR


class InvalidRequestError(GatewayError):
    """The JSON-RPC envelope is malformed."""

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Invalid Request" + (f": {detail}" if detail else ""))


class MethodNotSupportedError(GatewayError):
    """The JSON-RPC method is not one the gateway knows how to route."""

    kind = ErrorKind.METHOD_NOT_SUPPORTED

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method {method} not supported")


class ProviderNotFoundError(GatewayError):
    """No provider is registered under the requested name."""

    kind = ErrorKind.PROVIDER_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"MCP '{name}' not found")


class ToolNotFoundError(GatewayError):
    """Requested tool does not exist in the provider's catalog."""

    kind = ErrorKind.TOOL_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ResourceNotFoundError(GatewayError):
    """Requested resource URI is not served by the provider."""

    kind = ErrorKind.RESOURCE_NOT_FOUND

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Resource not found: {uri}")


class InvalidParamsError(GatewayError):
    """A required parameter is missing or has the wrong shape."""

    kind = ErrorKind.INVALID_PARAMS

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid params: {detail}")


class ToolExecutionError(GatewayError):
    """A tool invocation failed at the provider side."""

    kind = ErrorKind.TOOL_EXECUTION_ERROR

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Error executing {name}" + (f": {detail}" if detail else ""))


class InternalError(GatewayError):
    """Anything the dispatcher did not anticipate."""

    kind = ErrorKind.INTERNAL_ERROR

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Internal error" + (f": {detail}" if detail else ""))


class DuplicateProviderError(GatewayError):
    """A provider name was registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Provider already registered: {name}")


class RegistrySealedError(GatewayError):
    """Registration was attempted after the registry started serving."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Registry is sealed; cannot register {name}")
