"""Gateway models — provider descriptors, JSON-RPC envelopes, and outcomes.

Descriptors use the MCP wire names (``inputSchema``, ``mimeType``,
``isError``) as aliases so that ``model_dump(by_alias=True)`` yields
exactly what a client of ``tools/list`` or ``resources/list`` expects.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from mcp_pool.protocols.errors import ErrorKind, GatewayError

JSONRPC_VERSION = "2.0"
NOTIFICATION_PREFIX = "notifications/"

# ---------------------------------------------------------------------------
# Provider catalog
# ---------------------------------------------------------------------------


class ToolDescriptor(BaseModel):
    """A tool advertised by a provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}},
        alias="inputSchema",
    )


class ResourceDescriptor(BaseModel):
    """A URI-addressed resource advertised by a provider."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uri: str
    name: str = ""
    description: str = ""
    mime_type: str = Field(default="application/json", alias="mimeType")


class ResourceContent(BaseModel):
    """One content block returned by ``resources/read``."""

    model_config = ConfigDict(populate_by_name=True)

    uri: str
    mime_type: str = Field(default="application/json", alias="mimeType")
    text: str


class TextContent(BaseModel):
    """Plain text content part of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """The payload returned by ``tools/call``."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent] = []
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str) -> ToolCallResult:
        """Create a result with a single text content part."""
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "\n".join(part.text for part in self.content)


# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request or notification.

    ``params`` is kept untyped; the dispatcher decides what shapes a method
    accepts and answers with ``InvalidParams`` itself.
    """

    jsonrpc: Literal["2.0"]
    method: str = Field(min_length=1)
    params: Any = None
    id: int | str | None = None

    @property
    def is_notification(self) -> bool:
        return is_notification(self.method)


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    Exactly one of ``result`` and ``error`` is rendered; see :meth:`to_wire`.
    """

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None

    def to_wire(self) -> dict[str, Any]:
        if self.error is not None:
            return {"jsonrpc": self.jsonrpc, "error": self.error.model_dump(), "id": self.id}
        return {"jsonrpc": self.jsonrpc, "result": self.result, "id": self.id}


def is_notification(method: str) -> bool:
    """Return ``True`` for methods in the fire-and-forget namespace."""
    return method.startswith(NOTIFICATION_PREFIX)


# ---------------------------------------------------------------------------
# Dispatcher outcome
# ---------------------------------------------------------------------------


class Failure(BaseModel):
    """The failure half of an :class:`Outcome`."""

    kind: ErrorKind
    message: str


class Outcome(BaseModel):
    """Normalized result of one dispatch.

    Three shapes:

    * success — ``value`` holds the structured payload;
    * failure — ``failure`` holds the kind and message;
    * no response owed — a notification was acknowledged.
    """

    value: Any = None
    failure: Failure | None = None
    no_response: bool = False

    @classmethod
    def success(cls, value: Any) -> Outcome:
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> Outcome:
        return cls(failure=Failure(kind=kind, message=message))

    @classmethod
    def from_error(cls, exc: GatewayError) -> Outcome:
        return cls.fail(exc.kind, str(exc))

    @classmethod
    def acknowledged(cls) -> Outcome:
        return cls(no_response=True)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def to_jsonrpc(self, request_id: int | str | None) -> JsonRpcResponse:
        """Render as a JSON-RPC response envelope."""
        if self.failure is not None:
            error = JsonRpcError(code=self.failure.kind.jsonrpc_code, message=self.failure.message)
            return JsonRpcResponse(id=request_id, error=error)
        return JsonRpcResponse(id=request_id, result=self.value)
