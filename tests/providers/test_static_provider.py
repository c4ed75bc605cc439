"""Tests for StaticProvider lookup, validation and error wrapping."""

from typing import Any

import pytest

from mcp_pool.protocols.errors import (
    InvalidParamsError,
    ResourceNotFoundError,
    ToolExecutionError,
    ToolNotFoundError,
)
from mcp_pool.protocols.models import ResourceDescriptor, ToolCallResult, ToolDescriptor
from mcp_pool.providers.base import ResourceEntry, StaticProvider, ToolEntry, json_text


async def _echo(args: dict[str, Any]) -> ToolCallResult:
    return ToolCallResult.from_text(f"echo {args['word']}")


async def _explode(args: dict[str, Any]) -> ToolCallResult:
    raise ValueError("exploded")


async def _missing(args: dict[str, Any]) -> ToolCallResult:
    raise ToolNotFoundError("nested")


def _provider() -> StaticProvider:
    echo = ToolDescriptor(
        name="echo",
        input_schema={
            "type": "object",
            "properties": {"word": {"type": "string"}},
            "required": ["word"],
        },
    )
    return StaticProvider(
        "demo",
        tools=[
            ToolEntry(echo, _echo),
            ToolEntry(ToolDescriptor(name="explode"), _explode),
            ToolEntry(ToolDescriptor(name="missing"), _missing),
        ],
        resources=[
            ResourceEntry(ResourceDescriptor(uri="demo://info", name="Info"), lambda: '{"a": 1}'),
            ResourceEntry(
                ResourceDescriptor(uri="demo://guide", mime_type="text/markdown"),
                lambda: "# Guide",
            ),
        ],
    )


class TestCatalog:
    async def test_list_tools_in_order(self) -> None:
        tools = await _provider().list_tools()
        assert [t.name for t in tools] == ["echo", "explode", "missing"]

    async def test_list_resources(self) -> None:
        resources = await _provider().list_resources()
        assert [r.uri for r in resources] == ["demo://info", "demo://guide"]


class TestReadResource:
    async def test_reads_content_with_mime_type(self) -> None:
        [content] = await _provider().read_resource("demo://guide")
        assert content.uri == "demo://guide"
        assert content.mime_type == "text/markdown"
        assert content.text == "# Guide"

    async def test_unknown_uri(self) -> None:
        with pytest.raises(ResourceNotFoundError, match="demo://nope"):
            await _provider().read_resource("demo://nope")


class TestCallTool:
    async def test_success(self) -> None:
        result = await _provider().call_tool("echo", {"word": "hi"})
        assert result.text == "echo hi"

    async def test_unknown_tool(self) -> None:
        with pytest.raises(ToolNotFoundError):
            await _provider().call_tool("ghost", {})

    async def test_missing_required_argument(self) -> None:
        with pytest.raises(InvalidParamsError, match="echo"):
            await _provider().call_tool("echo", {})

    async def test_wrong_argument_type(self) -> None:
        with pytest.raises(InvalidParamsError):
            await _provider().call_tool("echo", {"word": 5})

    async def test_handler_exception_is_wrapped(self) -> None:
        with pytest.raises(ToolExecutionError, match="exploded") as exc_info:
            await _provider().call_tool("explode", {})
        assert exc_info.value.name == "explode"

    async def test_gateway_errors_pass_through(self) -> None:
        with pytest.raises(ToolNotFoundError, match="nested"):
            await _provider().call_tool("missing", {})


class TestJsonText:
    def test_pretty_prints_unicode(self) -> None:
        assert json_text({"name": "café"}) == '{\n  "name": "café"\n}'
