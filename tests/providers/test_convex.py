"""Tests for the mock Convex provider."""

import json

import pytest

from mcp_pool.protocols.errors import InvalidParamsError, ResourceNotFoundError
from mcp_pool.providers.convex import ConvexProvider


def _payload(text: str) -> object:
    """Parse the JSON block that follows the headline of a tool result."""
    return json.loads(text.split("\n\n", 1)[1])


@pytest.fixture
def convex() -> ConvexProvider:
    return ConvexProvider()


class TestCatalog:
    async def test_tools(self, convex: ConvexProvider) -> None:
        names = [t.name for t in await convex.list_tools()]
        assert names == [
            "create_table",
            "insert_document",
            "query_documents",
            "update_document",
            "delete_document",
        ]

    async def test_resources(self, convex: ConvexProvider) -> None:
        uris = [r.uri for r in await convex.list_resources()]
        assert uris == ["convex://tables", "convex://schema", "convex://functions"]

    async def test_resource_uris_use_provider_scheme(self, convex: ConvexProvider) -> None:
        for res in await convex.list_resources():
            assert res.uri.startswith("convex://")


class TestTools:
    async def test_create_table(self, convex: ConvexProvider) -> None:
        result = await convex.call_tool("create_table", {"name": "users"})
        assert "Table 'users' created successfully" in result.text
        payload = _payload(result.text)
        assert payload["table"] == "users"
        assert payload["schema"] == {}
        assert payload["created_at"].endswith("Z")

    async def test_create_table_requires_name(self, convex: ConvexProvider) -> None:
        with pytest.raises(InvalidParamsError, match="name"):
            await convex.call_tool("create_table", {})

    async def test_insert_document(self, convex: ConvexProvider) -> None:
        result = await convex.call_tool(
            "insert_document", {"table": "users", "document": {"name": "Ann"}}
        )
        payload = _payload(result.text)
        assert payload["document"] == {"name": "Ann"}
        assert payload["document_id"].startswith("doc_")

    async def test_query_documents_respects_limit(self, convex: ConvexProvider) -> None:
        result = await convex.call_tool("query_documents", {"table": "users", "limit": 1})
        assert "(1 documents)" in result.text
        assert [doc["_id"] for doc in _payload(result.text)] == ["user_1"]

    async def test_query_unknown_table_is_empty(self, convex: ConvexProvider) -> None:
        result = await convex.call_tool("query_documents", {"table": "nothing"})
        assert _payload(result.text) == []

    async def test_update_document(self, convex: ConvexProvider) -> None:
        result = await convex.call_tool(
            "update_document", {"table": "users", "id": "user_1", "updates": {"name": "J"}}
        )
        assert "'user_1' updated in 'users'" in result.text

    async def test_delete_document(self, convex: ConvexProvider) -> None:
        result = await convex.call_tool("delete_document", {"table": "users", "id": "user_2"})
        assert "'user_2' deleted from 'users'" in result.text
        assert _payload(result.text)["success"] is True


class TestResources:
    async def test_tables(self, convex: ConvexProvider) -> None:
        [content] = await convex.read_resource("convex://tables")
        assert content.mime_type == "application/json"
        assert "users" in json.loads(content.text)["tables"]

    async def test_schema(self, convex: ConvexProvider) -> None:
        [content] = await convex.read_resource("convex://schema")
        assert set(json.loads(content.text)["schema"]) == {"users", "messages", "documents"}

    async def test_functions(self, convex: ConvexProvider) -> None:
        [content] = await convex.read_resource("convex://functions")
        assert "queries" in json.loads(content.text)["functions"]

    async def test_unknown_resource(self, convex: ConvexProvider) -> None:
        with pytest.raises(ResourceNotFoundError):
            await convex.read_resource("convex://sessions")
