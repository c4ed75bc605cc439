"""Convex provider — mock database operations against a Convex-style backend.

Nothing is persisted: every tool echoes what it would have done and the
query tool serves canned records.
"""

from __future__ import annotations

import time
from typing import Any

from mcp_pool.protocols.models import ResourceDescriptor, ToolCallResult, ToolDescriptor
from mcp_pool.providers.base import ResourceEntry, StaticProvider, ToolEntry, json_text
from mcp_pool.utils.timestamps import utc_timestamp

PROVIDER_NAME = "convex"

_MOCK_DATA: dict[str, list[dict[str, Any]]] = {
    "users": [
        {"_id": "user_1", "name": "John Doe", "email": "john@example.com", "createdAt": "2024-01-01T00:00:00Z"},
        {"_id": "user_2", "name": "Jane Smith", "email": "jane@example.com", "createdAt": "2024-01-02T00:00:00Z"},
    ],
    "messages": [
        {"_id": "msg_1", "content": "Hello World!", "userId": "user_1", "timestamp": "2024-01-01T10:00:00Z"},
        {"_id": "msg_2", "content": "How are you?", "userId": "user_2", "timestamp": "2024-01-01T10:05:00Z"},
    ],
    "documents": [
        {
            "_id": "doc_1",
            "title": "Welcome Guide",
            "content": "Getting started...",
            "tags": ["guide"],
            "createdAt": "2024-01-01T00:00:00Z",
        },
    ],
}

_SCHEMA = {
    "users": {"fields": ["name", "email", "createdAt"], "indexes": ["email"]},
    "messages": {"fields": ["content", "userId", "timestamp"], "indexes": ["userId", "timestamp"]},
    "documents": {"fields": ["title", "content", "tags", "createdAt"], "indexes": ["tags", "createdAt"]},
}

_FUNCTIONS = {
    "queries": ["getUsers", "getMessages", "getDocuments"],
    "mutations": ["createUser", "sendMessage", "updateDocument"],
    "actions": ["sendEmail", "processDocument"],
}


def _tool(name: str, description: str, properties: dict[str, Any], required: list[str]) -> ToolDescriptor:
    return ToolDescriptor(
        name=name,
        description=description,
        input_schema={"type": "object", "properties": properties, "required": required},
    )


TOOLS = [
    _tool(
        "create_table",
        "Create a new table in Convex database",
        {
            "name": {"type": "string", "description": "Name of the table to create"},
            "schema": {"type": "object", "description": "Schema definition for the table"},
        },
        ["name"],
    ),
    _tool(
        "insert_document",
        "Insert a document into a Convex table",
        {
            "table": {"type": "string", "description": "Table name to insert into"},
            "document": {"type": "object", "description": "Document data to insert"},
        },
        ["table", "document"],
    ),
    _tool(
        "query_documents",
        "Query documents from a Convex table",
        {
            "table": {"type": "string", "description": "Table name to query from"},
            "filter": {"type": "object", "description": "Filter criteria for the query"},
            "limit": {"type": "number", "description": "Maximum number of documents to return", "default": 10},
        },
        ["table"],
    ),
    _tool(
        "update_document",
        "Update a document in a Convex table",
        {
            "table": {"type": "string", "description": "Table name containing the document"},
            "id": {"type": "string", "description": "Document ID to update"},
            "updates": {"type": "object", "description": "Fields to update"},
        },
        ["table", "id", "updates"],
    ),
    _tool(
        "delete_document",
        "Delete a document from a Convex table",
        {
            "table": {"type": "string", "description": "Table name containing the document"},
            "id": {"type": "string", "description": "Document ID to delete"},
        },
        ["table", "id"],
    ),
]

RESOURCES = [
    ResourceDescriptor(
        uri="convex://tables",
        name="Database Tables",
        description="List of all tables in the Convex database",
    ),
    ResourceDescriptor(
        uri="convex://schema",
        name="Database Schema",
        description="Complete schema definition of the database",
    ),
    ResourceDescriptor(
        uri="convex://functions",
        name="Convex Functions",
        description="List of available Convex functions",
    ),
]


class ConvexProvider(StaticProvider):
    """Mock Convex database provider."""

    def __init__(self) -> None:
        handlers = {
            "create_table": self.create_table,
            "insert_document": self.insert_document,
            "query_documents": self.query_documents,
            "update_document": self.update_document,
            "delete_document": self.delete_document,
        }
        readers = {
            "convex://tables": self._read_tables,
            "convex://schema": self._read_schema,
            "convex://functions": self._read_functions,
        }
        super().__init__(
            PROVIDER_NAME,
            tools=[ToolEntry(tool, handlers[tool.name]) for tool in TOOLS],
            resources=[ResourceEntry(res, readers[res.uri]) for res in RESOURCES],
        )

    # -- tools ---------------------------------------------------------------

    async def create_table(self, args: dict[str, Any]) -> ToolCallResult:
        name = args["name"]
        result = {
            "success": True,
            "table": name,
            "schema": args.get("schema") or {},
            "created_at": utc_timestamp(),
            "message": f"Table '{name}' created successfully",
        }
        return ToolCallResult.from_text(f"✅ Table '{name}' created successfully!\n\n{json_text(result)}")

    async def insert_document(self, args: dict[str, Any]) -> ToolCallResult:
        table = args["table"]
        result = {
            "success": True,
            "table": table,
            "document_id": f"doc_{int(time.time() * 1000)}",
            "document": args["document"],
            "inserted_at": utc_timestamp(),
        }
        return ToolCallResult.from_text(f"✅ Document inserted into '{table}'!\n\n{json_text(result)}")

    async def query_documents(self, args: dict[str, Any]) -> ToolCallResult:
        table = args["table"]
        limit = int(args.get("limit", 10))
        documents = _MOCK_DATA.get(table, [])[:max(limit, 0)]
        return ToolCallResult.from_text(
            f"📋 Query results from '{table}' ({len(documents)} documents):\n\n{json_text(documents)}"
        )

    async def update_document(self, args: dict[str, Any]) -> ToolCallResult:
        table, doc_id = args["table"], args["id"]
        result = {
            "success": True,
            "table": table,
            "document_id": doc_id,
            "updates": args["updates"],
            "updated_at": utc_timestamp(),
        }
        return ToolCallResult.from_text(f"✅ Document '{doc_id}' updated in '{table}'!\n\n{json_text(result)}")

    async def delete_document(self, args: dict[str, Any]) -> ToolCallResult:
        table, doc_id = args["table"], args["id"]
        result = {
            "success": True,
            "table": table,
            "document_id": doc_id,
            "deleted_at": utc_timestamp(),
        }
        return ToolCallResult.from_text(f"🗑️ Document '{doc_id}' deleted from '{table}'!\n\n{json_text(result)}")

    # -- resources -----------------------------------------------------------

    def _read_tables(self) -> str:
        return json_text({"tables": ["users", "messages", "documents", "sessions"], "timestamp": utc_timestamp()})

    def _read_schema(self) -> str:
        return json_text({"schema": _SCHEMA, "timestamp": utc_timestamp()})

    def _read_functions(self) -> str:
        return json_text({"functions": _FUNCTIONS, "timestamp": utc_timestamp()})
