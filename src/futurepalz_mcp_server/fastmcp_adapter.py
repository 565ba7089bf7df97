"""Adapters for exposing the oracle tools via FastMCP."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult

from futurepalz_mcp.server import MCPServer, ToolCall
from futurepalz_mcp.tools import ToolDefinition


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, server: MCPServer) -> None:
        """Create a FastMCP tool wrapper for the provided definition."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.parameters_model.parameter_schema(),
            tags=set(),
        )
        self._definition = definition
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Resolve the call through the server's isolated dispatch path."""
        result = await self._server.resolve(
            ToolCall(tool_name=self._definition.name, parameters=arguments)
        )
        return ToolResult(structured_content=result.payload)


def to_fastmcp_tools(
    tool_definitions: Sequence[ToolDefinition], server: MCPServer
) -> list[Tool]:
    """Convert tool definitions into FastMCP-compatible tools."""
    return [
        ToolDefinitionAdapter(definition, server) for definition in tool_definitions
    ]


def build_fastmcp_app(server: MCPServer) -> FastMCP:
    """Create a FastMCP server instance with every registered tool."""
    app = FastMCP(
        name="futurepalz-mcp",
        instructions="Cosmic profile and numerology readings from birthdates.",
    )
    for tool in to_fastmcp_tools(server.tools(), server):
        app.add_tool(tool)
    return app
