"""Tool registration helpers for the FuturePalz MCP server."""

from __future__ import annotations

from futurepalz_mcp.server import MCPServer
from futurepalz_mcp.tools import ToolDefinition
from futurepalz_mcp_server.errors import MCPError
from futurepalz_mcp_server.tools.common import ToolContext
from futurepalz_mcp_server.tools.compatibility import compare_tool
from futurepalz_mcp_server.tools.readings import (
    daily_tool,
    explore_tool,
    lifepath_tool,
    profile_tool,
)
from futurepalz_mcp_server.tools.validation import validate_tool


def build_tools(context: ToolContext) -> list[ToolDefinition]:
    """Instantiate all tool definitions in handshake order."""
    return [
        profile_tool(context),
        validate_tool(context),
        explore_tool(context),
        compare_tool(context),
        daily_tool(context),
        lifepath_tool(context),
    ]


def build_server(context: ToolContext) -> MCPServer:
    """Create a server with every tool registered."""
    server = MCPServer(expected_errors=(ValueError, MCPError))
    server.register_tools(*build_tools(context))
    return server
