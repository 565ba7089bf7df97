"""futurepalz_mcp package initialization."""

from futurepalz_mcp.server import MCPServer, ToolCall, ToolResult
from futurepalz_mcp.tools import ToolDefinition, ToolParameters

__all__ = ["MCPServer", "ToolCall", "ToolDefinition", "ToolParameters", "ToolResult"]
