"""FuturePalz MCP server: cosmic readings behind a batch tool endpoint."""

from futurepalz_mcp_server.config import ServerSettings
from futurepalz_mcp_server.errors import (
    ConfigurationError,
    InvalidInputError,
    MCPError,
    ProviderError,
)
from futurepalz_mcp_server.tools import build_server, build_tools
from futurepalz_mcp_server.tools.common import ToolContext

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "MCPError",
    "ProviderError",
    "ServerSettings",
    "ToolContext",
    "build_server",
    "build_tools",
]
