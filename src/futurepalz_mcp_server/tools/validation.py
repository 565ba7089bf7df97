"""Server ownership validation tool."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from futurepalz_mcp.tools import ToolDefinition, ToolParameters
from futurepalz_mcp_server.auth import tokens_match
from futurepalz_mcp_server.tools.common import ToolContext


class ValidateParams(ToolParameters):
    """Parameters for the validate tool."""

    required_fields = ("token",)

    token: Any = Field(default=None, description="Bearer token to validate")


def validate_tool(context: ToolContext) -> ToolDefinition:
    """Create the validate tool definition."""

    async def handler(params: dict[str, object]) -> dict[str, object]:
        token = params.get("token")
        if isinstance(token, str) and tokens_match(token, context.settings.mcp_token):
            return {"phone_number": context.settings.owner_number}
        return {"error": "Invalid validation token"}

    return ToolDefinition(
        name="validate",
        description="Validation tool used by the hackathon to verify server ownership.",
        parameters_model=ValidateParams,
        handler=handler,
    )
