"""Two-person compatibility tool."""

from __future__ import annotations

from futurepalz_mcp.tools import ToolDefinition, ToolParameters
from futurepalz_mcp_server import prompts
from futurepalz_mcp_server.tools.common import ToolContext, missing_fields


class CompareParams(ToolParameters):
    """Parameters for the compare tool."""

    required_fields = ("dob1", "dob2")

    dob1: str | None = None
    dob2: str | None = None


def compare_tool(context: ToolContext) -> ToolDefinition:
    """Create the compare tool definition."""

    async def handler(params: dict[str, object]) -> dict[str, object]:
        if missing_fields(params, "dob1", "dob2"):
            return {"error": "Missing dob1 or dob2"}
        first = context.compute_profile(str(params["dob1"]))
        second = context.compute_profile(str(params["dob2"]))
        return await context.generate_content(prompts.compare_prompt(first, second))

    return ToolDefinition(
        name="compare",
        description="Compatibility report between two birthdates.",
        parameters_model=CompareParams,
        handler=handler,
    )
