"""Single-birthdate reading tools: profile, explore, daily and lifepath."""

from __future__ import annotations

from pydantic import Field

from futurepalz_mcp.tools import ToolDefinition, ToolParameters
from futurepalz_mcp_server import prompts
from futurepalz_mcp_server.errors import raise_mcp_error
from futurepalz_mcp_server.tools.common import ToolContext, missing_fields

EXPLORE_SUPPORTED_TOPIC = "career"


class BirthdateParams(ToolParameters):
    """Parameters for tools that only need a birthdate."""

    required_fields = ("dob",)

    dob: str | None = None


class ProfileParams(BirthdateParams):
    """Parameters for the profile tool."""

    dob: str | None = Field(default=None, description="Birthdate in dd-mm-yyyy")


class ExploreParams(ToolParameters):
    """Parameters for the explore tool."""

    required_fields = ("topic", "subject", "dob")

    topic: str | None = None
    subject: str | None = None
    dob: str | None = None


def profile_tool(context: ToolContext) -> ToolDefinition:
    """Create the profile tool definition."""

    async def handler(params: dict[str, object]) -> dict[str, object]:
        if missing_fields(params, "dob"):
            raise_mcp_error("InvalidInput", "Missing parameter: dob")
        profile = context.compute_profile(str(params["dob"]))
        return await context.generate_content(prompts.profile_prompt(profile))

    return ToolDefinition(
        name="profile",
        description=(
            "Generates a deep, personal cosmic profile based on a user's birthdate."
        ),
        parameters_model=ProfileParams,
        handler=handler,
    )


def explore_tool(context: ToolContext) -> ToolDefinition:
    """Create the explore tool definition."""

    async def handler(params: dict[str, object]) -> dict[str, object]:
        if missing_fields(params, *ExploreParams.required_fields):
            return {"error": "Missing parameters. Required: topic, subject, dob"}
        if str(params["topic"]).lower() != EXPLORE_SUPPORTED_TOPIC:
            return {
                "content": (
                    "Sorry, this server currently supports 'career' only for explore."
                )
            }
        profile = context.compute_profile(str(params["dob"]))
        prompt = prompts.explore_prompt(profile, str(params["subject"]))
        return await context.generate_content(prompt)

    return ToolDefinition(
        name="explore",
        description=(
            "Detailed exploration for a given topic from the user's profile "
            "(career supported)."
        ),
        parameters_model=ExploreParams,
        handler=handler,
    )


def daily_tool(context: ToolContext) -> ToolDefinition:
    """Create the daily tool definition."""

    async def handler(params: dict[str, object]) -> dict[str, object]:
        if missing_fields(params, "dob"):
            return {"error": "Missing dob"}
        profile = context.compute_profile(str(params["dob"]))
        return await context.generate_content(prompts.daily_prompt(profile))

    return ToolDefinition(
        name="daily",
        description="Short daily cosmic focus for a user.",
        parameters_model=BirthdateParams,
        handler=handler,
    )


def lifepath_tool(context: ToolContext) -> ToolDefinition:
    """Create the lifepath tool definition."""

    async def handler(params: dict[str, object]) -> dict[str, object]:
        if missing_fields(params, "dob"):
            return {"error": "Missing dob"}
        profile = context.compute_profile(str(params["dob"]))
        return await context.generate_content(prompts.lifepath_prompt(profile))

    return ToolDefinition(
        name="lifepath",
        description="Detailed breakdown of the user's numerology life path number.",
        parameters_model=BirthdateParams,
        handler=handler,
    )
