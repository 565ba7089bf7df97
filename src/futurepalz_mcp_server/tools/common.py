"""Shared helpers for MCP tools."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from futurepalz_mcp_server.config import ServerSettings
from futurepalz_mcp_server.profile import ProfileAttributes, compute_profile
from futurepalz_mcp_server.provider import TextProvider


@dataclass(frozen=True)
class ToolContext:
    """Collaborators shared by every tool handler."""

    settings: ServerSettings
    provider: TextProvider
    compute_profile: Callable[[str], ProfileAttributes] = compute_profile

    async def generate_content(self, prompt: str) -> dict[str, str]:
        """Run ``prompt`` through the provider and wrap the reply."""
        content = await self.provider.generate(prompt)
        return {"content": content}


def missing_fields(params: Mapping[str, Any], *names: str) -> list[str]:
    """Return the required parameter names that are absent or empty."""
    return [name for name in names if not params.get(name)]
