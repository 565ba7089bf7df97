"""Shared test fixtures."""

from __future__ import annotations

import os

# Use litellm's bundled model cost map instead of fetching it at import time.
os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import pytest

from futurepalz_mcp.server import MCPServer
from futurepalz_mcp_server.config import ServerSettings
from futurepalz_mcp_server.errors import ProviderError
from futurepalz_mcp_server.tools import build_server
from futurepalz_mcp_server.tools.common import ToolContext

TEST_TOKEN = "s3cret-token"
OWNER_NUMBER = "919876543210"


class RecordingProvider:
    """Deterministic provider that records every prompt it receives."""

    def __init__(self) -> None:
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return f"oracle reply #{len(self.prompts)}"


class FailingProvider:
    """Provider that always fails like an unreachable upstream."""

    def __init__(self) -> None:
        self.calls = 0

    async def generate(self, prompt: str) -> str:
        self.calls += 1
        raise ProviderError("Provider request failed: upstream unavailable")


@pytest.fixture()
def settings() -> ServerSettings:
    """Settings with a known secret and owner identifier."""
    return ServerSettings(
        mcp_token=TEST_TOKEN,
        gemini_api_key="test-key",
        owner_number=OWNER_NUMBER,
    )


@pytest.fixture()
def provider() -> RecordingProvider:
    """Recording provider double."""
    return RecordingProvider()


@pytest.fixture()
def context(settings: ServerSettings, provider: RecordingProvider) -> ToolContext:
    """Tool context wired to the recording provider."""
    return ToolContext(settings=settings, provider=provider)


@pytest.fixture()
def server(context: ToolContext) -> MCPServer:
    """Server with every oracle tool registered."""
    return build_server(context)


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the event loop the server targets."""
    return "asyncio"
