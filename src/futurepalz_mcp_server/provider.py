"""Text-generation provider gateway."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import litellm

from futurepalz_mcp_server.config import ServerSettings
from futurepalz_mcp_server.errors import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)


class TextProvider(Protocol):
    """Anything that turns a prompt into generated text."""

    async def generate(self, prompt: str) -> str:
        """Return generated text for ``prompt``."""
        ...


class LiteLLMProvider:
    """Wrapper around ``litellm.acompletion``."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: ServerSettings) -> LiteLLMProvider:
        """Create a provider from server settings."""
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.model,
            timeout=settings.provider_timeout,
        )

    async def generate(self, prompt: str) -> str:
        """Send ``prompt`` as a single user message and return the reply text.

        Raises:
            ConfigurationError: If no API key is configured.
            ProviderError: If the request fails or the reply has no content.

        """
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY not set in env.")

        completion_kwargs: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "api_key": self.api_key,
        }
        if self.timeout is not None:
            completion_kwargs["timeout"] = self.timeout

        try:
            resp = await litellm.acompletion(**completion_kwargs)
        except Exception as exc:
            logger.warning("provider request to %s failed: %s", self.model, exc)
            raise ProviderError(f"Provider request failed: {exc}") from exc

        try:
            text = resp.choices[0].message.content
        except (IndexError, AttributeError) as exc:
            raise ProviderError("Provider returned a malformed response") from exc
        if text is None:
            raise ProviderError("Provider returned an empty response")
        return str(text)
