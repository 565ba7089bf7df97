"""Process configuration for the FuturePalz MCP server."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict

from futurepalz_mcp_server.errors import ConfigurationError

DEFAULT_MODEL = "gemini/gemini-2.0-flash"
DEFAULT_PROVIDER_TIMEOUT = 60.0
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class ServerSettings(BaseModel):
    """Immutable settings loaded once at startup.

    Attributes:
        mcp_token: Shared secret expected in the ``Authorization`` header.
        gemini_api_key: Credential for the text-generation provider.
        owner_number: Owner identifier returned by the ``validate`` tool.
        model: Provider model name in litellm notation.
        provider_timeout: Upper bound in seconds for one provider call.
        log_level: Root logging level.
    """

    model_config = ConfigDict(frozen=True)

    mcp_token: str | None = None
    gemini_api_key: str | None = None
    owner_number: str = ""
    model: str = DEFAULT_MODEL
    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, *, dotenv: bool = True
    ) -> ServerSettings:
        """Load settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.
            dotenv: Whether to merge a ``.env`` file into ``os.environ`` first.

        Raises:
            ConfigurationError: If a numeric setting cannot be parsed.

        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ if environ is None else environ

        raw_timeout = env.get("FUTUREPALZ_PROVIDER_TIMEOUT")
        try:
            timeout = (
                float(raw_timeout) if raw_timeout else DEFAULT_PROVIDER_TIMEOUT
            )
        except ValueError as exc:
            raise ConfigurationError(
                f"Invalid FUTUREPALZ_PROVIDER_TIMEOUT: {raw_timeout!r}"
            ) from exc
        if timeout <= 0:
            raise ConfigurationError("FUTUREPALZ_PROVIDER_TIMEOUT must be positive")

        return cls(
            mcp_token=env.get("MCP_TOKEN") or None,
            gemini_api_key=env.get("GEMINI_API_KEY") or None,
            owner_number=env.get("MY_NUMBER", ""),
            model=env.get("FUTUREPALZ_MODEL") or DEFAULT_MODEL,
            provider_timeout=timeout,
            log_level=(env.get("FUTUREPALZ_LOG_LEVEL") or "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging for the server process."""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
