"""Custom error types for MCP tooling."""

from __future__ import annotations

from typing import NoReturn, TypedDict


class MCPErrorPayload(TypedDict):
    """JSON payload attached to a failed tool call."""

    error: str


class MCPError(Exception):
    """Typed MCP error carrying a JSON-friendly payload."""

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        """Create a typed MCP error."""
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.details = details

    def to_dict(self) -> MCPErrorPayload:
        """Return the error payload reported for the call."""
        return {"error": self.message}


class InvalidInputError(MCPError):
    """Raised when tool input cannot be used, e.g. a malformed birthdate."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create an invalid-input error."""
        super().__init__("InvalidInput", message, details)


class ProviderError(MCPError):
    """Raised when the text-generation provider fails."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create a provider error."""
        super().__init__("ProviderError", message, details)


class ConfigurationError(MCPError):
    """Raised when required configuration is missing or invalid."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create a configuration error."""
        super().__init__("ConfigurationError", message, details)


_ERROR_TYPES: dict[str, type[MCPError]] = {
    "InvalidInput": InvalidInputError,
    "ProviderError": ProviderError,
    "ConfigurationError": ConfigurationError,
}


def raise_mcp_error(
    error_type: str, message: str, details: object | None = None
) -> NoReturn:
    """Raise the :class:`MCPError` subclass registered for ``error_type``."""
    error_class = _ERROR_TYPES.get(error_type)
    if error_class is None:
        raise MCPError(error_type=error_type, message=message, details=details)
    raise error_class(message, details)
