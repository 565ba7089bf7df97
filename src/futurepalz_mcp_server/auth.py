"""Bearer-token checks for the MCP endpoint."""

from __future__ import annotations

import secrets

BEARER_PREFIX = "Bearer "


def tokens_match(provided: str | None, secret: str | None) -> bool:
    """Compare a token with the shared secret in constant time."""
    if not provided or not secret:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), secret.encode("utf-8"))


def is_authorized(header: str | None, secret: str | None) -> bool:
    """Return whether an ``Authorization`` header carries the shared secret.

    The header must use the case-sensitive ``"Bearer "`` scheme prefix. An unset
    secret authorizes nobody.
    """
    if not header or not header.startswith(BEARER_PREFIX):
        return False
    token = header[len(BEARER_PREFIX) :].strip()
    return tokens_match(token, secret)
