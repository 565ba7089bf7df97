"""HTTP surface: handshake and batch tool execution on ``/mcp``."""

from __future__ import annotations

import json
import logging
from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from futurepalz_mcp.server import MCPServer, ToolCall
from futurepalz_mcp_server.auth import is_authorized
from futurepalz_mcp_server.config import ServerSettings

logger = logging.getLogger(__name__)

SERVER_NAME = "FuturePalz MCP"
SERVER_VERSION = "1.0.0"
UNAUTHORIZED_MESSAGE = "Unauthorized: missing or invalid Bearer token"
CORS_HEADERS = ["Content-Type", "Authorization"]


async def _read_tool_calls(request: Request) -> list[Any]:
    """Return the raw ``tool_calls`` list, or ``[]`` for unusable bodies."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("ignoring malformed JSON body on %s", request.url.path)
        return []
    if not isinstance(body, dict):
        return []
    tool_calls = body.get("tool_calls")
    return tool_calls if isinstance(tool_calls, list) else []


def create_app(settings: ServerSettings, server: MCPServer) -> FastAPI:
    """Create the FastAPI application serving ``server``."""
    app = FastAPI(
        title=SERVER_NAME, version=SERVER_VERSION, docs_url=None, redoc_url=None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=CORS_HEADERS,
    )

    @app.middleware("http")
    async def permissive_cors_headers(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Attach the permissive CORS headers to every response."""
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Origin", "*")
        response.headers.setdefault(
            "Access-Control-Allow-Headers", ", ".join(CORS_HEADERS)
        )
        return response

    @app.get("/")
    async def server_info() -> dict[str, Any]:
        """Health and info route."""
        return {
            "server": SERVER_NAME,
            "version": SERVER_VERSION,
            "tools_count": len(server.available_tools()),
            "note": (
                "POST /mcp with Authorization: Bearer <MCP_TOKEN> "
                "to handshake and call tools."
            ),
        }

    @app.get("/mcp")
    async def liveness() -> dict[str, str]:
        return {"message": "MCP server is running!"}

    @app.post("/mcp")
    async def handle_mcp(request: Request) -> JSONResponse:
        """Handshake when no calls are supplied, otherwise execute the batch."""
        if not is_authorized(request.headers.get("authorization"), settings.mcp_token):
            logger.warning("rejected unauthorized request from %s", request.client)
            return JSONResponse(
                status_code=401, content={"error": UNAUTHORIZED_MESSAGE}
            )

        raw_calls = await _read_tool_calls(request)
        if not raw_calls:
            return JSONResponse(content={"tools": server.to_catalog()})

        calls = [ToolCall.from_raw(item) for item in raw_calls]
        results = await server.dispatch(calls)
        return JSONResponse(
            content={"tool_results": [result.to_dict() for result in results]}
        )

    return app
