"""Entry point for the FuturePalz MCP server."""

from __future__ import annotations

import argparse
import json
import logging

import uvicorn

from futurepalz_mcp_server.config import ServerSettings, configure_logging
from futurepalz_mcp_server.fastmcp_adapter import build_fastmcp_app
from futurepalz_mcp_server.http_app import create_app
from futurepalz_mcp_server.provider import LiteLLMProvider
from futurepalz_mcp_server.tools import build_server
from futurepalz_mcp_server.tools.common import ToolContext

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(description="Run the FuturePalz MCP server.")
    parser.add_argument(
        "--catalog",
        action="store_true",
        help="Print the handshake tool catalog as JSON and exit.",
    )
    parser.add_argument(
        "--transport",
        choices=("rest", "stdio", "http"),
        default="rest",
        help=(
            "rest serves the batch POST /mcp endpoint; stdio and http run the "
            "tools over the Model Context Protocol."
        ),
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind address.")
    parser.add_argument("--port", type=int, default=8000, help="Bind port.")
    parser.add_argument(
        "--path", default="/mcp", help="Endpoint path for the MCP http transport."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = build_parser().parse_args(argv)

    settings = ServerSettings.from_env()
    configure_logging(settings.log_level)
    context = ToolContext(
        settings=settings, provider=LiteLLMProvider.from_settings(settings)
    )
    server = build_server(context)

    if args.catalog:
        print(json.dumps({"tools": server.to_catalog()}, indent=2))
        return 0

    if not settings.mcp_token:
        logger.warning("MCP_TOKEN is not set; every POST /mcp will be rejected")

    if args.transport == "rest":
        uvicorn.run(
            create_app(settings, server),
            host=args.host,
            port=args.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    app = build_fastmcp_app(server)
    if args.transport == "stdio":
        app.run(transport="stdio")
    else:
        app.run(transport="http", host=args.host, port=args.port, path=args.path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
