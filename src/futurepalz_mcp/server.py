"""Tool registry and batch dispatcher.

This module holds the transport-free core of the server: tools are registered
once at startup, advertised through :meth:`MCPServer.to_catalog`, and executed
in batches by :meth:`MCPServer.dispatch`. Every call in a batch yields exactly
one result, in input order; failures are reported as ``{"error": ...}``
payloads rather than raised.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any

from futurepalz_mcp.tools import ToolDefinition

logger = logging.getLogger(__name__)


@dataclass
class ToolCall:
    """A single tool invocation taken from a request batch.

    Attributes:
        tool_name: Name of the tool to run.
        call_id: Caller-chosen identifier echoed back in the result.
        parameters: Raw parameters supplied for the tool.

    """

    tool_name: str | None
    call_id: Any = None
    parameters: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, item: object) -> ToolCall:
        """Build a call from one decoded ``tool_calls`` entry.

        Entries that are not objects still produce a call so that the batch
        keeps one result per entry.
        """
        if not isinstance(item, dict):
            return cls(tool_name=None)
        parameters = item.get("parameters")
        return cls(
            tool_name=item.get("tool_name"),
            call_id=item.get("call_id"),
            parameters=parameters if isinstance(parameters, dict) else {},
        )


@dataclass
class ToolResult:
    """Result returned by tool execution.

    Attributes:
        call_id: Identifier copied from the originating call.
        tool_name: Name of the tool that produced the result.
        payload: Structured payload returned by the tool.

    """

    call_id: Any
    tool_name: str | None
    payload: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the result."""
        return {
            "call_id": self.call_id,
            "tool_name": self.tool_name,
            "payload": self.payload,
        }

    def to_json(self) -> str:
        """Serialize the result to JSON.

        Returns:
            JSON representation of the tool result.

        """
        return json.dumps(self.to_dict())


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    The server tracks registered tools and provides the dispatch loop. It is
    free of transport details so that the HTTP surface and the MCP protocol
    adapter share the same behavior.
    """

    def __init__(
        self, expected_errors: tuple[type[Exception], ...] = (ValueError,)
    ) -> None:
        """Initialize an empty server registry.

        Args:
            expected_errors: Exception types that handlers raise to report bad
                input or upstream failures. Other exceptions are logged with
                their traceback.

        """
        self._tools: dict[str, ToolDefinition] = {}
        self._expected_errors = expected_errors

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def available_tools(self) -> list[str]:
        """List the names of registered tools in registration order."""
        return list(self._tools)

    def tools(self) -> list[ToolDefinition]:
        """Return registered tool definitions in registration order."""
        return list(self._tools.values())

    def to_catalog(self) -> list[dict[str, Any]]:
        """Produce the handshake catalog.

        Returns:
            Tool descriptors in registration order.

        """
        return [tool.metadata() for tool in self._tools.values()]

    async def run_tool(
        self, name: str, *, parameters: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Execute a registered tool.

        Args:
            name: Name of the registered tool to execute.
            parameters: Optional parameters for the tool.

        Raises:
            KeyError: If the tool name is not registered.
            ValueError: If parameter validation fails.

        Returns:
            Payload produced by the tool handler.

        """
        if name not in self._tools:
            raise KeyError(f"Tool '{name}' is not registered")

        tool = self._tools[name]
        validated_params = tool.validate(parameters or {})
        return await tool.handler(validated_params)

    async def resolve(self, call: ToolCall) -> ToolResult:
        """Run one call and capture its outcome as a result.

        Never raises: unknown tools and handler failures become error payloads.
        """
        logger.info(
            "[mcp] processing tool: %s call_id: %s", call.tool_name, call.call_id
        )
        if not isinstance(call.tool_name, str) or call.tool_name not in self._tools:
            payload: dict[str, Any] = {
                "error": f'Tool "{call.tool_name}" not implemented on this server.'
            }
            return ToolResult(call.call_id, call.tool_name, payload)

        try:
            payload = await self.run_tool(call.tool_name, parameters=call.parameters)
        except self._expected_errors as exc:
            logger.error("[mcp] error for %s: %s", call.tool_name, exc)
            payload = {"error": str(exc) or type(exc).__name__}
        except Exception as exc:
            logger.exception("[mcp] unexpected error for %s", call.tool_name)
            payload = {"error": str(exc) or type(exc).__name__}
        return ToolResult(call.call_id, call.tool_name, payload)

    async def dispatch(self, calls: list[ToolCall]) -> list[ToolResult]:
        """Resolve a batch of calls concurrently.

        Args:
            calls: Calls in request order.

        Returns:
            One result per call, in the same order.

        """
        return list(await asyncio.gather(*(self.resolve(call) for call in calls)))
