"""Tests for the MCP registry and batch dispatcher."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from futurepalz_mcp.server import MCPServer, ToolCall, ToolResult
from futurepalz_mcp.tools import ToolDefinition, ToolParameters


class EchoParameters(ToolParameters):
    """Parameter schema for the echo tool."""

    required_fields = ("text",)

    text: str | None = None


def echo_tool() -> ToolDefinition:
    """Tool that echoes its text parameter back."""

    async def handler(params: dict[str, Any]) -> dict[str, Any]:
        return {"echo": params["text"]}

    return ToolDefinition(
        name="echo",
        description="Echo text back.",
        parameters_model=EchoParameters,
        handler=handler,
    )


def exploding_tool() -> ToolDefinition:
    """Tool whose handler always raises."""

    async def handler(_: dict[str, Any]) -> dict[str, Any]:
        raise RuntimeError("boom")

    return ToolDefinition(
        name="explode",
        description="Always fails.",
        parameters_model=ToolParameters,
        handler=handler,
    )


class TestMCPServer:
    """Behavioral coverage for MCPServer."""

    def test_register_and_list_tools(self) -> None:
        """Registers tools and ensures they appear in the catalog in order."""
        # Arrange
        server = MCPServer()

        # Act
        server.register_tools(echo_tool(), exploding_tool())

        # Assert
        assert server.available_tools() == ["echo", "explode"]
        catalog = server.to_catalog()
        assert catalog[0] == {
            "tool_name": "echo",
            "description": "Echo text back.",
            "parameters": {
                "type": "object",
                "properties": {"text": {"type": "string"}},
                "required": ["text"],
            },
        }

    def test_prevents_duplicate_tool_names(self) -> None:
        """Duplicate tool registrations raise a ValueError."""
        server = MCPServer()
        server.register_tool(echo_tool())

        with pytest.raises(ValueError):
            server.register_tool(echo_tool())

    @pytest.mark.anyio()
    async def test_runs_registered_tool(self) -> None:
        """Executing a registered tool returns its payload."""
        server = MCPServer()
        server.register_tool(echo_tool())

        payload = await server.run_tool("echo", parameters={"text": "hi"})

        assert payload == {"echo": "hi"}

    @pytest.mark.anyio()
    async def test_running_unknown_tool_errors(self) -> None:
        """Unknown tool invocations raise a KeyError."""
        server = MCPServer()

        with pytest.raises(KeyError):
            await server.run_tool("missing")

    @pytest.mark.anyio()
    async def test_rejects_invalid_parameter_types(self) -> None:
        """Parameters of the wrong type surface as validation errors."""
        server = MCPServer()
        server.register_tool(echo_tool())

        with pytest.raises(ValueError, match="Invalid parameters for tool 'echo'"):
            await server.run_tool("echo", parameters={"text": ["not", "a", "str"]})


class TestDispatch:
    """Batch dispatch keeps one result per call and isolates failures."""

    @pytest.mark.anyio()
    async def test_results_preserve_order_and_call_ids(self) -> None:
        server = MCPServer()
        server.register_tools(echo_tool(), exploding_tool())
        calls = [
            ToolCall(tool_name="echo", call_id="a", parameters={"text": "one"}),
            ToolCall(tool_name="explode", call_id=7),
            ToolCall(tool_name="nope", call_id={"nested": True}),
            ToolCall(tool_name="echo", call_id="a", parameters={"text": "two"}),
        ]

        results = await server.dispatch(calls)

        assert [result.call_id for result in results] == ["a", 7, {"nested": True}, "a"]
        assert [result.tool_name for result in results] == [
            "echo",
            "explode",
            "nope",
            "echo",
        ]
        assert results[0].payload == {"echo": "one"}
        assert results[1].payload == {"error": "boom"}
        assert results[2].payload == {
            "error": 'Tool "nope" not implemented on this server.'
        }
        assert results[3].payload == {"echo": "two"}

    @pytest.mark.anyio()
    async def test_validation_failure_becomes_error_payload(self) -> None:
        server = MCPServer()
        server.register_tool(echo_tool())

        [result] = await server.dispatch(
            [ToolCall(tool_name="echo", call_id=1, parameters={"text": 42})]
        )

        assert result.payload == {"error": "Invalid parameters for tool 'echo'"}

    @pytest.mark.anyio()
    async def test_unexpected_errors_log_traceback(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        server = MCPServer()
        server.register_tools(echo_tool(), exploding_tool())

        with caplog.at_level(logging.ERROR, logger="futurepalz_mcp.server"):
            await server.dispatch(
                [
                    ToolCall(tool_name="explode", call_id=1),
                    ToolCall(tool_name="echo", call_id=2, parameters={"text": 42}),
                ]
            )

        [unexpected, expected] = caplog.records
        assert unexpected.exc_info is not None
        assert unexpected.exc_info[0] is RuntimeError
        assert expected.exc_info is None
        assert "Invalid parameters for tool 'echo'" in expected.getMessage()

    @pytest.mark.anyio()
    async def test_non_string_tool_name_is_not_implemented(self) -> None:
        server = MCPServer()
        server.register_tool(echo_tool())

        [result] = await server.dispatch([ToolCall.from_raw("garbage")])

        assert result.call_id is None
        assert result.payload == {"error": 'Tool "None" not implemented on this server.'}

    def test_from_raw_defaults_parameters(self) -> None:
        call = ToolCall.from_raw({"tool_name": "echo", "call_id": "x", "parameters": 5})

        assert call.tool_name == "echo"
        assert call.call_id == "x"
        assert call.parameters == {}

    def test_result_serializes_to_wire_shape(self) -> None:
        result = ToolResult("c1", "echo", {"echo": "x"})

        assert json.loads(result.to_json()) == {
            "call_id": "c1",
            "tool_name": "echo",
            "payload": {"echo": "x"},
        }
