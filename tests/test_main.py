"""CLI-level coverage for the server entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from futurepalz_mcp_server import main as server_main


class _DummyApp:
    """Shim FastMCP app to capture run invocations without network I/O."""

    def __init__(self) -> None:
        self.run_calls: list[dict[str, object]] = []

    def run(self, *, transport: str, **kwargs: object) -> None:
        self.run_calls.append({"transport": transport, **kwargs})


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the CLI away from the developer's real environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MCP_TOKEN", "tok")
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    monkeypatch.setenv("MY_NUMBER", "1")
    monkeypatch.setenv("FUTUREPALZ_LOG_LEVEL", "info")
    monkeypatch.setattr(server_main, "configure_logging", lambda level: None)


def test_catalog_flag_prints_handshake(capsys: pytest.CaptureFixture[str]) -> None:
    """--catalog prints the handshake payload and exits."""
    exit_code = server_main.main(["--catalog"])

    assert exit_code == 0
    catalog = json.loads(capsys.readouterr().out)
    assert [tool["tool_name"] for tool in catalog["tools"]] == [
        "profile",
        "validate",
        "explore",
        "compare",
        "daily",
        "lifepath",
    ]


def test_rest_transport_runs_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    """The default transport serves the FastAPI app with uvicorn."""
    run_calls: list[dict[str, object]] = []
    monkeypatch.setattr(
        server_main.uvicorn,
        "run",
        lambda app, **kwargs: run_calls.append({"app": app, **kwargs}),
    )

    exit_code = server_main.main(["--host", "127.0.0.1", "--port", "9000"])

    assert exit_code == 0
    [call] = run_calls
    assert call["host"] == "127.0.0.1"
    assert call["port"] == 9000
    assert call["log_level"] == "info"
    assert call["app"].title == "FuturePalz MCP"


def test_main_runs_fastmcp_with_transport(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() delegates to FastMCP.run with the provided transport settings."""
    dummy_app = _DummyApp()
    monkeypatch.setattr(server_main, "build_fastmcp_app", lambda _server: dummy_app)

    exit_code = server_main.main(
        [
            "--transport",
            "http",
            "--host",
            "127.0.0.1",
            "--port",
            "8080",
            "--path",
            "/mcp",
        ]
    )

    assert exit_code == 0
    assert dummy_app.run_calls == [
        {"transport": "http", "host": "127.0.0.1", "port": 8080, "path": "/mcp"}
    ]


def test_main_runs_fastmcp_over_stdio(monkeypatch: pytest.MonkeyPatch) -> None:
    dummy_app = _DummyApp()
    monkeypatch.setattr(server_main, "build_fastmcp_app", lambda _server: dummy_app)

    assert server_main.main(["--transport", "stdio"]) == 0
    assert dummy_app.run_calls == [{"transport": "stdio"}]
