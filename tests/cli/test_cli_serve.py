"""Tests for ``toolhost serve``."""

from __future__ import annotations

import json
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from toolhost.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("TOOLHOST_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _no_logging_setup() -> Iterator[MagicMock]:
    with patch("toolhost.cli_commands.serve.configure_logging") as mock_configure:
        yield mock_configure


class TestServeCommand:
    def test_defaults(self) -> None:
        with patch("toolhost.transport.http.serve") as mock_serve:
            result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code == 0
        _, kwargs = mock_serve.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080
        assert "http://localhost:8080/mcp" in result.output

    def test_port_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9100")
        with patch("toolhost.transport.http.serve") as mock_serve:
            result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code == 0
        assert mock_serve.call_args.kwargs["port"] == 9100

    def test_flag_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "9100")
        with patch("toolhost.transport.http.serve") as mock_serve:
            result = CliRunner().invoke(
                main, ["serve", "--port", "9200", "--host", "127.0.0.1", "--log-level", "debug"]
            )

        assert result.exit_code == 0
        kwargs = mock_serve.call_args.kwargs
        assert kwargs["port"] == 9200
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["log_level"] == "DEBUG"

    def test_invalid_env_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "abc")
        with patch("toolhost.transport.http.serve") as mock_serve:
            result = CliRunner().invoke(main, ["serve"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
        mock_serve.assert_not_called()

    def test_configures_logging_at_level(self, _no_logging_setup: MagicMock) -> None:
        with patch("toolhost.transport.http.serve"):
            result = CliRunner().invoke(main, ["serve", "--log-level", "warning"])

        assert result.exit_code == 0
        _no_logging_setup.assert_called_once_with("WARNING")

    def test_later_commands_keep_clean_json_output(self) -> None:
        with patch("toolhost.transport.http.serve"):
            CliRunner().invoke(main, ["serve", "--log-level", "debug"])

        result = CliRunner().invoke(main, ["call", "tools/list"])
        assert result.exit_code == 0
        assert len(json.loads(result.output)["result"]["tools"]) == 2

    def test_otlp_endpoint_configures_telemetry(self) -> None:
        with (
            patch("toolhost.transport.http.serve"),
            patch("toolhost.utils.telemetry.configure_telemetry") as mock_telemetry,
        ):
            result = CliRunner().invoke(main, ["serve", "--otlp-endpoint", "http://collector:4317"])

        assert result.exit_code == 0
        mock_telemetry.assert_called_once_with(otlp_endpoint="http://collector:4317")

    def test_telemetry_missing_sdk(self) -> None:
        with (
            patch("toolhost.transport.http.serve") as mock_serve,
            patch(
                "toolhost.utils.telemetry.configure_telemetry",
                side_effect=ImportError("opentelemetry-sdk is required"),
            ),
        ):
            result = CliRunner().invoke(main, ["serve", "--telemetry"])

        assert result.exit_code == 1
        assert "Telemetry error" in result.output
        mock_serve.assert_not_called()
