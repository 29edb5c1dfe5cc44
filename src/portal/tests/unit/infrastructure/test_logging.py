"""Unit tests for structlog configuration."""

import io

import pytest
import structlog

from infrastructure.logging import configure_logging


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def reset_structlog(self):
        yield
        structlog.reset_defaults()

    def test_uses_json_renderer_without_tty(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.setattr("sys.stdout", io.StringIO())

        configure_logging("INFO")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_force_color_uses_console_renderer(self, monkeypatch):
        monkeypatch.setenv("FORCE_COLOR", "1")

        configure_logging("DEBUG")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("LOUD")
