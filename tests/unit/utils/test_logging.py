"""Unit tests for logging setup."""

import json

import pytest
import structlog

from subpack.core.pack import SubtitlePack
from subpack.utils.logging import setup_logging


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_json_output(self, monkeypatch, capsys):
        """Should render events as JSON when configured."""
        monkeypatch.setenv("SUBPACK_LOG_JSON", "true")
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "INFO")
        setup_logging()

        structlog.get_logger().info("pack_loaded", entries=3)

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "pack_loaded"
        assert record["entries"] == 3
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters_debug(self, monkeypatch, capsys):
        """Should drop engine debug events at INFO level."""
        monkeypatch.setenv("SUBPACK_LOG_JSON", "true")
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "INFO")
        setup_logging()

        SubtitlePack().remove_hi()

        assert capsys.readouterr().out == ""

    def test_debug_level_shows_engine_events(self, monkeypatch, capsys):
        """Should emit engine events at DEBUG level."""
        monkeypatch.setenv("SUBPACK_LOG_JSON", "true")
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "DEBUG")
        setup_logging()

        SubtitlePack().remove_hi()

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "pack_hi_removed"
        assert record["removed"] == 0

    def test_unknown_level(self, monkeypatch):
        """Should raise ValueError for an unknown log level."""
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "chatty")

        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging()
