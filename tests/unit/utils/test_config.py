"""Unit tests for configuration utilities."""

import pytest

from subpack.utils.config import get_settings


class TestSettings:
    """Test cases for Settings class."""

    @pytest.fixture
    def no_env_file(self, tmp_path, monkeypatch):
        """Run test in a directory without .env file."""
        monkeypatch.chdir(tmp_path)
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_defaults(self, monkeypatch, no_env_file):
        """Should use defaults when nothing is configured."""
        monkeypatch.delenv("SUBPACK_LOG_LEVEL", raising=False)
        monkeypatch.delenv("SUBPACK_LOG_JSON", raising=False)

        settings = get_settings()

        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_loads_from_env(self, monkeypatch):
        """Should load prefixed variables from environment."""
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "debug")
        monkeypatch.setenv("SUBPACK_LOG_JSON", "true")

        settings = get_settings()

        assert settings.log_level == "debug"
        assert settings.log_json is True

    def test_loads_from_env_file(self, monkeypatch, no_env_file, tmp_path):
        """Should read settings from a .env file."""
        monkeypatch.delenv("SUBPACK_LOG_LEVEL", raising=False)
        (tmp_path / ".env").write_text("SUBPACK_LOG_LEVEL=WARNING\n", encoding="utf-8")

        assert get_settings().log_level == "WARNING"

    def test_get_settings_is_cached(self, monkeypatch):
        """Should return cached settings on subsequent calls."""
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "ERROR")

        settings1 = get_settings()
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "DEBUG")
        settings2 = get_settings()

        assert settings1 is settings2
        assert settings1.log_level == "ERROR"

    def test_cache_clear_reloads_settings(self, monkeypatch):
        """Should reload settings after cache clear."""
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "ERROR")
        settings1 = get_settings()

        get_settings.cache_clear()
        monkeypatch.setenv("SUBPACK_LOG_LEVEL", "DEBUG")
        settings2 = get_settings()

        assert settings1.log_level == "ERROR"
        assert settings2.log_level == "DEBUG"
        assert settings1 is not settings2
