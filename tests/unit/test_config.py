"""Tests for iiif_request.config module."""

import pytest

from iiif_request.config import ConfigError, Settings


class TestSettings:
    """Tests for the Settings class."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that default values are set correctly."""
        for name in ("LOG_LEVEL", "LOG_FORMAT", "STRICT_VALIDATION"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "console"
        assert settings.DEFAULT_QUALITY == "default"
        assert settings.DEFAULT_FORMAT == "jpg"
        assert settings.STRICT_VALIDATION is False

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override defaults."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEFAULT_FORMAT", "png")
        monkeypatch.setenv("STRICT_VALIDATION", "true")

        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.DEFAULT_FORMAT == "png"
        assert settings.STRICT_VALIDATION is True

    def test_env_vars_are_case_sensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("log_level", "DEBUG")
        settings = Settings(
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.LOG_LEVEL == "INFO"


class TestRequireLogFormat:
    """Tests for Settings.require_log_format."""

    @pytest.mark.parametrize("log_format", ["console", "json"])
    def test_supported_formats(self, log_format: str) -> None:
        settings = Settings(
            LOG_FORMAT=log_format,
            _env_file=None,  # type: ignore[call-arg]
        )
        assert settings.require_log_format() == log_format

    def test_unsupported_format_raises(self) -> None:
        settings = Settings(
            LOG_FORMAT="xml",
            _env_file=None,  # type: ignore[call-arg]
        )
        with pytest.raises(ConfigError) as exc_info:
            settings.require_log_format()
        assert exc_info.value.key_name == "LOG_FORMAT"
        assert exc_info.value.value == "xml"
        assert "console, json" in str(exc_info.value)
