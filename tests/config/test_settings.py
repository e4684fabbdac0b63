"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from annovault.config import CacheSettings, LoggingSettings, Settings


class TestDefaults:
    """Test values used when nothing is configured."""

    def test_defaults(self):
        """Test the built-in defaults."""
        settings = Settings()

        assert settings.cache.debug is False
        assert settings.cache.backend == "filesystem"
        assert settings.cache.directory == Path(".annovault/cache")
        assert settings.logging.level == "INFO"
        assert settings.logging.file is None
        assert settings.logging.use_rich_console is True


class TestValidation:
    """Test field validation."""

    def test_unknown_backend(self):
        """Test that only known backends are accepted."""
        with pytest.raises(ValidationError):
            CacheSettings(backend="redis")

    def test_level_is_normalized(self):
        """Test that the logging level is upper-cased."""
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_unknown_level(self):
        """Test that an unknown level is rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")


class TestEnvironment:
    """Test ANNOVAULT_ environment variables."""

    def test_nested_variables(self, monkeypatch):
        """Test the double-underscore nesting delimiter."""
        monkeypatch.setenv("ANNOVAULT_CACHE__DEBUG", "true")
        monkeypatch.setenv("ANNOVAULT_CACHE__BACKEND", "memory")
        monkeypatch.setenv("ANNOVAULT_LOGGING__LEVEL", "warning")

        settings = Settings()

        assert settings.cache.debug is True
        assert settings.cache.backend == "memory"
        assert settings.logging.level == "WARNING"

    def test_empty_variable_is_ignored(self, monkeypatch):
        """Test that an empty variable keeps the default."""
        monkeypatch.setenv("ANNOVAULT_CACHE__BACKEND", "")

        assert Settings().cache.backend == "filesystem"


class TestTomlFiles:
    """Test TOML loading and saving."""

    def test_round_trip(self, tmp_path):
        """Test that saved settings load back unchanged."""
        settings = Settings(
            cache=CacheSettings(debug=True, backend="memory", directory=tmp_path / "cache"),
            logging=LoggingSettings(level="ERROR", use_rich_console=False),
        )
        config_file = tmp_path / "config" / "annovault.toml"

        settings.to_toml_file(config_file)
        loaded = Settings.from_toml_file(config_file)

        assert loaded.cache == settings.cache
        assert loaded.logging == settings.logging

    def test_partial_file(self, tmp_path):
        """Test that missing sections keep their defaults."""
        config_file = tmp_path / "annovault.toml"
        config_file.write_text("[cache]\ndebug = true\n", encoding="utf-8")

        settings = Settings.from_toml_file(config_file)

        assert settings.cache.debug is True
        assert settings.cache.backend == "filesystem"
        assert settings.logging.level == "INFO"

    def test_missing_file(self, tmp_path):
        """Test that an absent file is reported."""
        with pytest.raises(FileNotFoundError):
            Settings.from_toml_file(tmp_path / "missing.toml")
