"""Tests for settings loading and the settings singleton."""

from __future__ import annotations

import logging
import threading

import pytest

from annovault.config import (
    Settings,
    SettingsLoader,
    configure_logging,
    get_config,
    load_settings,
    reload_config,
)
from annovault.shared.errors import ApplicationError, ErrorCode


class TestLoadSettings:
    """Test configuration file discovery."""

    def test_explicit_path(self, tmp_path):
        """Test that an explicit file is used."""
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[cache]\nbackend = "memory"\n', encoding="utf-8")

        assert load_settings(config_file).cache.backend == "memory"

    def test_explicit_missing_path(self, tmp_path):
        """Test that an explicit file must exist."""
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.toml")

    @pytest.mark.parametrize("relative", ["annovault.toml", "config/annovault.toml"])
    def test_default_locations(self, tmp_path, monkeypatch, relative):
        """Test discovery in the working directory."""
        config_file = tmp_path / relative
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text("[cache]\ndebug = true\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_settings().cache.debug is True

    def test_environment_only(self, tmp_path, monkeypatch):
        """Test the fallback when no file exists."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ANNOVAULT_CACHE__DEBUG", "1")

        assert load_settings().cache.debug is True

    def test_invalid_file(self, tmp_path):
        """Test that validation errors become configuration errors."""
        config_file = tmp_path / "annovault.toml"
        config_file.write_text('[cache]\nbackend = "redis"\n', encoding="utf-8")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings(config_file)

        assert exc_info.value.code == ErrorCode.CONFIG_ERROR
        assert exc_info.value.original_error is not None


class TestSettingsLoader:
    """Test the thread-safe singleton."""

    def test_get_config_is_cached(self, tmp_path, monkeypatch):
        """Test that repeated calls return one instance."""
        monkeypatch.chdir(tmp_path)
        loader = SettingsLoader()

        assert loader.get_config() is loader.get_config()

    def test_concurrent_get_config(self, tmp_path, monkeypatch, mocker):
        """Test that concurrent first calls load only once."""
        monkeypatch.chdir(tmp_path)
        load = mocker.patch("annovault.config.loader.load_settings", side_effect=lambda: Settings())
        loader = SettingsLoader()
        results = []

        threads = [threading.Thread(target=lambda: results.append(loader.get_config())) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert load.call_count == 1
        assert all(result is results[0] for result in results)

    def test_reload_config(self, tmp_path, monkeypatch):
        """Test that reloading picks up a changed file."""
        monkeypatch.chdir(tmp_path)
        loader = SettingsLoader()
        first = loader.get_config()

        (tmp_path / "annovault.toml").write_text('[cache]\nbackend = "memory"\n', encoding="utf-8")
        reloaded = loader.reload_config()

        assert reloaded is not first
        assert reloaded.cache.backend == "memory"
        assert loader.get_config() is reloaded

    def test_module_functions(self, tmp_path, monkeypatch):
        """Test the module-level singleton accessors."""
        config_file = tmp_path / "annovault.toml"
        config_file.write_text("[logging]\nlevel = \"DEBUG\"\n", encoding="utf-8")

        reloaded = reload_config(config_file)

        assert get_config() is reloaded
        assert get_config().logging.level == "DEBUG"


class TestConfigureLogging:
    """Test applying logging settings."""

    def test_configure_logging(self, tmp_path):
        """Test that the package logger follows the settings."""
        log_file = tmp_path / "annovault.log"
        settings = Settings(logging={"level": "warning", "file": str(log_file), "use_rich_console": False})

        logger = configure_logging(settings)

        assert logger.name == "annovault"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 2
