"""Settings loader and singleton manager.

This module handles:
- Configuration file loading from TOML
- Thread-safe singleton pattern for the Settings instance
- Applying logging settings to the package logger
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from pydantic import ValidationError

from annovault.config.models.settings import Settings
from annovault.shared.constants import LoggingConfig
from annovault.shared.errors import create_config_error
from annovault.shared.logging import log_operation_start, setup_structured_logger

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATHS: tuple[Path, ...] = (
    Path("annovault.toml"),
    Path("config/annovault.toml"),
)


class SettingsLoader:
    """Thread-safe singleton manager for Settings.

    Uses double-checked locking pattern to ensure thread-safety
    while minimizing lock overhead.
    """

    def __init__(self) -> None:
        self._instance: Settings | None = None
        self._lock = threading.RLock()

    def get_config(self) -> Settings:
        """Get the global settings instance (thread-safe).

        Returns:
            The global Settings instance, loading it if necessary.
        """
        # First check (without lock for performance)
        if self._instance is None:
            # Second check (with lock for thread-safety)
            with self._lock:
                if self._instance is None:
                    self._instance = load_settings()

        return self._instance

    def reload_config(self, config_path: str | Path | None = None) -> Settings:
        """Reload the global settings instance.

        Args:
            config_path: Optional explicit TOML file

        Returns:
            The reloaded Settings instance.
        """
        with self._lock:
            self._instance = load_settings(config_path)
            return self._instance


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from TOML configuration file or environment.

    Args:
        config_path: Optional path to a TOML configuration file. If None,
                    the default locations are tried before falling back to
                    environment variables only.

    Returns:
        Settings instance loaded from the specified source

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ApplicationError: If the configuration does not validate
    """
    log_operation_start(logger, "load_settings", {"config_path": str(config_path) if config_path else None})

    try:
        if config_path:
            return Settings.from_toml_file(config_path)

        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                logger.debug("Loading configuration from %s", default_path)
                return Settings.from_toml_file(default_path)

        return Settings()
    except ValidationError as e:
        raise create_config_error(
            f"Invalid configuration: {e.error_count()} validation error(s)",
            config_key=str(config_path) if config_path else None,
            operation="load_settings",
            original_error=e,
        ) from e


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply the logging section of settings to the package logger.

    Args:
        settings: Loaded settings

    Returns:
        The configured ``annovault`` logger
    """
    return setup_structured_logger(
        name=LoggingConfig.ROOT_LOGGER,
        level=settings.logging.level,
        log_file=settings.logging.file,
        use_rich_console=settings.logging.use_rich_console,
    )


# Global loader instance
_loader = SettingsLoader()


def get_config() -> Settings:
    """Get the global settings instance (thread-safe).

    Returns:
        The global Settings instance, loading it if necessary.
    """
    return _loader.get_config()


def reload_config(config_path: str | Path | None = None) -> Settings:
    """Reload the global settings instance from configuration files.

    Returns:
        The reloaded Settings instance.
    """
    return _loader.reload_config(config_path)
