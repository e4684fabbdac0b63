"""AnnoVault Configuration Module

This module provides unified access to configuration models and settings
management:
- Settings: Main configuration facade
- Loader functions: get_config, load_settings, reload_config, configure_logging
- Domain models: CacheSettings, LoggingSettings
"""

from __future__ import annotations

from .loader import (
    SettingsLoader,
    configure_logging,
    get_config,
    load_settings,
    reload_config,
)
from .models import CacheSettings, LoggingSettings, Settings

__all__ = [
    "CacheSettings",
    "LoggingSettings",
    "Settings",
    "SettingsLoader",
    "configure_logging",
    "get_config",
    "load_settings",
    "reload_config",
]
