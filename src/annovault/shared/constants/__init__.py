"""
AnnoVault Constants Module

Centralized constants for cache key derivation, backends and logging.
"""

from .cache import NOT_FOUND, CacheKeyConfig, ReaderDefaults, SimpleCacheConfig
from .logging import LoggingConfig

__all__ = [
    "NOT_FOUND",
    "CacheKeyConfig",
    "LoggingConfig",
    "ReaderDefaults",
    "SimpleCacheConfig",
]
