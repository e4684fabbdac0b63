"""Cache item and item pool adapters."""

from .item import CacheItem
from .pool import CacheItemPool

__all__ = ["CacheItem", "CacheItemPool"]
