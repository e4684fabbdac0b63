"""Cache protocols for dependency inversion.

The cached reader only talks to these interfaces, so any storage backend
that offers item access, or the older fetch/save key/value style, can back
it without importing concrete implementations.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheItemProtocol(Protocol):
    """One cache slot: key, hit flag and payload."""

    def get_key(self) -> str:
        """Return the key this item was looked up with."""

    def get(self) -> Any:
        """Return the payload, None for a miss that was never set."""

    def is_hit(self) -> bool:
        """Return True when the lookup found a stored value."""

    def set(self, value: Any) -> CacheItemProtocol:
        """Replace the payload and return the item."""


@runtime_checkable
class CacheItemPoolProtocol(Protocol):
    """Item based persistent store.

    Example:
        >>> pool: CacheItemPoolProtocol = ArrayCachePool()
        >>> item = pool.get_item("app.Controller")
        >>> pool.save(item.set(["@Route"]))
        True
    """

    def get_item(self, key: str) -> CacheItemProtocol:
        """Return the item for key, a miss item when nothing is stored.

        Args:
            key: Cache key

        Returns:
            Cache item, never None
        """

    def save(self, item: CacheItemProtocol) -> bool:
        """Persist the item's current value under its key.

        Args:
            item: Item to write

        Returns:
            True when the backend accepted the write
        """


@runtime_checkable
class SimpleCacheProtocol(Protocol):
    """Legacy key/value cache.

    ``fetch`` returns ``NOT_FOUND`` for a missing key so that falsy values
    stay cacheable.
    """

    def fetch(self, key: str) -> Any:
        """Return the stored value or NOT_FOUND."""

    def save(self, key: str, value: Any) -> bool:
        """Store value under key and report success."""
