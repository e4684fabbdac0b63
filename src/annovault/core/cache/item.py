"""Cache item value object."""

from __future__ import annotations

from typing import Any

from annovault.shared.errors import create_unsupported_operation_error


class CacheItem:
    """One cache slot handed out by an item pool.

    A miss is an ordinary item with ``is_hit() == False`` and no value;
    callers fill it with ``set`` and hand it back to ``save``.

    Example:
        >>> item = CacheItem("app.Controller")
        >>> item.is_hit()
        False
        >>> item.set(["@Route"]).get()
        ['@Route']
    """

    __slots__ = ("_is_hit", "_key", "_value")

    def __init__(self, key: str, is_hit: bool = False, value: Any = None) -> None:
        self._key = key
        self._is_hit = is_hit
        self._value = value

    def get_key(self) -> str:
        return self._key

    def get(self) -> Any:
        return self._value

    def is_hit(self) -> bool:
        return self._is_hit

    def set(self, value: Any) -> CacheItem:
        """Replace the payload.

        The hit flag is left alone: it describes the lookup that produced
        this item, not its current content.
        """
        self._value = value
        return self

    def expires_at(self, expiration: Any) -> CacheItem:
        """Items never expire on a schedule."""
        raise create_unsupported_operation_error("expires_at", type(self).__name__)

    def expires_after(self, time: Any) -> CacheItem:
        """Items never expire on a schedule."""
        raise create_unsupported_operation_error("expires_after", type(self).__name__)

    def __repr__(self) -> str:
        return f"CacheItem(key={self._key!r}, is_hit={self._is_hit!r})"
