"""In-memory cache backends.

``ArrayCache`` is a process-local key/value cache in the legacy
``fetch``/``save`` style; ``ArrayCachePool`` is a process-local item pool.
Both keep entries in a plain dict for the lifetime of the instance and are
meant for tests, benchmarks and short-lived tools.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from annovault.core.cache.item import CacheItem
from annovault.shared.cache_utils import validate_key
from annovault.shared.constants import NOT_FOUND
from annovault.shared.protocols import CacheItemProtocol

logger = logging.getLogger(__name__)


class ArrayCache:
    """Dict-backed simple cache.

    Example:
        >>> cache = ArrayCache()
        >>> cache.fetch("app:Controller")
        NOT_FOUND
        >>> cache.save("app:Controller", [])
        True
        >>> cache.fetch("app:Controller")
        []
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}
        self._lock = threading.Lock()

    def fetch(self, key: str) -> Any:
        with self._lock:
            return self._data.get(key, NOT_FOUND)

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def save(self, key: str, value: Any) -> bool:
        with self._lock:
            self._data[key] = value
        return True

    def delete(self, key: str) -> bool:
        with self._lock:
            self._data.pop(key, None)
        return True

    def flush_all(self) -> bool:
        with self._lock:
            self._data.clear()
        return True

    def __len__(self) -> int:
        return len(self._data)


class ArrayCachePool:
    """Dict-backed item pool.

    Keys are validated against the reserved characters of the item protocol
    on every call.

    Example:
        >>> pool = ArrayCachePool()
        >>> pool.save(pool.get_item("app.Controller#hello_action").set([]))
        True
        >>> pool.has_item("app.Controller#hello_action")
        True
    """

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get_item(self, key: str) -> CacheItem:
        validate_key(key)
        with self._lock:
            if key not in self._items:
                return CacheItem(key)
            return CacheItem(key, True, self._items[key])

    def has_item(self, key: str) -> bool:
        validate_key(key)
        with self._lock:
            return key in self._items

    def save(self, item: CacheItemProtocol) -> bool:
        key = validate_key(item.get_key())
        with self._lock:
            self._items[key] = item.get()
        return True

    def delete_item(self, key: str) -> bool:
        validate_key(key)
        with self._lock:
            self._items.pop(key, None)
        return True

    def clear(self) -> bool:
        with self._lock:
            self._items.clear()
        logger.debug("Cleared in-memory item pool")
        return True

    def __len__(self) -> int:
        return len(self._items)
