"""Item pool adapter for legacy key/value caches.

Wraps a simple cache (``fetch``/``save`` by key) so it can back the cached
reader, which speaks the item protocol. Only item lookup and immediate save
are supported; every other pool operation fails fast.
"""

from __future__ import annotations

from typing import Any

from annovault.core.cache.item import CacheItem
from annovault.shared.constants import NOT_FOUND, CacheKeyConfig, SimpleCacheConfig
from annovault.shared.errors import create_unsupported_operation_error
from annovault.shared.protocols import CacheItemProtocol, SimpleCacheProtocol


class CacheItemPool:
    """Item pool on top of a ``SimpleCacheProtocol`` backend.

    Keys are written to the backend with ``.`` mapped to ``:``, the
    namespace separator legacy key/value caches use. The mapping is applied
    on every read and write and never reversed.

    Attributes:
        cache: Wrapped simple cache

    Example:
        >>> pool = CacheItemPool(ArrayCache())
        >>> pool.save(pool.get_item("app.Controller").set(["@Route"]))
        True
        >>> pool.get_item("app.Controller").is_hit()
        True
    """

    def __init__(self, cache: SimpleCacheProtocol) -> None:
        self.cache = cache

    def get_item(self, key: str) -> CacheItem:
        value = self.cache.fetch(self._map_key(key))
        if value is NOT_FOUND:
            return CacheItem(key)

        return CacheItem(key, True, value)

    def save(self, item: CacheItemProtocol) -> bool:
        return bool(self.cache.save(self._map_key(item.get_key()), item.get()))

    def get_items(self, keys: Any = ()) -> Any:
        raise create_unsupported_operation_error("get_items", type(self).__name__)

    def has_item(self, key: str) -> bool:
        raise create_unsupported_operation_error("has_item", type(self).__name__)

    def clear(self) -> bool:
        raise create_unsupported_operation_error("clear", type(self).__name__)

    def delete_item(self, key: str) -> bool:
        raise create_unsupported_operation_error("delete_item", type(self).__name__)

    def delete_items(self, keys: Any) -> bool:
        raise create_unsupported_operation_error("delete_items", type(self).__name__)

    def save_deferred(self, item: CacheItemProtocol) -> bool:
        raise create_unsupported_operation_error("save_deferred", type(self).__name__)

    def commit(self) -> bool:
        raise create_unsupported_operation_error("commit", type(self).__name__)

    @staticmethod
    def _map_key(key: str) -> str:
        return key.replace(CacheKeyConfig.IDENTITY_SEPARATOR, SimpleCacheConfig.NAMESPACE_SEPARATOR)
