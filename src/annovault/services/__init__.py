"""Cache backends for AnnoVault."""

from .array_cache import ArrayCache, ArrayCachePool
from .filesystem_cache import FilesystemCache

__all__ = [
    "ArrayCache",
    "ArrayCachePool",
    "FilesystemCache",
]
