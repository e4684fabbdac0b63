"""AnnoVault - cache-aware annotation reading.

AnnoVault wraps an annotation reader with an in-process memo and a
persistent cache keyed by declaration identity, optionally checking cached
entries against source modification times.
"""

from __future__ import annotations

from annovault.core import (
    CacheItem,
    CacheItemPool,
    CachedReader,
    DeclarationDescriptor,
    DescriptorInspector,
    MethodDeclaration,
    PropertyDeclaration,
    ReaderStatistics,
    ReflectionInspector,
)
from annovault.services import ArrayCache, ArrayCachePool, FilesystemCache
from annovault.shared.constants import NOT_FOUND

__version__ = "0.1.0"

__all__ = [
    "NOT_FOUND",
    "ArrayCache",
    "ArrayCachePool",
    "CacheItem",
    "CacheItemPool",
    "CachedReader",
    "DeclarationDescriptor",
    "DescriptorInspector",
    "FilesystemCache",
    "MethodDeclaration",
    "PropertyDeclaration",
    "ReaderStatistics",
    "ReflectionInspector",
    "__version__",
]
