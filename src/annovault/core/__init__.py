"""AnnoVault core: cache items, declaration references, inspectors and the cached reader."""

from .cache import CacheItem, CacheItemPool
from .cached_reader import CachedReader
from .declarations import MethodDeclaration, PropertyDeclaration
from .inspection import (
    DeclarationDescriptor,
    DescriptorInspector,
    ReflectionInspector,
    source_mtime,
)
from .statistics import ReaderStatistics

__all__ = [
    "CacheItem",
    "CacheItemPool",
    "CachedReader",
    "DeclarationDescriptor",
    "DescriptorInspector",
    "MethodDeclaration",
    "PropertyDeclaration",
    "ReaderStatistics",
    "ReflectionInspector",
    "source_mtime",
]
