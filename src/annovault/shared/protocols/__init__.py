"""Protocol interfaces used to decouple the reader from its collaborators."""

from .cache import CacheItemPoolProtocol, CacheItemProtocol, SimpleCacheProtocol
from .inspection import DeclarationInspector
from .reader import AnnotationReaderProtocol

__all__ = [
    "AnnotationReaderProtocol",
    "CacheItemPoolProtocol",
    "CacheItemProtocol",
    "DeclarationInspector",
    "SimpleCacheProtocol",
]
