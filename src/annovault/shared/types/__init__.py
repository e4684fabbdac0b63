"""Shared type aliases."""

from .cache import AnnotationList, CacheKey, Timestamp

__all__ = ["AnnotationList", "CacheKey", "Timestamp"]
