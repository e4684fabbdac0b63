"""
Cache-related Type Definitions
"""

from __future__ import annotations

from typing import Any, List

CacheKey = str
Timestamp = int  # Unix timestamp, 0 means "no resolvable source"
AnnotationList = List[Any]
