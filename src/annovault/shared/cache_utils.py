"""Cache key utilities for declaration-identity based caching.

This module derives cache keys from the identity of a declaration (a class,
one of its properties or one of its methods). Keys are a pure function of
the declaration's qualified name and member name, so they are identical
across calls and across process restarts.

Key format:
    - Class:    "{flat_identity}"
    - Property: "{flat_identity}${property_name}"
    - Method:   "{flat_identity}#{method_name}"
    - Marker:   "[C]{key}" (debug-mode timestamp entry)

Example:
    >>> flatten_identity("app.controllers:Controller")
    'app.controllers.Controller'
    >>> build_method_key("app.controllers:Controller", "hello_action")
    'app.controllers.Controller#hello_action'
"""

from __future__ import annotations

from annovault.shared.constants import CacheKeyConfig
from annovault.shared.errors import create_invalid_key_error


def flatten_identity(qualified_name: str) -> str:
    """Turn a namespaced qualified name into a flat key identity.

    Namespace separators (``:`` between module and qualname, ``\\`` and
    ``/`` from descriptor names) are replaced by ``.`` so the result never
    contains a character the item protocol reserves.

    Args:
        qualified_name: Qualified name as returned by an inspector

    Returns:
        Flat identity string

    Raises:
        InvalidCacheKeyError: If qualified_name is empty
    """
    if not qualified_name:
        raise create_invalid_key_error(qualified_name, "qualified name is empty")

    flat = qualified_name
    for separator in (CacheKeyConfig.QUALNAME_SEPARATOR, "\\", "/"):
        flat = flat.replace(separator, CacheKeyConfig.IDENTITY_SEPARATOR)
    return flat


def build_class_key(qualified_name: str) -> str:
    """Return the cache key of a class."""
    return flatten_identity(qualified_name)


def build_property_key(qualified_name: str, property_name: str) -> str:
    """Return the cache key of a property declared on a class."""
    return f"{flatten_identity(qualified_name)}{CacheKeyConfig.PROPERTY_SEPARATOR}{property_name}"


def build_method_key(qualified_name: str, method_name: str) -> str:
    """Return the cache key of a method declared on a class."""
    return f"{flatten_identity(qualified_name)}{CacheKeyConfig.METHOD_SEPARATOR}{method_name}"


def build_marker_key(cache_key: str) -> str:
    """Return the key of the timestamp marker paired with cache_key.

    Example:
        >>> build_marker_key("app.Controller")
        '[C]app.Controller'
    """
    return f"{CacheKeyConfig.MARKER_PREFIX}{cache_key}"


def validate_key(key: str) -> str:
    """Validate a key against the item protocol's reserved characters.

    Args:
        key: Key to validate

    Returns:
        The key unchanged

    Raises:
        InvalidCacheKeyError: If the key is not a non-empty string or
            contains one of ``{}()/\\@:``
    """
    if not isinstance(key, str) or not key:
        raise create_invalid_key_error(str(key), "key must be a non-empty string")

    reserved = [c for c in CacheKeyConfig.RESERVED_CHARACTERS if c in key]
    if reserved:
        raise create_invalid_key_error(key, f"reserved characters {''.join(reserved)!r}")

    return key
