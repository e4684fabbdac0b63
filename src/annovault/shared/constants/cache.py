"""
Cache Key Constants

Separators and reserved tags used to derive cache keys from declaration
identity. Changing any of these invalidates every persisted entry.
"""


class _NotFound:
    """Sentinel type returned by simple caches for a missing key."""

    _instance: "_NotFound | None" = None

    def __new__(cls) -> "_NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


class CacheKeyConfig:
    """Key derivation for declarations."""

    # Flat identity delimiter replacing namespace separators
    IDENTITY_SEPARATOR = "."

    # Separator between module path and qualname in a Python qualified name
    QUALNAME_SEPARATOR = ":"

    PROPERTY_SEPARATOR = "$"
    METHOD_SEPARATOR = "#"

    # Prefix of the timestamp marker kept next to each entry in debug mode
    MARKER_PREFIX = "[C]"

    # Characters an item pool key must not contain
    RESERVED_CHARACTERS = "{}()/\\@:"


class SimpleCacheConfig:
    """Key mapping for legacy key/value caches."""

    # Legacy caches namespace their keys with ':' instead of '.'
    NAMESPACE_SEPARATOR = ":"

    FILE_SUFFIX = ".cache"
    TEMP_SUFFIX = ".tmp"
    DEFAULT_DIRECTORY = ".annovault/cache"


class ReaderDefaults:
    """Defaults for the cached reader."""

    DEBUG = False
    LOG_KEY_PREVIEW = 80
