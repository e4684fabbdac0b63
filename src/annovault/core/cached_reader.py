"""Cache-aware annotation reader.

``CachedReader`` decorates an annotation reader (the *delegate*) with two
cache layers:

1. An in-process memo, private to the reader instance, that answers every
   repeated lookup without touching storage.
2. A persistent item pool that survives the process, keyed by declaration
   identity.

In debug mode each persistent entry is paired with a marker entry holding
the time it was written. A cached entry is trusted only if that time is not
older than the last modification of the declaring class, its mixins, its
interfaces and its supertype chain, so editing any of those sources makes
the reader parse the declaration again.
"""

from __future__ import annotations

import logging
import threading
import time
import warnings
from typing import Any, Callable

from annovault.core.cache.pool import CacheItemPool
from annovault.core.declarations import MethodDeclaration, PropertyDeclaration
from annovault.core.inspection import ReflectionInspector, source_mtime
from annovault.core.statistics import ReaderStatistics
from annovault.shared.cache_utils import (
    build_class_key,
    build_marker_key,
    build_method_key,
    build_property_key,
)
from annovault.shared.constants import ReaderDefaults
from annovault.shared.logging import log_operation_success
from annovault.shared.protocols import (
    AnnotationReaderProtocol,
    CacheItemPoolProtocol,
    CacheItemProtocol,
    DeclarationInspector,
    SimpleCacheProtocol,
)
from annovault.shared.types import AnnotationList, CacheKey, Timestamp

logger = logging.getLogger(__name__)


class CachedReader:
    """A cache aware annotation reader.

    Lookups are computed at most once per key per reader: the first call
    consults the persistent cache (calling the delegate on a miss or a
    stale entry) and every later call is served from the memo until
    ``clear_loaded_annotations`` is called. Every call returns a new list,
    so callers may modify the result without affecting either cache.

    Args:
        delegate: Reader that actually parses annotations
        cache: Item pool, or a legacy simple cache (deprecated, wrapped in
            a ``CacheItemPool``)
        debug: Check persistent entries for staleness against source
            modification times
        inspector: Declaration inspector used for keys and staleness,
            defaults to ``ReflectionInspector``
        statistics: Counter sink, a fresh ``ReaderStatistics`` by default

    Raises:
        TypeError: If cache is neither an item pool nor a simple cache

    Example:
        >>> reader = CachedReader(DocblockReader(), ArrayCachePool())
        >>> method = MethodDeclaration.of(Controller, "hello_action")
        >>> reader.get_method_annotations(method)
        [Route(path='/hello')]
    """

    def __init__(
        self,
        delegate: AnnotationReaderProtocol,
        cache: CacheItemPoolProtocol | SimpleCacheProtocol,
        debug: bool = ReaderDefaults.DEBUG,
        *,
        inspector: DeclarationInspector | None = None,
        statistics: ReaderStatistics | None = None,
    ) -> None:
        if isinstance(cache, CacheItemPoolProtocol):
            pool: CacheItemPoolProtocol = cache
        elif isinstance(cache, SimpleCacheProtocol):
            _warn_simple_cache(cache)
            pool = CacheItemPool(cache)
        else:
            msg = (
                f"Expected cache to be an instance of {CacheItemPoolProtocol.__name__}, "
                f"got {type(cache).__name__}"
            )
            raise TypeError(msg)

        self._delegate = delegate
        self._cache = pool
        self._debug = bool(debug)
        self._inspector: DeclarationInspector = inspector or ReflectionInspector()
        self._statistics = statistics or ReaderStatistics()
        self._loaded_annotations: dict[CacheKey, AnnotationList] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_simple_cache(
        cls,
        delegate: AnnotationReaderProtocol,
        cache: SimpleCacheProtocol,
        debug: bool = ReaderDefaults.DEBUG,
        *,
        inspector: DeclarationInspector | None = None,
        statistics: ReaderStatistics | None = None,
    ) -> CachedReader:
        """Build a reader on top of a legacy key/value cache.

        Deprecated: pass an item pool to the constructor instead.

        Raises:
            TypeError: If cache does not offer fetch/save
        """
        if not isinstance(cache, SimpleCacheProtocol):
            msg = f"Expected cache to be an instance of {SimpleCacheProtocol.__name__}, got {type(cache).__name__}"
            raise TypeError(msg)

        _warn_simple_cache(cache)
        return cls(
            delegate,
            CacheItemPool(cache),
            debug,
            inspector=inspector,
            statistics=statistics,
        )

    @property
    def delegate(self) -> AnnotationReaderProtocol:
        return self._delegate

    @property
    def cache(self) -> CacheItemPoolProtocol:
        return self._cache

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def statistics(self) -> ReaderStatistics:
        return self._statistics

    def get_class_annotations(self, cls: Any) -> AnnotationList:
        cache_key = build_class_key(self._inspector.qualified_name(cls))

        return self._fetch_cached_annotations(
            cache_key,
            cls,
            lambda: self._delegate.get_class_annotations(cls),
        )

    def get_class_annotation(self, cls: Any, kind: Any) -> Any | None:
        return _first_of_kind(self.get_class_annotations(cls), kind)

    def get_property_annotations(self, prop: PropertyDeclaration) -> AnnotationList:
        declaring_class = prop.declaring_class
        cache_key = build_property_key(self._inspector.qualified_name(declaring_class), prop.name)

        return self._fetch_cached_annotations(
            cache_key,
            declaring_class,
            lambda: self._delegate.get_property_annotations(prop),
        )

    def get_property_annotation(self, prop: PropertyDeclaration, kind: Any) -> Any | None:
        return _first_of_kind(self.get_property_annotations(prop), kind)

    def get_method_annotations(self, method: MethodDeclaration) -> AnnotationList:
        declaring_class = method.declaring_class
        cache_key = build_method_key(self._inspector.qualified_name(declaring_class), method.name)

        return self._fetch_cached_annotations(
            cache_key,
            declaring_class,
            lambda: self._delegate.get_method_annotations(method),
        )

    def get_method_annotation(self, method: MethodDeclaration, kind: Any) -> Any | None:
        return _first_of_kind(self.get_method_annotations(method), kind)

    def clear_loaded_annotations(self) -> None:
        """Forget memoized lookups; the persistent cache is left untouched."""
        with self._lock:
            self._loaded_annotations.clear()

    def get_last_modification(self, decl: Any) -> Timestamp:
        """Return when a declaring type was last modified.

        The result is the newest modification time among the type's own
        source file, its mixins, its interfaces and its supertype chain, each
        of them dated the same way recursively. A mixin's own bases are
        ancestors of every class composing it, so they count as well.

        Args:
            decl: Declaring type understood by the reader's inspector

        Returns:
            Unix timestamp, 0 when none of these sources can be resolved
        """
        inspector = self._inspector
        parent = inspector.parent(decl)

        timestamps = [source_mtime(inspector.source_file(decl))]
        timestamps.extend(self.get_last_modification(mixin) for mixin in inspector.mixins(decl))
        timestamps.extend(self.get_last_modification(iface) for iface in inspector.interfaces(decl))
        if parent is not None:
            timestamps.append(self.get_last_modification(parent))

        return max(timestamps)

    def _fetch_cached_annotations(
        self,
        cache_key: CacheKey,
        declaring_class: Any,
        delegate: Callable[[], AnnotationList],
    ) -> AnnotationList:
        with self._lock:
            if cache_key in self._loaded_annotations:
                self._statistics.increment("memo_hits")
                return list(self._loaded_annotations[cache_key])

        annotations_item = self._cache.get_item(cache_key)
        debug_item = self._cache.get_item(build_marker_key(cache_key)) if self._debug else None

        if annotations_item.is_hit():
            if debug_item is None:
                self._statistics.increment("cache_hits")
                logger.debug("Annotation cache hit: key=%s", _preview(cache_key))
                return self._remember(cache_key, annotations_item.get())

            last_modification = self.get_last_modification(declaring_class)
            if last_modification == 0 or (debug_item.is_hit() and debug_item.get() >= last_modification):
                self._statistics.increment("cache_hits")
                logger.debug("Annotation cache hit (fresh): key=%s", _preview(cache_key))
                return self._remember(cache_key, annotations_item.get())

            self._statistics.increment("stale_entries")
            logger.debug(
                "Annotation cache entry is stale: key=%s, cached_at=%s, last_modification=%d",
                _preview(cache_key),
                debug_item.get() if debug_item.is_hit() else None,
                last_modification,
            )
        else:
            self._statistics.increment("cache_misses")
            logger.debug("Annotation cache miss: key=%s", _preview(cache_key))

        started = time.perf_counter()
        data = list(delegate())
        self._statistics.increment("delegate_calls")

        annotations_item.set(data)
        self._save(annotations_item)
        if debug_item is not None:
            debug_item.set(int(time.time()))
            self._save(debug_item)

        log_operation_success(
            logger=logger,
            operation="read_annotations",
            duration_ms=(time.perf_counter() - started) * 1000,
            result_info={"annotations": len(data)},
            context={"cache_key": _preview(cache_key)},
        )

        return self._remember(cache_key, data)

    def _remember(self, cache_key: CacheKey, annotations: AnnotationList) -> AnnotationList:
        with self._lock:
            self._loaded_annotations[cache_key] = annotations
        # Callers get their own list; the memoized and stored one stays intact
        return list(annotations)

    def _save(self, item: CacheItemProtocol) -> bool:
        if self._cache.save(item):
            return True

        # Persistence failure only costs a recomputation in a later process
        self._statistics.increment("failed_writes")
        logger.warning(
            "Failed to persist annotation cache entry: key=%s",
            _preview(item.get_key()),
            extra={
                "operation": "save_cache_item",
                "context": {"cache_key": _preview(item.get_key())},
            },
        )
        return False


def _warn_simple_cache(cache: SimpleCacheProtocol) -> None:
    message = (
        f"Passing an instance of {type(cache).__name__} as cache is deprecated. "
        f"Please pass an item pool instead."
    )
    logger.warning(message, extra={"operation": "create_cached_reader"})
    # _warn_simple_cache -> constructor -> caller
    warnings.warn(message, DeprecationWarning, stacklevel=3)


def _first_of_kind(annotations: AnnotationList, kind: Any) -> Any | None:
    for annotation in annotations:
        if _matches_kind(annotation, kind):
            return annotation

    return None


def _matches_kind(annotation: Any, kind: Any) -> bool:
    """Check an annotation against a kind.

    A string kind is an explicit tag compared with the annotation's ``kind``
    attribute or its class name (short or dotted); a class or a tuple of
    classes is an accepted set checked with ``isinstance``.
    """
    if isinstance(kind, str):
        annotation_type = type(annotation)
        return kind in (
            getattr(annotation, "kind", None),
            annotation_type.__name__,
            annotation_type.__qualname__,
            f"{annotation_type.__module__}.{annotation_type.__qualname__}",
        )

    return isinstance(annotation, kind)


def _preview(key: str) -> str:
    return key[: ReaderDefaults.LOG_KEY_PREVIEW]
