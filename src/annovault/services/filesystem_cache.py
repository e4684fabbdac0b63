"""Filesystem cache backend.

A persistent key/value cache in the legacy ``fetch``/``save`` style that
stores one pickle file per key. Annotation objects are arbitrary Python
objects, so entries are pickled rather than JSON encoded.

Layout:
    <directory>/<sha256(key)[:2]>/<sha256(key)>.cache

Each file holds the pair ``(key, value)``; the stored key is compared on
read so a hash collision or a foreign file is reported as a miss.
"""

from __future__ import annotations

import hashlib
import logging
import os
import pickle
import tempfile
from pathlib import Path
from typing import Any

from annovault.shared.constants import NOT_FOUND, SimpleCacheConfig
from annovault.shared.errors import (
    CacheBackendError,
    ErrorCode,
    ErrorContext,
    InfrastructureError,
)
from annovault.shared.logging import log_operation_error

logger = logging.getLogger(__name__)


class FilesystemCache:
    """Pickle-per-key cache stored under a directory.

    Writes go to a temporary file that is then renamed over the target, so
    concurrent readers observe either the old or the new entry, never a
    partial one.

    Args:
        directory: Base directory for cache files, created if missing

    Raises:
        CacheBackendError: If the directory cannot be created

    Example:
        >>> cache = FilesystemCache(Path(".annovault/cache"))
        >>> cache.save("app:Controller", ["@Route"])
        True
        >>> cache.fetch("app:Controller")
        ['@Route']
    """

    def __init__(self, directory: Path | str = SimpleCacheConfig.DEFAULT_DIRECTORY) -> None:
        self.directory = Path(directory)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            error = CacheBackendError(
                code=ErrorCode.DIRECTORY_CREATION_FAILED,
                message=f"Failed to initialize cache directory: {self.directory}",
                context=ErrorContext(
                    operation="initialize_cache",
                    file_path=str(self.directory),
                ),
                original_error=e,
            )
            log_operation_error(logger=logger, error=error)
            raise error from e

        logger.debug("Initialized FilesystemCache in %s", self.directory)

    def fetch(self, key: str) -> Any:
        cache_file = self._file_path(key)

        try:
            with open(cache_file, "rb") as f:
                stored_key, value = pickle.load(f)  # noqa: S301  # nosec B301 - files are written by this class
        except FileNotFoundError:
            return NOT_FOUND
        except (OSError, pickle.UnpicklingError, EOFError, AttributeError, ImportError, TypeError, ValueError) as e:
            # Entries from an older class layout or a truncated file are misses
            error = InfrastructureError(
                code=ErrorCode.CACHE_READ_FAILED,
                message=f"Failed to read cache entry for key '{key}'",
                context=ErrorContext(
                    operation="cache_fetch",
                    file_path=str(cache_file),
                    additional_data={"key": key},
                ),
                original_error=e,
            )
            log_operation_error(logger=logger, error=error)
            return NOT_FOUND

        if stored_key != key:
            logger.warning("Cache file %s holds key '%s', expected '%s'", cache_file, stored_key, key)
            return NOT_FOUND

        return value

    def contains(self, key: str) -> bool:
        return self._file_path(key).exists()

    def save(self, key: str, value: Any) -> bool:
        cache_file = self._file_path(key)
        temp_path: str | None = None

        try:
            cache_file.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=cache_file.parent,
                suffix=SimpleCacheConfig.TEMP_SUFFIX,
            )
            with os.fdopen(fd, "wb") as f:
                pickle.dump((key, value), f, protocol=pickle.HIGHEST_PROTOCOL)
            os.replace(temp_path, cache_file)
            temp_path = None
        except (OSError, pickle.PicklingError, TypeError, AttributeError) as e:
            error = InfrastructureError(
                code=ErrorCode.CACHE_WRITE_FAILED,
                message=f"Failed to write cache entry for key '{key}'",
                context=ErrorContext(
                    operation="cache_save",
                    file_path=str(cache_file),
                    additional_data={"key": key},
                ),
                original_error=e,
            )
            log_operation_error(logger=logger, error=error)
            return False
        finally:
            if temp_path is not None:
                Path(temp_path).unlink(missing_ok=True)

        return True

    def delete(self, key: str) -> bool:
        try:
            self._file_path(key).unlink(missing_ok=True)
        except OSError:
            logger.warning("Failed to delete cache entry for key '%s'", key, exc_info=True)
            return False
        return True

    def flush_all(self) -> bool:
        """Delete every entry file below the cache directory."""
        success = True
        for cache_file in self.directory.rglob(f"*{SimpleCacheConfig.FILE_SUFFIX}"):
            try:
                cache_file.unlink()
            except OSError:
                logger.warning("Failed to delete cache file %s", cache_file, exc_info=True)
                success = False
        return success

    def _file_path(self, key: str) -> Path:
        key_hash = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return self.directory / key_hash[:2] / f"{key_hash}{SimpleCacheConfig.FILE_SUFFIX}"
