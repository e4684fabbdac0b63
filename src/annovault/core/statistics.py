"""
Cached Reader Statistics

Counters describing how annotation lookups were served: from the in-process
memo, from the persistent cache, or by calling the delegate reader.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, fields
from typing import Any


@dataclass
class ReaderStatistics:
    """Thread-safe lookup counters for one cached reader.

    Attributes:
        memo_hits: Lookups answered by the in-process memo
        cache_hits: Lookups answered by the persistent cache
        cache_misses: Lookups that found no persistent entry
        stale_entries: Persistent entries rejected as stale in debug mode
        delegate_calls: Calls made to the delegate reader
        failed_writes: Persistent writes the backend reported as failed
    """

    memo_hits: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    stale_entries: int = 0
    delegate_calls: int = 0
    failed_writes: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def increment(self, counter: str, amount: int = 1) -> None:
        """Increase one counter.

        Args:
            counter: Name of the counter field
            amount: Increment, defaults to 1

        Raises:
            AttributeError: If counter is not a known counter
        """
        if counter not in self._counter_names():
            msg = f"Unknown statistics counter: {counter}"
            raise AttributeError(msg)

        with self._lock:
            setattr(self, counter, getattr(self, counter) + amount)

    @property
    def total_lookups(self) -> int:
        """Lookups served from any layer."""
        return self.memo_hits + self.cache_hits + self.cache_misses + self.stale_entries

    @property
    def hit_ratio(self) -> float:
        """Share of lookups that did not need the delegate (0.0 - 1.0)."""
        total = self.total_lookups
        if total == 0:
            return 0.0
        return (self.memo_hits + self.cache_hits) / total

    def reset(self) -> None:
        """Zero every counter."""
        with self._lock:
            for name in self._counter_names():
                setattr(self, name, 0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        with self._lock:
            data: dict[str, Any] = {name: getattr(self, name) for name in self._counter_names()}
        data["total_lookups"] = self.total_lookups
        data["hit_ratio"] = round(self.hit_ratio, 4)
        return data

    @classmethod
    def _counter_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if not f.name.startswith("_"))
