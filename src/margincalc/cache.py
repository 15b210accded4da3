"""In-memory memoization of pricing results."""

from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from margincalc.normalizer import NormalizedInputs
from margincalc.pricing import PricingResult


@dataclass(frozen=True)
class CacheStats:
    """Cache observability counters."""

    hits: int
    misses: int
    size: int
    max_entries: int


class ResultCache:
    """Thread-safe LRU cache of results keyed on normalized inputs.

    Results are a pure function of the key, so entries never expire; only
    capacity bounds the cache.
    """

    def __init__(self, *, max_entries: int) -> None:
        self._lock = threading.Lock()
        self._max_entries = max_entries
        self._entries: OrderedDict[NormalizedInputs, PricingResult] = OrderedDict()
        self._hits = 0
        self._misses = 0

    def configure(self, *, max_entries: int) -> None:
        """Apply runtime cache limits from config."""
        with self._lock:
            self._max_entries = max_entries
            self._prune_capacity_locked()

    def get(self, key: NormalizedInputs) -> Optional[PricingResult]:
        """Return cached result if present."""
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self._misses += 1
                return None
            self._hits += 1
            self._entries.move_to_end(key)
            return result

    def set(self, key: NormalizedInputs, result: PricingResult) -> None:
        """Insert/update result and enforce capacity."""
        with self._lock:
            self._entries[key] = result
            self._entries.move_to_end(key)
            self._prune_capacity_locked()

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._entries),
                max_entries=self._max_entries,
            )

    def reset(self) -> None:
        """Clear cache state (used by tests)."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def _prune_capacity_locked(self) -> None:
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
