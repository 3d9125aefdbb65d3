# ua_classifier/stats.py

from threading import Lock
from typing import Dict


class ClassificationStats:
    """
    Per-interval request counters.
    Thread-safe for concurrent requests.
    """

    def __init__(self):
        self._lock = Lock()
        self._reset()

    def _reset(self) -> None:
        self._requests: int = 0
        self._cache_hits: int = 0
        self._cache_misses: int = 0
        self._evictions: int = 0
        self._failures: Dict[str, int] = {}
        self._by_device_type: Dict[str, int] = {}
        self._by_browser: Dict[str, int] = {}

    def record_hit(self, device_type: str) -> None:
        with self._lock:
            self._requests += 1
            self._cache_hits += 1
            self._count(self._by_device_type, device_type)

    def record_miss(self, device_type: str, browser: str, evicted: bool = False) -> None:
        with self._lock:
            self._requests += 1
            self._cache_misses += 1
            if evicted:
                self._evictions += 1
            self._count(self._by_device_type, device_type)
            self._count(self._by_browser, browser)

    def record_failure(self, kind: str) -> None:
        with self._lock:
            self._requests += 1
            self._count(self._failures, kind)

    def snapshot(self) -> dict:
        with self._lock:
            return self._build()

    def get_and_reset_minute_stats(self) -> dict:
        """
        Get stats for the current interval and reset counters.
        Called by the report job.
        """
        with self._lock:
            stats = self._build()
            self._reset()
            return stats

    def _build(self) -> dict:
        return {
            "requests": self._requests,
            "cache_hits": self._cache_hits,
            "cache_misses": self._cache_misses,
            "evictions": self._evictions,
            "failures": dict(self._failures),
            "by_device_type": dict(self._by_device_type),
            "by_browser": dict(self._by_browser),
        }

    @staticmethod
    def _count(counts: Dict[str, int], key: str) -> None:
        counts[key] = counts.get(key, 0) + 1
