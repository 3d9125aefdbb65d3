# ua_classifier/cache.py

from threading import Lock
from typing import Callable, Dict, Generic, Optional, TypeVar

V = TypeVar("V")


class BoundedCache(Generic[V]):
    """
    Fixed-capacity map from raw UA string to a computed record.

    Eviction is strict insertion order (FIFO): lookups do not refresh
    an entry, and the oldest inserted entry goes first when full.
    Thread-safe for concurrent requests.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: Dict[str, V] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: V, guard: Optional[Callable[[], None]] = None) -> Optional[str]:
        """
        Insert unless already present.
        Returns the evicted key, if any.

        guard runs under the lock before anything changes; an exception
        from it aborts the insert.
        """
        with self._lock:
            if guard is not None:
                guard()

            if key in self._entries:
                return None

            evicted = None
            if len(self._entries) >= self.capacity:
                evicted = next(iter(self._entries))
                del self._entries[evicted]

            self._entries[key] = value
            return evicted

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> list[str]:
        """Keys oldest first"""
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
