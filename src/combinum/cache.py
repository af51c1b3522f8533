# src/combinum/cache.py
from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

# Factorials up to here fit a 64-bit machine word; they are seeded eagerly.
SEED_LIMIT = 10


def _seed_values() -> dict[int, int]:
    seed = {0: 1}
    acc = 1
    for i in range(1, SEED_LIMIT + 1):
        acc *= i
        seed[i] = acc
    return seed


class FactorialCache:
    """
    Thread-safe map n -> n! (Python int).

    Grows monotonically through store(); only clear() removes entries,
    including the seeded 0!..10!.
    """

    def __init__(self, *, seed: bool = True):
        self._lock = threading.RLock()
        self._values: dict[int, int] = _seed_values() if seed else {}

    @contextmanager
    def lock(self) -> Iterator[FactorialCache]:
        """Hold the cache lock across a check-then-insert sequence."""
        with self._lock:
            yield self

    def get(self, n: int) -> int | None:
        with self._lock:
            return self._values.get(n)

    def store(self, n: int, value: int) -> None:
        with self._lock:
            self._values[n] = int(value)

    def nearest_below(self, n: int) -> tuple[int, int] | None:
        """Largest cached (k, k!) with k <= n, or None."""
        with self._lock:
            keys = [k for k in self._values if k <= n]
            if not keys:
                return None
            k = max(keys)
            return k, self._values[k]

    def keys(self) -> list[int]:
        with self._lock:
            return sorted(self._values)

    def snapshot(self) -> dict[int, int]:
        with self._lock:
            return dict(self._values)

    def clear(self) -> None:
        with self._lock:
            self._values.clear()

    def reseed(self) -> None:
        with self._lock:
            self._values.update(_seed_values())

    def __contains__(self, n: object) -> bool:
        with self._lock:
            return n in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return f"FactorialCache(size={len(self)})"


_DEFAULT_CACHE = FactorialCache()


def default_cache() -> FactorialCache:
    """Process-wide cache used when callers do not inject their own."""
    return _DEFAULT_CACHE
