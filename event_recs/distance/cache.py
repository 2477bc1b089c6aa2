from __future__ import annotations

import threading


class DistanceCache:
    """
    Session-wide memo of distances keyed by unordered city pair.

    Entries are never overwritten or evicted: the first value stored for a
    pair is the value for the rest of the session.
    """

    def __init__(self) -> None:
        self._distances: dict[frozenset[str], int] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def _make_key(city_a: str, city_b: str) -> frozenset[str]:
        return frozenset((city_a, city_b))

    def get(self, city_a: str, city_b: str) -> int | None:
        key = self._make_key(city_a, city_b)
        with self._lock:
            distance = self._distances.get(key)
            if distance is None:
                self._misses += 1
            else:
                self._hits += 1
            return distance

    def set(self, city_a: str, city_b: str, distance: int) -> int:
        """Store ``distance`` unless the pair is already known; return the stored value."""
        key = self._make_key(city_a, city_b)
        with self._lock:
            return self._distances.setdefault(key, distance)

    def __contains__(self, pair: tuple[str, str]) -> bool:
        with self._lock:
            return self._make_key(*pair) in self._distances

    def __len__(self) -> int:
        with self._lock:
            return len(self._distances)

    def stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._distances),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._distances.clear()
            self._hits = 0
            self._misses = 0
