from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterable

from .cache import DistanceCache
from .config import DEFAULT_DISTANCE_CONFIG
from .service import DistanceService

logger = logging.getLogger(__name__)

# Sorts after every real distance
MAX_DISTANCE = sys.maxsize


def _is_distance(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one bounded attempt loop against the distance service."""

    distance: int | None
    attempts: int

    @property
    def resolved(self) -> bool:
        return self.distance is not None


class DistanceResolver:
    """
    Memoized, retrying front for an unreliable ``DistanceService``.

    ``resolve`` never raises: a pair the service cannot answer within the
    retry budget resolves to ``MAX_DISTANCE``, and that outcome is cached
    like any other so the pair is not queried again this session.
    """

    def __init__(
        self,
        service: DistanceService,
        cache: DistanceCache | None = None,
        retry_budget: int = DEFAULT_DISTANCE_CONFIG.retry_budget,
    ) -> None:
        if retry_budget < 1:
            raise ValueError("retry_budget must be at least 1")
        self.service = service
        self.cache = cache if cache is not None else DistanceCache()
        self.retry_budget = retry_budget

    def lookup(self, city_a: str, city_b: str) -> LookupResult:
        """
        Query the service, retrying failures up to the retry budget.

        Exceptions and answers that are not non-negative integers both count
        as failed attempts.
        """
        for attempt in range(1, self.retry_budget + 1):
            try:
                distance = self.service.query_distance(city_a, city_b)
            except Exception:
                logger.warning(
                    "Distance lookup %s -> %s failed (attempt %d/%d)",
                    city_a, city_b, attempt, self.retry_budget,
                    exc_info=True,
                )
                continue
            if not _is_distance(distance):
                logger.warning(
                    "Distance lookup %s -> %s returned %r (attempt %d/%d), ignoring",
                    city_a, city_b, distance, attempt, self.retry_budget,
                )
                continue
            return LookupResult(distance=distance, attempts=attempt)
        return LookupResult(distance=None, attempts=self.retry_budget)

    def resolve(self, city_a: str, city_b: str) -> int:
        if city_a == city_b:
            return 0

        cached = self.cache.get(city_a, city_b)
        if cached is not None:
            return cached

        result = self.lookup(city_a, city_b)
        if result.resolved:
            distance = result.distance
        else:
            logger.warning(
                "No distance for %s -> %s after %d attempts, treating as unreachable",
                city_a, city_b, result.attempts,
            )
            distance = MAX_DISTANCE
        return self.cache.set(city_a, city_b, distance)

    def resolve_many(self, origin: str, cities: Iterable[str]) -> dict[str, int]:
        """Distance from ``origin`` to each city, keyed by city in input order."""
        return {city: self.resolve(origin, city) for city in cities}
