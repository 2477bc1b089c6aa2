from __future__ import annotations

import logging
import random
from typing import Protocol

from ..errors import DistanceUnavailable
from .config import DEFAULT_DISTANCE_CONFIG, DistanceConfig

logger = logging.getLogger(__name__)


class DistanceService(Protocol):
    def query_distance(self, city_a: str, city_b: str) -> int:
        """Travel distance between two cities. May raise on any failure."""
        ...


class SimulatedDistanceService:
    """
    Stand-in for a real distance API.

    Distinct cities are 1 to 10 units apart, chosen at random the first time
    a pair is asked for and stable afterwards. With ``failure_rate > 0`` a
    call raises ``DistanceUnavailable`` instead of answering.
    """

    def __init__(self, failure_rate: float = 0.0, rng: random.Random | None = None) -> None:
        self.failure_rate = failure_rate
        self.calls = 0
        self._rng = rng or random.Random()
        self._known: dict[frozenset[str], int] = {}

    @classmethod
    def from_config(cls, config: DistanceConfig = DEFAULT_DISTANCE_CONFIG) -> SimulatedDistanceService:
        return cls(failure_rate=config.failure_rate, rng=random.Random(config.seed))

    def query_distance(self, city_a: str, city_b: str) -> int:
        self.calls += 1
        if self.failure_rate and self._rng.random() < self.failure_rate:
            raise DistanceUnavailable(f"distance service unavailable for {city_a} -> {city_b}")

        key = frozenset((city_a, city_b))
        distance = self._known.get(key)
        if distance is None:
            distance = 0 if city_a == city_b else 1 + round(self._rng.random() * 9)
            self._known[key] = distance

        logger.debug("query_distance: %s -> %s = %d", city_a, city_b, distance)
        return distance
