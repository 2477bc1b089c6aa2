from __future__ import annotations

import logging
from typing import Callable

from ..catalog.models import Customer, Event
from ..distance.resolver import DistanceResolver
from .models import DEFAULT_LIMIT, Strategy

logger = logging.getLogger(__name__)

SelectionFn = Callable[[Customer, list[Event], DistanceResolver, int], list[Event]]


def _take(strategy: Strategy, candidates: list[Event], limit: int) -> list[Event]:
    """First ``limit`` candidates; a shorter list when inventory runs out."""
    if len(candidates) < limit:
        logger.warning(
            "Strategy %s wanted %d events but only %d are available",
            strategy.value, limit, len(candidates),
        )
    return candidates[:limit]


def events_in_city(customer: Customer, events: list[Event]) -> list[Event]:
    return [e for e in events if e.city == customer.city]


def same_city_events(
    customer: Customer,
    events: list[Event],
    resolver: DistanceResolver | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[Event]:
    """Every event in the customer's city. ``limit`` does not apply."""
    return events_in_city(customer, events)


def nearest_events(
    customer: Customer,
    events: list[Event],
    resolver: DistanceResolver,
    limit: int = DEFAULT_LIMIT,
) -> list[Event]:
    """
    Same-city events, padded with the closest remote events.

    Remote events are only ranked when the customer's city has fewer than
    ``limit`` events. Ranking is by resolved distance from the customer's
    city; unreachable cities sort last and equal distances keep catalogue
    order.
    """
    selected = events_in_city(customer, events)
    if len(selected) < limit:
        remote = [e for e in events if e.city != customer.city]
        remote_cities = list(dict.fromkeys(e.city for e in remote))
        distances = resolver.resolve_many(customer.city, remote_cities)
        selected.extend(sorted(remote, key=lambda e: distances[e.city]))
    return _take(Strategy.nearest, selected, limit)


def cheapest_events(
    customer: Customer,
    events: list[Event],
    resolver: DistanceResolver | None = None,
    limit: int = DEFAULT_LIMIT,
) -> list[Event]:
    return _take(Strategy.cheapest, sorted(events, key=lambda e: e.price), limit)


STRATEGIES: dict[Strategy, SelectionFn] = {
    Strategy.same_city: same_city_events,
    Strategy.nearest: nearest_events,
    Strategy.cheapest: cheapest_events,
}


def select(
    strategy: Strategy,
    customer: Customer,
    events: list[Event],
    resolver: DistanceResolver,
    limit: int = DEFAULT_LIMIT,
) -> list[Event]:
    return STRATEGIES[strategy](customer, events, resolver, limit)


def count_candidates(strategy: Strategy, customer: Customer, events: list[Event]) -> int:
    """How many events a strategy chooses from before truncation."""
    if strategy is Strategy.same_city:
        return len(events_in_city(customer, events))
    return len(events)
