from pathlib import Path
from unittest.mock import MagicMock

import pytest

from event_recs.catalog.config import TaxonomyConfig
from event_recs.catalog.flatten import flatten
from event_recs.catalog.loader import load_taxonomy
from event_recs.catalog.models import Customer, Event
from event_recs.distance.resolver import DistanceResolver
from event_recs.errors import DistanceUnavailable
from event_recs.recommendations.models import Strategy
from event_recs.recommendations.selector import (
    cheapest_events,
    count_candidates,
    nearest_events,
    same_city_events,
    select,
)

BUNDLED = Path(__file__).resolve().parent.parent / "catalog" / "data" / "events.json"
NEW_YORKER = Customer(name="Mr. Fake", city="New York")


@pytest.fixture
def events() -> list[Event]:
    return flatten(load_taxonomy(TaxonomyConfig(path=BUNDLED)))


def _resolver(distances: dict[str, int], default: int = 9) -> DistanceResolver:
    """Resolver over a fake service answering from ``distances`` keyed by destination."""
    service = MagicMock()
    service.query_distance.side_effect = lambda a, b: distances.get(b, default)
    return DistanceResolver(service)


def _failing_resolver(reachable: dict[str, int] | None = None) -> DistanceResolver:
    reachable = reachable or {}

    def query(a: str, b: str) -> int:
        if b in reachable:
            return reachable[b]
        raise DistanceUnavailable(b)

    service = MagicMock()
    service.query_distance.side_effect = query
    return DistanceResolver(service, retry_budget=2)


def test_same_city_returns_only_customer_city(events):
    chosen = same_city_events(NEW_YORKER, events)

    assert len(chosen) == 3
    assert all(e.city == "New York" for e in chosen)
    assert all(e in events for e in chosen)
    assert [e.price for e in chosen] == [103, 95, 160]


def test_same_city_has_no_upper_bound():
    many = [Event(name=f"gig {i}", city="Lyon", price=i) for i in range(12)]

    assert len(same_city_events(Customer(name="A", city="Lyon"), many)) == 12


def test_nearest_pads_with_closest_remote_events(events):
    resolver = _resolver({"Hartford": 2, "Camden": 5, "Bethel": 5})

    chosen = nearest_events(NEW_YORKER, events, resolver)

    assert [e.city for e in chosen] == ["New York"] * 3 + ["Hartford", "Camden"]


def test_nearest_ties_keep_catalogue_order(events):
    resolver = _resolver({"Bethel": 3, "Camden": 3, "Hartford": 3}, default=8)

    chosen = nearest_events(NEW_YORKER, events, resolver)

    assert [e.city for e in chosen[3:]] == ["Camden", "Hartford"]


def test_nearest_skips_lookups_when_city_has_enough():
    local = [Event(name=f"gig {i}", city="Lyon", price=i) for i in range(6)]
    remote = [Event(name="far", city="Nice", price=1)]
    resolver = _resolver({})

    chosen = nearest_events(Customer(name="A", city="Lyon"), remote + local, resolver)

    assert chosen == local[:5]
    resolver.service.query_distance.assert_not_called()


def test_nearest_resolves_each_remote_city_once(events):
    resolver = _resolver({})

    nearest_events(NEW_YORKER, events, resolver)

    remote_cities = {e.city for e in events if e.city != "New York"}
    assert resolver.service.query_distance.call_count == len(remote_cities)


def test_nearest_terminates_when_distance_service_is_down(events):
    resolver = _failing_resolver()

    chosen = nearest_events(NEW_YORKER, events, resolver)

    assert len(chosen) == 5
    assert [e.city for e in chosen] == ["New York"] * 3 + ["Camden", "Hartford"]


def test_nearest_orders_unresolved_cities_last(events):
    resolver = _failing_resolver(reachable={"London": 7})

    chosen = nearest_events(NEW_YORKER, events, resolver)

    assert [e.city for e in chosen[3:]] == ["London", "London"]
    assert [e.price for e in chosen[3:]] == [138, 110]


def test_nearest_returns_fewer_when_inventory_is_small(caplog):
    few = [
        Event(name="home", city="Lyon", price=5),
        Event(name="away", city="Nice", price=5),
    ]

    chosen = nearest_events(Customer(name="A", city="Lyon"), few, _resolver({}))

    assert [e.name for e in chosen] == ["home", "away"]
    assert "only 2 are available" in caplog.text


def test_cheapest_is_sorted_by_price(events):
    chosen = cheapest_events(NEW_YORKER, events)

    prices = [e.price for e in chosen]
    assert prices == sorted(prices)
    assert prices == [16, 19, 20, 23, 28]


def test_cheapest_ties_keep_catalogue_order():
    tied = [Event(name=str(i), city="Lyon", price=10) for i in range(7)]

    chosen = cheapest_events(Customer(name="A", city="Lyon"), tied)

    assert [e.name for e in chosen] == ["0", "1", "2", "3", "4"]


def test_cheapest_with_small_inventory():
    assert cheapest_events(NEW_YORKER, []) == []


def test_select_dispatches_by_strategy(events):
    resolver = _resolver({})

    assert select(Strategy.same_city, NEW_YORKER, events, resolver) == same_city_events(NEW_YORKER, events)
    assert select(Strategy.cheapest, NEW_YORKER, events, resolver, 3) == cheapest_events(
        NEW_YORKER, events, limit=3
    )
    assert len(select(Strategy.nearest, NEW_YORKER, events, resolver, 4)) == 4


def test_count_candidates(events):
    assert count_candidates(Strategy.same_city, NEW_YORKER, events) == 3
    assert count_candidates(Strategy.nearest, NEW_YORKER, events) == 17
    assert count_candidates(Strategy.cheapest, NEW_YORKER, events) == 17
