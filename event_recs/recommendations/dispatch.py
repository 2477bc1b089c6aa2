from __future__ import annotations

import logging

from ..catalog.models import Customer, Event
from ..catalog.store import get_events
from ..distance.config import DEFAULT_DISTANCE_CONFIG, DistanceConfig
from ..distance.resolver import DistanceResolver
from ..distance.service import SimulatedDistanceService
from ..notifications.sinks import LoggingSink, NotificationSink
from .config import DEFAULT_RECOMMENDATION_CONFIG, RecommendationConfig
from .models import DEFAULT_LIMIT
from .selector import cheapest_events, nearest_events, same_city_events

logger = logging.getLogger(__name__)


def dispatch(customer: Customer, events: list[Event], sink: NotificationSink) -> int:
    """Deliver each event to ``sink`` in order; return how many were sent."""
    for event in events:
        sink.deliver(customer, event)
    return len(events)


def send_all_in_city(customer: Customer, events: list[Event], sink: NotificationSink) -> int:
    return dispatch(customer, same_city_events(customer, events), sink)


def send_closest(
    customer: Customer,
    events: list[Event],
    resolver: DistanceResolver,
    sink: NotificationSink,
    limit: int = DEFAULT_LIMIT,
) -> int:
    return dispatch(customer, nearest_events(customer, events, resolver, limit), sink)


def send_cheapest(
    customer: Customer,
    events: list[Event],
    sink: NotificationSink,
    limit: int = DEFAULT_LIMIT,
) -> int:
    return dispatch(customer, cheapest_events(customer, events, limit=limit), sink)


def run_demo(
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
    distance_config: DistanceConfig = DEFAULT_DISTANCE_CONFIG,
    sink: NotificationSink | None = None,
) -> dict[str, int]:
    """
    Run all three selections for the configured customer.

    Steps:
    - Load and flatten the bundled taxonomy.
    - Send every event in the customer's city.
    - Send the closest events, padding with remote cities when needed.
    - Send the cheapest events.

    Returns the number of deliveries per selection.
    """
    events = get_events()
    customer = Customer(name=config.customer_name, city=config.customer_city)
    resolver = DistanceResolver(
        SimulatedDistanceService.from_config(distance_config),
        retry_budget=distance_config.retry_budget,
    )
    if sink is None:
        sink = LoggingSink()
    logger.info("Catalogue has %d events", len(events))

    logger.info("Mailing all events in %s", customer.city)
    same_city = send_all_in_city(customer, events, sink)

    logger.info("Mailing %d closest events to %s", config.limit, customer.city)
    closest = send_closest(customer, events, resolver, sink, config.limit)

    logger.info("Mailing %d cheapest events", config.limit)
    cheapest = send_cheapest(customer, events, sink, config.limit)

    return {"same_city": same_city, "nearest": closest, "cheapest": cheapest}


if __name__ == "__main__":
    logging.basicConfig(
        level=DEFAULT_RECOMMENDATION_CONFIG.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    counts = run_demo()
    print(f"Demo complete. Deliveries: {counts}")
