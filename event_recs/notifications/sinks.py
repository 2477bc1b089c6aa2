from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Protocol

from ..catalog.models import Customer, Event

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    def deliver(self, customer: Customer, event: Event) -> None:
        """Add one event to the customer's notification."""
        ...


class LoggingSink:
    """Writes each delivery to the log, one line per event."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def deliver(self, customer: Customer, event: Event) -> None:
        logger.log(
            self.level,
            "addToEmail: customer=%s (%s), event=%s in %s for %d",
            customer.name, customer.city, event.name, event.city, event.price,
        )


class OutboxSink:
    """Keeps deliveries in memory so they can be inspected later."""

    def __init__(self) -> None:
        self._deliveries: list[dict[str, Any]] = []

    def deliver(self, customer: Customer, event: Event) -> None:
        self._deliveries.append({
            "customer": customer.model_dump(),
            "event": event.model_dump(),
            "timestamp": time.time(),
        })

    def get_deliveries(self) -> list[dict[str, Any]]:
        return list(self._deliveries)

    def clear(self) -> None:
        self._deliveries.clear()


class FanoutSink:
    def __init__(self, sinks: Iterable[NotificationSink]) -> None:
        self.sinks = list(sinks)

    def deliver(self, customer: Customer, event: Event) -> None:
        for sink in self.sinks:
            sink.deliver(customer, event)
