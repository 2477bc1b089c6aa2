from __future__ import annotations

from .models import Event, EventCategory


def flatten(root: EventCategory) -> list[Event]:
    """
    Collect every event of the taxonomy in pre-order.

    Each node contributes its own events first, then the events of its
    children in declared order. Uses an explicit stack so arbitrarily deep
    trees do not hit the recursion limit.
    """
    events: list[Event] = []
    stack = [root]
    while stack:
        node = stack.pop()
        events.extend(node.events)
        # Reversed so the first declared child is popped next
        stack.extend(reversed(node.children))
    return events
