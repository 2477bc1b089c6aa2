"""
Event recommendation engine.

Responsibilities:
- Pick the events in the customer's own city.
- Pad scarce same-city results with the nearest remote events, ranked by
  resolved travel distance.
- Pick the cheapest events regardless of location.
- Hand each selection to a notification sink, in selection order.
"""
