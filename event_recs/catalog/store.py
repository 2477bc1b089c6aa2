from __future__ import annotations

import pandas as pd

from .config import TaxonomyConfig
from .flatten import flatten
from .loader import load_taxonomy
from .models import Event, EventCategory

_EVENT_COLUMNS = ["name", "city", "price"]

_taxonomy: EventCategory | None = None
_events: list[Event] | None = None


def get_taxonomy(config: TaxonomyConfig | None = None) -> EventCategory:
    """
    Return the in-memory taxonomy, loading it on first call.

    Without an explicit config the path comes from the environment.
    """
    global _taxonomy
    if _taxonomy is None:
        _taxonomy = load_taxonomy(config or TaxonomyConfig.from_env())
    return _taxonomy


def get_events(config: TaxonomyConfig | None = None) -> list[Event]:
    """Return the flattened event list, flattening the taxonomy on first call."""
    global _events
    if _events is None:
        _events = flatten(get_taxonomy(config))
    return _events


def events_frame(events: list[Event]) -> pd.DataFrame:
    return pd.DataFrame([e.model_dump() for e in events], columns=_EVENT_COLUMNS)


def summarize_events(events: list[Event]) -> dict:
    """Event count, cities and price range of a flattened catalogue."""
    df = events_frame(events)
    if df.empty:
        return {
            "event_count": 0,
            "cities": [],
            "events_per_city": {},
            "min_price": None,
            "max_price": None,
        }

    per_city = df.groupby("city").size()
    return {
        "event_count": len(df),
        "cities": sorted(df["city"].unique().tolist()),
        "events_per_city": {city: int(n) for city, n in per_city.items()},
        "min_price": int(df["price"].min()),
        "max_price": int(df["price"].max()),
    }


def reset_catalog() -> None:
    global _taxonomy, _events
    _taxonomy = None
    _events = None
