from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from .catalog.models import Event
from .catalog.store import get_events, summarize_events
from .distance.config import DEFAULT_DISTANCE_CONFIG
from .distance.resolver import DistanceResolver
from .distance.service import SimulatedDistanceService
from .notifications.sinks import FanoutSink, LoggingSink, NotificationSink, OutboxSink
from .recommendations.dispatch import dispatch
from .recommendations.models import RecommendationRequest, RecommendationResponse
from .recommendations.selector import count_candidates, select

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # A broken taxonomy aborts startup
    events = get_events()
    logger.info("Serving %d events", len(events))
    yield


app = FastAPI(title="Event Recommendation API", version="1.0.0", lifespan=lifespan)

_resolver = DistanceResolver(
    SimulatedDistanceService.from_config(DEFAULT_DISTANCE_CONFIG),
    retry_budget=DEFAULT_DISTANCE_CONFIG.retry_budget,
)
_outbox = OutboxSink()
_sink = FanoutSink([LoggingSink(), _outbox])


def get_catalog() -> list[Event]:
    return get_events()


def get_resolver() -> DistanceResolver:
    return _resolver


def get_outbox() -> OutboxSink:
    return _outbox


def get_sink() -> NotificationSink:
    return _sink


# ── Catalogue endpoints ──────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(events: list[Event] = Depends(get_catalog)) -> dict:
    return summarize_events(events)


@app.get("/events", response_model=list[Event])
def list_events(events: list[Event] = Depends(get_catalog)) -> list[Event]:
    return events


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(
    body: RecommendationRequest,
    events: list[Event] = Depends(get_catalog),
    resolver: DistanceResolver = Depends(get_resolver),
    sink: NotificationSink = Depends(get_sink),
) -> RecommendationResponse:
    chosen = select(body.strategy, body.customer, events, resolver, body.limit)

    delivered = 0
    if body.deliver:
        delivered = dispatch(body.customer, chosen, sink)
        logger.info(
            "Delivered %d %s events to %s", delivered, body.strategy.value, body.customer.name
        )

    return RecommendationResponse(
        strategy=body.strategy,
        customer=body.customer,
        events=chosen,
        total_candidates=count_candidates(body.strategy, body.customer, events),
        limit=body.limit,
        delivered=delivered,
    )


@app.get("/outbox")
def outbox(sink: OutboxSink = Depends(get_outbox)) -> dict:
    deliveries = sink.get_deliveries()
    return {"total": len(deliveries), "deliveries": deliveries}


@app.delete("/outbox")
def clear_outbox(sink: OutboxSink = Depends(get_outbox)) -> dict:
    sink.clear()
    return {"status": "cleared"}


@app.get("/distance/cache/stats")
def distance_cache_stats(resolver: DistanceResolver = Depends(get_resolver)) -> dict:
    return resolver.cache.stats()
