from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ..catalog.models import Customer, Event

DEFAULT_LIMIT = 5


class Strategy(str, Enum):
    same_city = "same_city"
    nearest = "nearest"
    cheapest = "cheapest"


class RecommendationRequest(BaseModel):
    customer: Customer
    strategy: Strategy = Strategy.nearest
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        le=50,
        description="Maximum events for the nearest and cheapest strategies",
    )
    deliver: bool = Field(default=False, description="Send the selection to the outbox")


class RecommendationResponse(BaseModel):
    strategy: Strategy
    customer: Customer
    events: list[Event]
    total_candidates: int
    limit: int
    delivered: int = 0
