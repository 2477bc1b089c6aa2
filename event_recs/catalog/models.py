from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1, description="City the customer lives in")


class Event(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    city: str
    price: int


class EventCategory(BaseModel):
    """A node of the taxonomy: its own events plus nested sub-categories."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    children: list[EventCategory] = Field(default_factory=list)
    events: list[Event] = Field(default_factory=list)
