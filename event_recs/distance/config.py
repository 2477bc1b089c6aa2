from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class DistanceConfig:
    retry_budget: int = 2
    failure_rate: float = float(os.getenv("EVENT_RECS_DISTANCE_FAILURE_RATE", "0.0"))
    seed: int | None = _optional_int("EVENT_RECS_DISTANCE_SEED")


DEFAULT_DISTANCE_CONFIG = DistanceConfig()
