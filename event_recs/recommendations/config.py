from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class RecommendationConfig:
    """Settings for the command-line demo run."""

    limit: int = 5
    customer_name: str = os.getenv("EVENT_RECS_CUSTOMER_NAME", "Mr. Fake")
    customer_city: str = os.getenv("EVENT_RECS_CUSTOMER_CITY", "New York")
    log_level: str = os.getenv("EVENT_RECS_LOG_LEVEL", "INFO")


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()
