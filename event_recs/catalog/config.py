from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_TAXONOMY = Path(__file__).resolve().parent / "data" / "events.json"


@dataclass(frozen=True)
class TaxonomyConfig:
    """
    Where the event taxonomy is read from.

    Defaults to the concert catalogue bundled with the package.
    """

    path: Path = _BUNDLED_TAXONOMY
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> TaxonomyConfig:
        """Honour ``EVENT_RECS_TAXONOMY_PATH`` as set at call time."""
        return cls(path=Path(os.getenv("EVENT_RECS_TAXONOMY_PATH", str(_BUNDLED_TAXONOMY))))


DEFAULT_TAXONOMY_CONFIG = TaxonomyConfig.from_env()
