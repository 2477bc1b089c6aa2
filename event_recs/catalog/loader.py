from __future__ import annotations

import logging

from pydantic import ValidationError

from ..errors import TaxonomyError
from .config import DEFAULT_TAXONOMY_CONFIG, TaxonomyConfig
from .models import EventCategory

logger = logging.getLogger(__name__)


def parse_taxonomy(text: str) -> EventCategory:
    """
    Parse a JSON taxonomy document into the category tree.

    Unknown keys (venue, date, url, ...) are dropped. Anything that is not
    valid JSON or misses a required field raises ``TaxonomyError``.
    """
    try:
        return EventCategory.model_validate_json(text.strip())
    except ValidationError as exc:
        raise TaxonomyError(f"Malformed taxonomy: {exc}") from exc


def load_taxonomy(config: TaxonomyConfig = DEFAULT_TAXONOMY_CONFIG) -> EventCategory:
    """Read and parse the taxonomy file named by ``config.path``."""
    try:
        text = config.path.read_text(encoding=config.encoding)
    except OSError as exc:
        raise TaxonomyError(f"Cannot read taxonomy from {config.path}: {exc}") from exc

    root = parse_taxonomy(text)
    logger.info("Loaded taxonomy %r from %s", root.name, config.path)
    return root
