from __future__ import annotations

import logging

from ..catalog.models import Candidate
from .models import RecommendationResult, RecommendationStrategy

logger = logging.getLogger(__name__)

# Earth resonance; also the last-resort answer when the catalog is empty.
DEFAULT_FREQUENCY = 432


def fallback(candidates: list[Candidate]) -> RecommendationResult:
    """Deterministic default used when no candidate scored above zero."""
    default = next((c for c in candidates if c.contains(DEFAULT_FREQUENCY)), None)
    if default is not None:
        logger.info("No scored match, using %s Hz default (%s)", DEFAULT_FREQUENCY, default.name)
        return RecommendationResult(
            frequency=DEFAULT_FREQUENCY,
            source_candidate=default,
            strategy=RecommendationStrategy.default_frequency,
        )

    if candidates:
        first = candidates[0]
        logger.info("No %s Hz entry, using first catalog entry %s", DEFAULT_FREQUENCY, first.name)
        return RecommendationResult(
            frequency=first.frequency,
            source_candidate=first,
            strategy=RecommendationStrategy.first_available,
        )

    logger.warning("Catalog empty, returning %s Hz with no audio asset", DEFAULT_FREQUENCY)
    return RecommendationResult(
        frequency=DEFAULT_FREQUENCY,
        source_candidate=None,
        strategy=RecommendationStrategy.last_resort,
    )
