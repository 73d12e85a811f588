from __future__ import annotations

import logging
import random
import time
from typing import Any

from ..analytics.store import record_event
from ..catalog.models import Candidate, Hz
from ..catalog.providers import CatalogProvider
from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import personalize_explanation
from .explanations import build_reasons, template_explanation
from .fallback import fallback
from .metadata import find_candidate, resolve
from .models import (
    DisplayMetadata,
    IntakeSignal,
    RecommendationResult,
    RecommendationStrategy,
)
from .scoring import score_entries
from .selection import select, top_matches

logger = logging.getLogger(__name__)


class FrequencyRecommender:
    """
    Entry point used by the intake and booking flow.

    The catalog is read fresh on every call and nothing is kept between
    calls, so one instance can serve concurrent requests. ``rng`` decides
    ties; pass a seeded ``random.Random`` for reproducible results.
    """

    def __init__(
        self,
        provider: CatalogProvider,
        rng: random.Random | None = None,
        llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
    ) -> None:
        self._provider = provider
        self._rng = rng or random.Random()
        self._llm_config = llm_config

    async def candidates(self) -> list[Candidate]:
        try:
            return await self._provider.fetch_candidates()
        except Exception:
            logger.warning("Catalog provider raised, treating catalog as empty", exc_info=True)
            return []

    async def recommend(
        self,
        signal: IntakeSignal | dict[str, Any] | None = None,
        candidates: list[Candidate] | None = None,
    ) -> RecommendationResult:
        """
        Score *signal* against the catalog and pick one frequency.

        Pass *candidates* when the caller already holds this request's catalog
        read; otherwise the provider is queried once.
        """
        start_time = time.time()
        if not isinstance(signal, IntakeSignal):
            signal = IntakeSignal.model_validate(signal or {})

        if candidates is None:
            candidates = await self.candidates()
        entries = score_entries(candidates, signal)
        chosen = select(entries, self._rng)

        if chosen is not None:
            result = RecommendationResult(
                frequency=chosen.candidate.frequency,
                source_candidate=chosen.candidate,
                strategy=RecommendationStrategy.scored,
                score=chosen.score,
                tie_count=len(top_matches(entries)),
                matched_rules=chosen.hits,
            )
        else:
            result = fallback(candidates)

        logger.info(
            "Recommended %s Hz via %s (score=%s, ties=%s, catalog=%s)",
            result.frequency, result.strategy.value, result.score, result.tie_count, len(candidates),
        )

        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        record_event("recommendation", {
            "frequency": result.frequency,
            "strategy": result.strategy.value,
            "score": result.score,
            "tie_count": result.tie_count,
            "catalog_size": len(candidates),
            "intentions": signal.intentions,
            "response_time_ms": elapsed_ms,
        })
        return result

    async def describe(self, frequency: Hz) -> DisplayMetadata:
        return resolve(frequency, await self.candidates())

    async def find_asset_for_frequency(self, frequency: Hz) -> Candidate | None:
        return find_candidate(frequency, await self.candidates())

    def metadata_for(self, result: RecommendationResult, candidates: list[Candidate]) -> DisplayMetadata:
        """Display data for the catalog entry *result* was built from."""
        if result.source_candidate is not None:
            return resolve(result.frequency, [result.source_candidate])
        return resolve(result.frequency, candidates)

    def explain(self, result: RecommendationResult) -> str:
        """Client-facing sentence on why *result* was chosen."""
        if result.strategy is not RecommendationStrategy.scored:
            return template_explanation([])

        reasons = build_reasons(result)
        name = result.source_candidate.name if result.source_candidate else ""
        personalized = personalize_explanation(
            result.frequency, name, reasons, config=self._llm_config,
        )
        return personalized or template_explanation(reasons)
