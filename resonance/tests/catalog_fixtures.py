from __future__ import annotations

import random

from resonance.catalog.providers import InMemoryCatalogProvider
from resonance.llm.config import LLMConfig
from resonance.recommendations.engine import FrequencyRecommender

DISABLED_LLM = LLMConfig(api_key="", enabled=False)


def row(hz_min, hz_max=None, **fields):
    """Catalog row shaped like the ``audio_files`` table."""
    return {
        "file_name": fields.pop("file_name", f"{hz_min}Hz.mp3"),
        "frequency_min": hz_min,
        "frequency_max": hz_min if hz_max is None else hz_max,
        **fields,
    }


def make_recommender(rows, seed: int = 7) -> FrequencyRecommender:
    return FrequencyRecommender(
        InMemoryCatalogProvider(rows),
        rng=random.Random(seed),
        llm_config=DISABLED_LLM,
    )
