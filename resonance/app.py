from __future__ import annotations

import math
import random

from fastapi import Depends, FastAPI, HTTPException
from starlette.concurrency import run_in_threadpool

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .catalog.models import Candidate
from .catalog.providers import build_catalog_provider
from .intake.contraindications import ContraindicationOut, all_contraindications, screen
from .recommendations.engine import FrequencyRecommender
from .recommendations.models import (
    AssetResponse,
    DisplayMetadata,
    IntakeSignal,
    RecommendationResponse,
    ReferenceFrequency,
)
from .recommendations.reference import all_references, closest_reference, search_by_benefit

app = FastAPI(title="Frequency Recommendation API", version="1.0.0")


def get_recommender() -> FrequencyRecommender:
    return FrequencyRecommender(build_catalog_provider(), rng=random.Random())


def _positive_hz(hz: float) -> float:
    if not math.isfinite(hz) or hz <= 0:
        raise HTTPException(status_code=422, detail="Frequency must be a positive number of Hz")
    return int(hz) if float(hz).is_integer() else hz


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/catalog", response_model=list[Candidate])
async def catalog(recommender: FrequencyRecommender = Depends(get_recommender)) -> list[Candidate]:
    return await recommender.candidates()


@app.get("/contraindications", response_model=list[ContraindicationOut])
def contraindications() -> list[ContraindicationOut]:
    return all_contraindications()


@app.get("/reference-frequencies", response_model=list[ReferenceFrequency])
def reference_frequencies(benefit: str | None = None) -> list[ReferenceFrequency]:
    if benefit:
        return search_by_benefit(benefit)
    return all_references()


# ── Recommendation endpoints ─────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
async def recommendations(
    body: IntakeSignal,
    recommender: FrequencyRecommender = Depends(get_recommender),
) -> RecommendationResponse:
    candidates = await recommender.candidates()
    result = await recommender.recommend(body, candidates=candidates)
    metadata = recommender.metadata_for(result, candidates)
    explanation = await run_in_threadpool(recommender.explain, result)

    return RecommendationResponse(
        frequency=result.frequency,
        strategy=result.strategy,
        score=result.score,
        tie_count=result.tie_count,
        source_candidate=result.source_candidate,
        metadata=metadata,
        explanation=explanation,
        contraindications=screen(body.health_concerns),
    )


@app.get("/frequencies/{hz}", response_model=DisplayMetadata)
async def describe_frequency(
    hz: float,
    recommender: FrequencyRecommender = Depends(get_recommender),
) -> DisplayMetadata:
    return await recommender.describe(_positive_hz(hz))


@app.get("/frequencies/{hz}/asset", response_model=AssetResponse)
async def frequency_asset(
    hz: float,
    recommender: FrequencyRecommender = Depends(get_recommender),
) -> AssetResponse:
    target = _positive_hz(hz)
    asset = await recommender.find_asset_for_frequency(target)
    return AssetResponse(hz=target, available=asset is not None, asset=asset)


@app.get("/frequencies/{hz}/reference", response_model=ReferenceFrequency)
def frequency_reference(hz: float) -> ReferenceFrequency:
    return closest_reference(_positive_hz(hz))


# ── Operator endpoints ───────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())
