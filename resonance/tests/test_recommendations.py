from __future__ import annotations

import asyncio
from collections import Counter

import pytest
from pydantic import ValidationError

from resonance.analytics.store import get_events
from resonance.recommendations.engine import FrequencyRecommender
from resonance.recommendations.models import IntakeSignal, RecommendationStrategy
from resonance.tests.catalog_fixtures import DISABLED_LLM, make_recommender, row


def _recommend(recommender, signal=None):
    return asyncio.run(recommender.recommend(signal))


# ── Concrete scenarios ───────────────────────────────────────────────────


def test_single_intention_match():
    recommender = make_recommender([row(174, primary_intentions=["pain"])])
    result = _recommend(recommender, IntakeSignal(intentions=["pain"]))
    assert result.frequency == 174
    assert result.score == 15
    assert result.strategy is RecommendationStrategy.scored
    assert result.source_candidate.frequency_range_min == 174


def test_empty_signal_falls_back_to_432_entry():
    recommender = make_recommender([row(174), row(432)])
    result = _recommend(recommender, IntakeSignal())
    assert result.frequency == 432
    assert result.source_candidate.frequency_range_min == 432
    assert result.strategy is RecommendationStrategy.default_frequency


def test_tied_candidates_split_traffic():
    recommender = make_recommender(
        [row(174, primary_intentions=["pain"]), row(285, primary_intentions=["pain"])],
        seed=99,
    )
    signal = IntakeSignal(intentions=["pain"])
    counts = Counter(_recommend(recommender, signal).frequency for _ in range(1000))

    assert set(counts) == {174, 285}
    assert 400 < counts[174] < 600


def test_empty_catalog_returns_bare_default():
    recommender = make_recommender([])
    result = _recommend(recommender, IntakeSignal(intentions=["pain"], selected_frequencies=[528]))
    assert result.frequency == 432
    assert result.source_candidate is None
    assert result.strategy is RecommendationStrategy.last_resort


def test_case_insensitive_emotional_indicator():
    recommender = make_recommender([row(528, healing_properties=["Love", "Vitality"])])
    result = _recommend(recommender, IntakeSignal(emotional_indicators=["love"]))
    assert result.frequency == 528
    assert result.score == 6


def test_describe_unknown_frequency_placeholder():
    recommender = make_recommender([row(174), row(432)])
    metadata = asyncio.run(recommender.describe(999))
    assert metadata.model_dump() == {
        "hz": 999,
        "name": "Unknown Frequency",
        "related_frequencies": [],
        "primary_intentions": [],
        "healing_properties": [],
        "family": "Unknown",
    }


# ── Totality and boundaries ──────────────────────────────────────────────


def test_recommend_accepts_no_signal_at_all():
    result = _recommend(make_recommender([]))
    assert result.frequency == 432


def test_recommend_accepts_raw_form_payload():
    recommender = make_recommender([
        row(174, primary_intentions=["pain"]),
        row(639, healing_properties=["grief healing"]),
    ])
    form = {
        "primaryGoals": ["pain"],
        "emotionalIndicators": ["grief", "grief", "loneliness"],
        "healthConcerns": ["none"],
        "physicalEnergy": "7",
    }
    result = _recommend(recommender, form)
    # 15 for pain beats 6 + 6 for the repeated grief indicator
    assert result.frequency == 174


def test_malformed_catalog_rows_do_not_break_scoring():
    recommender = make_recommender([
        row(174, primary_intentions=None, healing_properties=None, harmonic_connections="not,a,number"),
        row(285, primary_intentions="pain"),
    ])
    result = _recommend(recommender, IntakeSignal(intentions=["pain"]))
    assert result.frequency == 285


def test_first_available_when_no_match_and_no_432():
    recommender = make_recommender([row(285), row(174)])
    result = _recommend(recommender, IntakeSignal(intentions=["clarity"]))
    assert result.frequency == 285
    assert result.strategy is RecommendationStrategy.first_available


def test_session_end_cue_is_never_recommended():
    recommender = make_recommender([row(0, file_name="SessionEnd.mp3"), row(528)])
    result = _recommend(recommender, IntakeSignal())
    assert result.frequency == 528


def test_provider_failure_degrades_to_last_resort():
    class BrokenProvider:
        async def fetch_candidates(self):
            raise RuntimeError("store unreachable")

    recommender = FrequencyRecommender(BrokenProvider(), llm_config=DISABLED_LLM)
    result = _recommend(recommender, IntakeSignal(intentions=["pain"]))
    assert result.frequency == 432
    assert result.source_candidate is None


def test_invalid_signal_is_rejected():
    with pytest.raises(ValidationError):
        _recommend(make_recommender([]), {"selectedFrequencies": [174, 285, 396, 417]})


def test_recommendation_is_recorded_for_analytics():
    recommender = make_recommender([row(174, primary_intentions=["pain"])])
    _recommend(recommender, IntakeSignal(intentions=["pain"]))
    events = get_events()
    assert len(events) == 1
    assert events[0]["type"] == "recommendation"
    assert events[0]["frequency"] == 174
    assert events[0]["strategy"] == "scored"
    assert events[0]["intentions"] == ["pain"]


# ── Describe / asset lookup ──────────────────────────────────────────────


def test_describe_known_frequency():
    recommender = make_recommender([
        row(
            520, 540,
            file_name="Miracle Tone - 528Hz.mp3",
            frequency_family="Solfeggio",
            primary_intentions=["emotional"],
            healing_properties=["love"],
            harmonic_connections=[417, 639],
        ),
    ])
    metadata = asyncio.run(recommender.describe(528))
    assert metadata.hz == 528
    assert metadata.name == "Miracle Tone - 528Hz.mp3"
    assert metadata.family == "Solfeggio"
    assert metadata.related_frequencies == [417, 639]
    assert metadata.primary_intentions == ["emotional"]


def test_describe_rejects_non_numeric_frequency():
    with pytest.raises(TypeError):
        asyncio.run(make_recommender([]).describe("528"))


def test_find_asset_for_frequency():
    recommender = make_recommender([row(174, file_url="/Music/174.mp3"), row(400, 450)])
    asset = asyncio.run(recommender.find_asset_for_frequency(432))
    assert asset is not None
    assert asset.key == (400, 450)
    assert asyncio.run(recommender.find_asset_for_frequency(999)) is None


# ── Explanations ─────────────────────────────────────────────────────────


def test_explain_scored_result_lists_reasons():
    recommender = make_recommender([row(396, primary_intentions=["stress"], healing_properties=["fear release"])])
    result = _recommend(recommender, IntakeSignal(intentions=["stress"], emotional_indicators=["fear"]))
    text = recommender.explain(result)
    assert text.startswith("This frequency was recommended because")
    assert "stress" in text
    assert "fear" in text


def test_explain_fallback_result_is_generic():
    recommender = make_recommender([])
    result = _recommend(recommender)
    assert recommender.explain(result) == (
        "This frequency was selected based on your overall energy profile and therapeutic needs."
    )
