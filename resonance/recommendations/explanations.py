from __future__ import annotations

from .models import RecommendationResult, RuleHit

GENERIC_EXPLANATION = (
    "This frequency was selected based on your overall energy profile and therapeutic needs."
)


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def _join(values: list[str]) -> str:
    if len(values) <= 1:
        return "".join(values)
    return f"{', '.join(values[:-1])} and {values[-1]}"


def _details(hits: list[RuleHit], rule: str) -> list[str]:
    return _unique([hit.detail for hit in hits if hit.rule == rule])


def build_reasons(result: RecommendationResult) -> list[str]:
    """Plain-language reasons, strongest rule first, for a scored result."""
    hits = result.matched_rules
    reasons: list[str] = []

    intentions = _details(hits, "intention")
    if intentions:
        reasons.append(f"it aligns with your intention for {_join(intentions)}")

    if _details(hits, "manual_selection"):
        reasons.append("you intuitively selected this frequency")

    indicators = _details(hits, "emotional_indicator")
    if indicators:
        reasons.append(f"it addresses the {_join(indicators)} you're experiencing")

    harmonics = _unique([d.split("@", 1)[0] for d in _details(hits, "harmonic")])
    if harmonics:
        reasons.append(f"its related frequencies also support {_join(harmonics)}")

    concerns = _details(hits, "health_concern")
    if concerns:
        reasons.append(f"it is associated with {_join(concerns)}")

    axes = _details(hits, "low_energy")
    if axes:
        reasons.append(f"it supports your low {_join(axes)} energy")

    return reasons


def template_explanation(reasons: list[str]) -> str:
    if not reasons:
        return GENERIC_EXPLANATION
    return f"This frequency was recommended because {', and '.join(reasons)}."
