from __future__ import annotations

from typing import Iterable

from ..catalog.models import Candidate, CandidateKey, Hz
from .models import ENERGY_AXES, IntakeSignal, ScoreEntry

# Relative order of these weights decides recommendations; keep it intact.
INTENTION_WEIGHT = 15
MANUAL_SELECTION_WEIGHT = 10
EMOTIONAL_INDICATOR_WEIGHT = 6
HARMONIC_SUPPORT_WEIGHT = 5
HEALTH_CONCERN_WEIGHT = 4
LOW_ENERGY_WEIGHT = 3

LOW_ENERGY_THRESHOLD = 3

ENERGY_AXIS_KEYWORDS: dict[str, tuple[str, ...]] = {
    "physical": ("pain", "stress", "energy"),
    "emotional": ("emotional", "harmony"),
    "mental": ("clarity", "focus"),
    "spiritual": ("spiritual", "meditation"),
}


def properties_match(term: str, properties: Iterable[str]) -> bool:
    """Case-insensitive substring match in either direction."""
    needle = term.strip().lower()
    if not needle:
        return False
    for prop in properties:
        hay = prop.strip().lower()
        if hay and (needle in hay or hay in needle):
            return True
    return False


def _has_keyword(properties: list[str], keywords: Iterable[str]) -> bool:
    return any(properties_match(keyword, properties) for keyword in keywords)


class _RangeIndex:
    """First candidate (catalog order) whose range contains a given Hz, memoized per call."""

    def __init__(self, candidates: list[Candidate]) -> None:
        self._candidates = candidates
        self._memo: dict[Hz, Candidate | None] = {}

    def at(self, hz: Hz) -> Candidate | None:
        if hz not in self._memo:
            self._memo[hz] = next((c for c in self._candidates if c.contains(hz)), None)
        return self._memo[hz]


def score_entries(candidates: list[Candidate], signal: IntakeSignal) -> dict[CandidateKey, ScoreEntry]:
    """
    Score every candidate against the intake signal.

    Rules are additive and independent; each firing rule is recorded on the
    entry so callers can explain the result. Candidates lacking the metadata a
    rule needs simply earn nothing from it. Pure: no I/O, inputs untouched.
    """
    entries: dict[CandidateKey, ScoreEntry] = {}
    for candidate in candidates:
        entries.setdefault(candidate.key, ScoreEntry(candidate=candidate))
    scored = [entry.candidate for entry in entries.values()]
    index = _RangeIndex(scored)

    for intention in signal.intentions:
        for candidate in scored:
            entry = entries[candidate.key]
            if intention in candidate.primary_intentions:
                entry.add("intention", INTENTION_WEIGHT, intention)

            for related_hz in candidate.harmonic_connections:
                related = index.at(related_hz)
                if related is not None and intention in related.primary_intentions:
                    entry.add("harmonic", HARMONIC_SUPPORT_WEIGHT, f"{intention}@{related_hz}")

    for selected_hz in signal.selected_frequencies:
        for candidate in scored:
            if candidate.contains(selected_hz):
                entries[candidate.key].add("manual_selection", MANUAL_SELECTION_WEIGHT, str(selected_hz))

    for indicator in signal.emotional_indicators:
        for candidate in scored:
            if properties_match(indicator, candidate.healing_properties):
                entries[candidate.key].add("emotional_indicator", EMOTIONAL_INDICATOR_WEIGHT, indicator)

    for axis in ENERGY_AXES:
        level = signal.energy_levels[axis]
        if level is None or level > LOW_ENERGY_THRESHOLD:
            continue
        for candidate in scored:
            if _has_keyword(candidate.healing_properties, ENERGY_AXIS_KEYWORDS[axis]):
                entries[candidate.key].add("low_energy", LOW_ENERGY_WEIGHT, axis)

    for concern in signal.health_concerns:
        for candidate in scored:
            if properties_match(concern, candidate.healing_properties):
                entries[candidate.key].add("health_concern", HEALTH_CONCERN_WEIGHT, concern)

    return entries


def score(candidates: list[Candidate], signal: IntakeSignal) -> dict[CandidateKey, int]:
    """Integer relevance score per candidate key."""
    return {key: entry.score for key, entry in score_entries(candidates, signal).items()}
