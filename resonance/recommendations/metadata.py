from __future__ import annotations

import numbers

from ..catalog.models import Candidate, Hz
from .models import DisplayMetadata

UNKNOWN_NAME = "Unknown Frequency"
UNKNOWN_FAMILY = "Unknown"


def _check_hz(frequency: Hz) -> None:
    if isinstance(frequency, bool) or not isinstance(frequency, numbers.Real):
        raise TypeError(f"frequency must be a number, got {type(frequency).__name__}")


def find_candidate(frequency: Hz, candidates: list[Candidate]) -> Candidate | None:
    """First candidate, in catalog order, whose range contains *frequency*."""
    _check_hz(frequency)
    return next((c for c in candidates if c.contains(frequency)), None)


def resolve(frequency: Hz, candidates: list[Candidate]) -> DisplayMetadata:
    """Display metadata for *frequency*; a filled-in placeholder when nothing covers it."""
    match = find_candidate(frequency, candidates)
    if match is None:
        return DisplayMetadata(hz=frequency, name=UNKNOWN_NAME, family=UNKNOWN_FAMILY)

    return DisplayMetadata(
        hz=frequency,
        name=match.name or UNKNOWN_NAME,
        related_frequencies=list(match.harmonic_connections),
        primary_intentions=list(match.primary_intentions),
        healing_properties=list(match.healing_properties),
        family=match.family or UNKNOWN_FAMILY,
    )
