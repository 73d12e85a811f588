from __future__ import annotations

import random
from typing import Mapping

from ..catalog.models import CandidateKey
from .models import ScoreEntry


def top_matches(scores: Mapping[CandidateKey, ScoreEntry]) -> list[ScoreEntry]:
    """All entries sharing the highest positive score, in iteration order."""
    max_score = 0
    matches: list[ScoreEntry] = []
    for entry in scores.values():
        if entry.score > max_score:
            max_score = entry.score
            matches = [entry]
        elif entry.score == max_score and entry.score > 0:
            matches.append(entry)
    return matches


def select(
    scores: Mapping[CandidateKey, ScoreEntry],
    rng: random.Random | None = None,
) -> ScoreEntry | None:
    """
    Pick the best-scoring entry, breaking ties uniformly at random.

    Returns ``None`` when nothing scored above zero.
    """
    matches = top_matches(scores)
    if not matches:
        return None
    return (rng or random).choice(matches)
