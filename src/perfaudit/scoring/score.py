"""Score aggregation — priority-weighted deduction from a perfect 100."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from perfaudit.schemas.report import Priority, Recommendation

MAX_SCORE = 100

PRIORITY_PENALTY = {
    Priority.HIGH: 15,
    Priority.MEDIUM: 10,
    Priority.LOW: 5,
}


class ScoreBand(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    CAUTION = "caution"
    NEEDS_WORK = "needs_work"

    @property
    def label(self) -> str:
        return _BAND_TEXT[self][0]

    @property
    def description(self) -> str:
        return _BAND_TEXT[self][1]


_BAND_TEXT = {
    ScoreBand.EXCELLENT: ("Excellent", "Performance is very good"),
    ScoreBand.GOOD: ("Good", "There is room for minor improvements"),
    ScoreBand.CAUTION: ("Caution", "Performance improvements are needed"),
    ScoreBand.NEEDS_WORK: ("Needs work", "There are significant performance problems"),
}


def compute_score(recommendations: Iterable[Recommendation]) -> int:
    """Deduct a fixed penalty per recommendation; never goes below 0."""
    score = MAX_SCORE
    for rec in recommendations:
        score -= PRIORITY_PENALTY[rec.priority]
    return max(0, score)


def score_band(score: int) -> ScoreBand:
    if score >= 90:
        return ScoreBand.EXCELLENT
    if score >= 70:
        return ScoreBand.GOOD
    if score >= 50:
        return ScoreBand.CAUTION
    return ScoreBand.NEEDS_WORK
