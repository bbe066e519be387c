"""Deterministic dimension scoring: answered items -> current/potential/gap/level.

Scores are weighted means of 1-10 responses, rounded to one decimal.
No randomness and no clock.
"""

from __future__ import annotations

from typing import Sequence

from ascend.domains.life_audit.domain_logic.assessment_models import (
    AssessmentItem,
    ScoringParameters,
)
from ascend.domains.life_audit.domain_logic.bands import FLOOR, round_half_up, select_band


DEFAULT_PARAMETERS = ScoringParameters()

LEVEL_BANDS: tuple[tuple[float, str], ...] = (
    (9.0, "master"),
    (7.0, "expert"),
    (5.0, "advanced"),
    (3.0, "developing"),
    (FLOOR, "novice"),
)

# Lower bounds of the next level, ending at the scale ceiling.
NEXT_LEVEL_THRESHOLDS: tuple[float, ...] = (3.0, 5.0, 7.0, 9.0, 10.0)


def _weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
    total_weight = sum(weights)
    return sum(v * w for v, w in zip(values, weights)) / total_weight


def compute_current_score(
    items: Sequence[AssessmentItem],
    parameters: ScoringParameters = DEFAULT_PARAMETERS,
) -> float:
    """Weighted mean of responses, one decimal; neutral midpoint when empty."""
    if not items:
        return parameters.empty_current_score
    score = _weighted_mean([i.response for i in items], [i.weight for i in items])
    return round_half_up(score, 1)


def compute_potential_score(
    items: Sequence[AssessmentItem],
    parameters: ScoringParameters = DEFAULT_PARAMETERS,
) -> float:
    """Weighted mean of ``min(ceiling, response + bonus)``; full headroom when empty."""
    if not items:
        return parameters.empty_potential_score
    potentials = [
        min(parameters.score_ceiling, i.response + parameters.potential_bonus)
        for i in items
    ]
    score = _weighted_mean(potentials, [i.weight for i in items])
    return round_half_up(score, 1)


def compute_dimension_metrics(
    items: Sequence[AssessmentItem],
    parameters: ScoringParameters = DEFAULT_PARAMETERS,
) -> tuple[float, float, float]:
    """Return ``(current_score, potential_score, gap)`` for one dimension's items."""
    current = compute_current_score(items, parameters)
    potential = compute_potential_score(items, parameters)
    gap = round_half_up(max(0.0, potential - current), 1)
    return current, potential, gap


def classify_level(score: float) -> str:
    """Map a score to novice/developing/advanced/expert/master.

    A score exactly on a threshold takes the higher level (7.0 -> expert).
    """
    return select_band(score, LEVEL_BANDS)


def next_level_threshold(score: float) -> float:
    """Return the lowest threshold strictly above ``score`` (10.0 at the top)."""
    for threshold in NEXT_LEVEL_THRESHOLDS:
        if score < threshold:
            return threshold
    return NEXT_LEVEL_THRESHOLDS[-1]


def distance_to_next_level(score: float) -> float:
    """Points needed to reach the next threshold, at one-decimal precision."""
    return round_half_up(max(0.0, next_level_threshold(score) - score), 1)
