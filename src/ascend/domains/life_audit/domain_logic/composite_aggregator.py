"""Composite aggregation across dimensions.

Works over whatever dimensions are present in the mapping; ties are broken
by mapping (catalog) order, first encountered wins.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from ascend.domains.life_audit.domain_logic.assessment_models import DimensionScore
from ascend.domains.life_audit.domain_logic.bands import round_half_up

logger = logging.getLogger(__name__)


def compute_ascension_score(dimension_scores: Mapping[str, DimensionScore]) -> int:
    """Mean current score x 10, rounded half-up and clamped to [0, 100]."""
    if not dimension_scores:
        logger.warning("No dimension scores to aggregate; ascension score defaults to 0")
        return 0
    scores = [d.current_score for d in dimension_scores.values()]
    mean = sum(scores) / len(scores)
    ascension = int(round_half_up(mean * 10))
    logger.debug("Ascension score: mean=%.3f scores=%s -> %d", mean, scores, ascension)
    return max(0, min(100, ascension))


def _first_max(
    dimension_scores: Mapping[str, DimensionScore],
    key: Callable[[DimensionScore], float],
) -> str | None:
    best: str | None = None
    best_value = 0.0
    for dimension, score in dimension_scores.items():
        value = key(score)
        if best is None or value > best_value:
            best, best_value = dimension, value
    return best


def identify_strongest_dimension(dimension_scores: Mapping[str, DimensionScore]) -> str | None:
    """Dimension with the highest current score."""
    return _first_max(dimension_scores, lambda d: d.current_score)


def identify_biggest_opportunity(dimension_scores: Mapping[str, DimensionScore]) -> str | None:
    """Dimension with the largest gap between potential and current score."""
    return _first_max(dimension_scores, lambda d: d.gap)


def score_spread(dimension_scores: Mapping[str, DimensionScore]) -> float:
    """max - min of current scores, one decimal (0.0 when empty)."""
    if not dimension_scores:
        return 0.0
    scores = [d.current_score for d in dimension_scores.values()]
    return round_half_up(max(scores) - min(scores), 1)
