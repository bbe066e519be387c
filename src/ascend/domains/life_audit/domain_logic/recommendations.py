"""Recommendation synthesis: quick-win and long-term-focus dimensions,
overall insights and personalized recommendations.

Every function tolerates a partial mapping (fewer than seven dimensions).
"""

from __future__ import annotations

from typing import Mapping

from ascend.domains.life_audit.domain_logic.assessment_models import (
    SPIRITUAL_DIMENSION,
    DimensionScore,
    ScoringParameters,
    display_name,
)
from ascend.domains.life_audit.domain_logic.bands import (
    CEILING,
    FLOOR,
    select_band,
    select_band_at_most,
)
from ascend.domains.life_audit.domain_logic.composite_aggregator import score_spread
from ascend.domains.life_audit.domain_logic.dimension_scorer import (
    DEFAULT_PARAMETERS,
    distance_to_next_level,
)

MAX_QUICK_WIN_DIMENSIONS = 3
MAX_LONG_TERM_FOCUS = 3
SPIRITUAL_FOUNDATION_BELOW = 7.0

OVERALL_INSIGHT_BANDS: tuple[tuple[float, tuple[str, str]], ...] = (
    (80, (
        "You're operating at an exceptional level across all dimensions of life.",
        "Focus on mentoring others and building legacy - you have much to give.",
    )),
    (60, (
        "You have a solid foundation with clear opportunities for breakthrough growth.",
        "Targeted improvements in 2-3 dimensions could create exponential results.",
    )),
    (40, (
        "You're in the growth zone - this is where transformation happens.",
        "Focus on building consistency in your strongest areas first.",
    )),
    (FLOOR, (
        "You're at the beginning of an incredible transformation journey.",
        "Small, consistent improvements will create massive change over time.",
    )),
)

# (upper_bound, text): <=2 balanced, (2, 4] moderate, >4 imbalanced
BALANCE_INSIGHT_BANDS: tuple[tuple[float, str], ...] = (
    (2.0, "Your dimensions are well-balanced - focus on elevating everything together."),
    (4.0, "Your dimensions show moderate balance - targeted improvements can create harmony."),
    (CEILING, "Your dimensions are imbalanced - focus on your weakest areas to create stability."),
)

SPIRITUAL_FOUNDATION_RECOMMENDATION = (
    "Strengthen your spiritual foundation first - this provides purpose and "
    "motivation for all other growth."
)

GENERAL_RECOMMENDATIONS: tuple[str, ...] = (
    "Start with 2-3 dimensions to avoid overwhelm and build momentum.",
    "Create daily rituals that touch multiple dimensions simultaneously.",
    "Find an accountability partner who complements your strengths and weaknesses.",
)


def identify_quick_win_dimensions(
    dimension_scores: Mapping[str, DimensionScore],
    parameters: ScoringParameters = DEFAULT_PARAMETERS,
) -> list[str]:
    """Dimensions within ``quick_win_margin`` of their next level, closest first."""
    candidates = [
        (distance_to_next_level(score.current_score), dimension)
        for dimension, score in dimension_scores.items()
    ]
    near = [c for c in candidates if c[0] <= parameters.quick_win_margin]
    near.sort(key=lambda c: c[0])  # stable: catalog order on ties
    return [dimension for _, dimension in near[:MAX_QUICK_WIN_DIMENSIONS]]


def identify_long_term_focus(dimension_scores: Mapping[str, DimensionScore]) -> list[str]:
    """The three dimensions with the largest gap, descending, catalog order on ties."""
    ranked = sorted(dimension_scores.items(), key=lambda kv: -kv[1].gap)
    return [dimension for dimension, _ in ranked[:MAX_LONG_TERM_FOCUS]]


def generate_overall_insights(
    dimension_scores: Mapping[str, DimensionScore],
    ascension_score: int,
) -> list[str]:
    """Two sentences for the ascension band plus one on dimension balance."""
    insights = list(select_band(ascension_score, OVERALL_INSIGHT_BANDS))
    insights.append(select_band_at_most(score_spread(dimension_scores), BALANCE_INSIGHT_BANDS))
    return insights


def generate_personalized_recommendations(
    dimension_scores: Mapping[str, DimensionScore],
    strongest_dimension: str | None,
    biggest_opportunity: str | None,
) -> list[str]:
    """Fixed-structure recommendations, spiritual foundation first when it is low."""
    recommendations: list[str] = []

    spiritual = dimension_scores.get(SPIRITUAL_DIMENSION)
    if spiritual is not None and spiritual.current_score < SPIRITUAL_FOUNDATION_BELOW:
        recommendations.append(SPIRITUAL_FOUNDATION_RECOMMENDATION)

    if strongest_dimension is not None:
        recommendations.append(
            f"Leverage your strength in {display_name(strongest_dimension)} "
            "to support growth in other areas."
        )
    if biggest_opportunity is not None:
        recommendations.append(
            f"Focus your primary energy on {display_name(biggest_opportunity)} - "
            "this represents your highest growth potential."
        )
    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return recommendations
