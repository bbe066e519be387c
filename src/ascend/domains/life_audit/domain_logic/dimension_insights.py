"""Per-dimension narrative: insights, improvement areas and quick wins.

Text is chosen from band tables keyed on the dimension's current score and
gap; item-level entries come from the submitted responses themselves.
"""

from __future__ import annotations

from typing import Sequence

from ascend.domains.life_audit.domain_logic.assessment_models import (
    AssessmentItem,
    display_name,
)
from ascend.domains.life_audit.domain_logic.bands import FLOOR, select_band

MAX_IMPROVEMENT_AREAS = 5
MAX_QUICK_WINS = 3

# Item responses at or below this are improvement areas.
LOW_RESPONSE_MAX = 5
# Item responses in [6, 8) are one push away from the next milestone.
NEAR_THRESHOLD_RESPONSES = range(6, 8)

# Dimension-level thresholds for the generic entries and specific insight.
SPECIFIC_INSIGHT_BELOW = 6.0
GENERIC_AREAS_BELOW = 6.0
GENERIC_QUICK_WINS_BELOW = 7.0

SCORE_INSIGHT_BANDS: tuple[tuple[float, str], ...] = (
    (8.0, "Your {name} is exceptional - you're setting an example for others."),
    (6.0, "Your {name} shows solid foundation with room for growth."),
    (4.0, "Your {name} has potential but needs focused attention."),
    (FLOOR, "Your {name} represents a significant growth opportunity."),
)

GAP_INSIGHT_BANDS: tuple[tuple[float, str], ...] = (
    (3.0, "There's substantial untapped potential in {name}."),
    (2.0, "Moderate improvements could significantly enhance your {name}."),
    (FLOOR, "Your {name} is well-aligned with your potential."),
)

# One sentence per dimension, emphasising its multiplier role for the others.
DIMENSION_SPECIFIC_INSIGHTS: dict[str, str] = {
    "physical_vitality": (
        "Physical energy often limits effectiveness in other dimensions - "
        "this could be your foundation builder."
    ),
    "mental_mastery": "Mental clarity and focus are multipliers for all other areas of life.",
    "spiritual_connection": (
        "Strengthening your spiritual foundation can provide stability for growth in other areas."
    ),
    "relational_harmony": (
        "Strong relationships provide support and accountability for personal growth."
    ),
    "financial_wisdom": (
        "Financial peace removes stress and creates space for growth in other areas."
    ),
    "creative_expression": "Creative expression can unlock new ways to serve God and others.",
    "legacy_building": "Focusing on legacy can provide deeper motivation for daily growth.",
}


def _category_label(category: str) -> str:
    return category.replace("_", " ").strip()


def format_improvement_area(item: AssessmentItem) -> str:
    """``"Sleep: how consistent is your sleep schedule and quality?"``"""
    label = _category_label(item.category)
    label = label[:1].upper() + label[1:]
    if not item.question:
        return label
    return f"{label}: {item.question.lower()}"


def format_item_quick_win(item: AssessmentItem) -> str:
    label = _category_label(item.category)
    if not item.question:
        return f"Improve {label}"
    return f"Improve {label} by focusing on {item.question.lower()}"


def generate_dimension_insights(dimension: str, current_score: float, gap: float) -> list[str]:
    """Score-band sentence, gap-band sentence, then the dimension-specific one (if low)."""
    name = display_name(dimension)
    insights = [
        select_band(current_score, SCORE_INSIGHT_BANDS).format(name=name),
        select_band(gap, GAP_INSIGHT_BANDS).format(name=name),
    ]
    if current_score < SPECIFIC_INSIGHT_BELOW and dimension in DIMENSION_SPECIFIC_INSIGHTS:
        insights.append(DIMENSION_SPECIFIC_INSIGHTS[dimension])
    return insights


def identify_improvement_areas(
    dimension: str,
    items: Sequence[AssessmentItem],
    current_score: float,
) -> list[str]:
    """Low-scoring items first, then generic habits/guidance entries; at most 5."""
    areas = [format_improvement_area(i) for i in items if i.response <= LOW_RESPONSE_MAX]
    if current_score < GENERIC_AREAS_BELOW:
        name = display_name(dimension)
        areas.append(f"Build consistent daily habits in {name}")
        areas.append(f"Seek guidance and resources for {name}")
    return areas[:MAX_IMPROVEMENT_AREAS]


def identify_item_quick_wins(
    dimension: str,
    items: Sequence[AssessmentItem],
    current_score: float,
) -> list[str]:
    """Near-threshold items first, then goal-setting/accountability entries; at most 3."""
    wins = [format_item_quick_win(i) for i in items if i.response in NEAR_THRESHOLD_RESPONSES]
    if current_score < GENERIC_QUICK_WINS_BELOW:
        name = display_name(dimension)
        wins.append(f"Set specific, measurable goals for {name}")
        wins.append(f"Find an accountability partner for {name}")
    return wins[:MAX_QUICK_WINS]
