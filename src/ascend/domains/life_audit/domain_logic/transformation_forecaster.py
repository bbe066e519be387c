"""Transformation forecast from the ascension score band."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from ascend.domains.life_audit.domain_logic.assessment_models import (
    DimensionScore,
    TransformationForecast,
    display_name,
)
from ascend.domains.life_audit.domain_logic.bands import FLOOR, select_band


@dataclass(frozen=True)
class ForecastBand:
    current_state: str
    potential_state: str
    time_to_transform: str
    expected_outcomes: tuple[str, ...]


_FOUNDATIONAL_OUTCOMES = (
    "Increased energy and motivation for daily activities",
    "Better decision-making and problem-solving abilities",
    "Improved relationships and communication skills",
    "Greater sense of purpose and direction",
)

FORECAST_BANDS: tuple[tuple[float, ForecastBand], ...] = (
    (80, ForecastBand(
        current_state="Operating at exceptional levels with mastery in multiple dimensions",
        potential_state="Master level across all dimensions, mentoring and leading others",
        time_to_transform="6-12 months to reach master level",
        expected_outcomes=(
            "Legendary status in multiple dimensions",
            "Ability to mentor and transform others",
            "Creation of lasting legacy and impact",
            "Complete alignment with God's purpose",
        ),
    )),
    (60, ForecastBand(
        current_state="Solid foundation with clear opportunities for breakthrough growth",
        potential_state="Expert level in most dimensions with advanced capabilities",
        time_to_transform="3-6 months to reach expert level",
        expected_outcomes=(
            "Mastery in key areas of life",
            "Enhanced leadership and influence capabilities",
            "Greater impact on others and community",
            "Deeper spiritual connection and understanding",
        ),
    )),
    (40, ForecastBand(
        current_state="Growth zone with potential for significant transformation",
        potential_state="Advanced level with strong foundation in all areas",
        time_to_transform="6-12 months to reach advanced level",
        expected_outcomes=_FOUNDATIONAL_OUTCOMES,
    )),
    (FLOOR, ForecastBand(
        current_state="Beginning of transformation journey with massive growth potential",
        potential_state="Developing level with consistent growth and improvement",
        time_to_transform="12-18 months to reach developing level",
        expected_outcomes=_FOUNDATIONAL_OUTCOMES,
    )),
)

# Secondary threshold on a focus dimension's own current score.
ACTION_BANDS: tuple[tuple[float, str], ...] = (
    (8.0, "Refine and optimize existing capabilities"),
    (6.0, "Master advanced techniques and principles"),
    (4.0, "Develop intermediate skills and knowledge"),
    (FLOOR, "Build foundational habits and consistency"),
)


def identify_key_actions(
    dimension_scores: Mapping[str, DimensionScore],
    focus_dimensions: Sequence[str],
) -> list[str]:
    """``"Focus on <Dimension>: <action>"`` for each long-term-focus dimension."""
    actions = []
    for dimension in focus_dimensions:
        score = dimension_scores.get(dimension)
        if score is None:
            continue
        action = select_band(score.current_score, ACTION_BANDS)
        actions.append(f"Focus on {display_name(dimension)}: {action}")
    return actions


def forecast_transformation(
    dimension_scores: Mapping[str, DimensionScore],
    ascension_score: int,
    focus_dimensions: Sequence[str],
) -> TransformationForecast:
    band = select_band(ascension_score, FORECAST_BANDS)
    return TransformationForecast(
        current_state=band.current_state,
        potential_state=band.potential_state,
        time_to_transform=band.time_to_transform,
        key_actions=tuple(identify_key_actions(dimension_scores, focus_dimensions)),
        expected_outcomes=band.expected_outcomes,
    )
