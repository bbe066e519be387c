"""Life audit data models and domain constants."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Literal


# ---------------------------------------------------------------------------
# Domain constants
# ---------------------------------------------------------------------------

DimensionType = Literal[
    "physical_vitality",
    "mental_mastery",
    "spiritual_connection",
    "relational_harmony",
    "financial_wisdom",
    "creative_expression",
    "legacy_building",
]

DimensionLevel = Literal["novice", "developing", "advanced", "expert", "master"]

# Catalog order; every ranking breaks ties in this order.
DIMENSIONS: tuple[str, ...] = (
    "physical_vitality",
    "mental_mastery",
    "spiritual_connection",
    "relational_harmony",
    "financial_wisdom",
    "creative_expression",
    "legacy_building",
)

SPIRITUAL_DIMENSION = "spiritual_connection"

DIMENSION_DISPLAY_NAMES: dict[str, str] = {
    "physical_vitality": "Physical Vitality",
    "mental_mastery": "Mental Mastery",
    "spiritual_connection": "Spiritual Connection",
    "relational_harmony": "Relational Harmony",
    "financial_wisdom": "Financial Wisdom",
    "creative_expression": "Creative Expression",
    "legacy_building": "Legacy Building",
}


def display_name(dimension: str) -> str:
    """Human-readable name for a dimension id."""
    return DIMENSION_DISPLAY_NAMES.get(dimension) or dimension.replace("_", " ").title()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class InvalidInputError(ValueError):
    """Raised when an assessment submission is absent or malformed."""


# ---------------------------------------------------------------------------
# Tuning parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoringParameters:
    """Product-tuning constants for scoring and quick-win detection."""

    potential_bonus: float = 2.5        # headroom added to each response for the potential score
    quick_win_margin: float = 1.0       # max distance to the next level threshold
    score_ceiling: float = 10.0
    empty_current_score: float = 5.0    # neutral midpoint for a dimension with no items
    empty_potential_score: float = 10.0


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AssessmentItem:
    """One answered questionnaire item."""

    dimension: str
    response: int                       # 1-10 inclusive
    category: str = ""
    weight: float = 1.0
    id: str = ""
    question: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.response, bool) or not isinstance(self.response, int):
            raise InvalidInputError(
                f"Response for item {self.id or self.category!r} must be an integer, "
                f"got {self.response!r}"
            )
        if not 1 <= self.response <= 10:
            raise InvalidInputError(
                f"Response for item {self.id or self.category!r} must be between 1 and 10, "
                f"got {self.response}"
            )
        weight = self.weight
        if (
            isinstance(weight, bool)
            or not isinstance(weight, (int, float))
            or not math.isfinite(weight)
            or weight <= 0
        ):
            raise InvalidInputError(
                f"Weight for item {self.id or self.category!r} must be a positive finite "
                f"number, got {weight!r}"
            )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DimensionScore:
    """One dimension's computed result."""

    dimension: str
    current_score: float                # 1.0-10.0, one decimal
    potential_score: float              # 1.0-10.0, one decimal
    gap: float                          # potential - current, >= 0
    level: str
    insights: tuple[str, ...] = ()
    improvement_areas: tuple[str, ...] = ()   # <= 5
    quick_wins: tuple[str, ...] = ()          # <= 3


@dataclass(frozen=True)
class TransformationForecast:
    """Narrative forecast derived from the ascension score band."""

    current_state: str
    potential_state: str
    time_to_transform: str
    key_actions: tuple[str, ...] = ()
    expected_outcomes: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompositeAnalysis:
    """The full result of one assessment."""

    ascension_score: int
    dimension_scores: dict[str, DimensionScore]
    strongest_dimension: str | None
    biggest_opportunity: str | None
    quick_win_dimensions: tuple[str, ...]
    long_term_focus_dimensions: tuple[str, ...]
    overall_insights: tuple[str, ...]
    personalized_recommendations: tuple[str, ...]
    transformation_forecast: TransformationForecast


@dataclass(frozen=True)
class AssessmentRecord:
    """An analysed assessment shaped for an external store."""

    user_id: str
    completed_at: str                   # ISO 8601, UTC
    dimensions: dict[str, DimensionScore]
    ascension_score: int
    total_questions: int
    time_spent_minutes: int
    completion_rate: int                # 0-100
    responses_hash: str = ""


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DailyProtocol:
    """Three time blocks, each mapping a category label to an activity."""

    morning: dict[str, str] = field(default_factory=dict)
    midday: dict[str, str] = field(default_factory=dict)
    evening: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class WeeklyTheme:
    day: str
    focus: str
    activity: str


@dataclass(frozen=True)
class FocusPriority:
    """A ranked focus dimension with its concrete actions and metrics."""

    dimension: str
    priority: int                       # 1-3
    specific_actions: tuple[str, ...] = ()
    success_metrics: tuple[str, ...] = ()


@dataclass(frozen=True)
class MonthlyGoals:
    primary: str
    secondary: str
    milestones: tuple[str, ...] = ()


@dataclass(frozen=True)
class AccountabilityCheckpoints:
    daily: str
    weekly: str
    monthly: str
    quarterly: str


@dataclass(frozen=True)
class Protocol:
    """A day/week/month transformation protocol derived from one analysis."""

    ascension_score: int
    focus_areas: tuple[str, ...]
    quick_wins: tuple[str, ...]
    recommendations: tuple[str, ...]
    transformation_forecast: TransformationForecast
    daily_protocol: DailyProtocol
    weekly_schedule: tuple[WeeklyTheme, ...]
    focus_priorities: tuple[FocusPriority, ...]
    monthly_goals: MonthlyGoals
    accountability_checkpoints: AccountabilityCheckpoints
