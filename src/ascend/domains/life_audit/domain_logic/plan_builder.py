"""Plan assembly: CompositeAnalysis -> day/week/month protocol.

Pure string assembly over the analysis; no new scoring happens here.
"""

from __future__ import annotations

import logging

from ascend.domains.life_audit.domain_logic.assessment_models import (
    AccountabilityCheckpoints,
    CompositeAnalysis,
    DailyProtocol,
    FocusPriority,
    MonthlyGoals,
    Protocol,
    WeeklyTheme,
    display_name,
)
from ascend.domains.life_audit.domain_logic.bands import FLOOR, select_band
from ascend.domains.life_audit.domain_logic.dimension_scorer import (
    classify_level,
    next_level_threshold,
)

logger = logging.getLogger(__name__)

# Morning movement intensity follows the physical vitality score.
MORNING_MOVEMENT_BANDS: tuple[tuple[float, str], ...] = (
    (7.0, "20-30 minutes of challenging training"),
    (4.0, "15-20 minutes of movement or exercise"),
    (FLOOR, "10 minutes of gentle stretching or walking"),
)

WEEKLY_THEMES: tuple[WeeklyTheme, ...] = (
    WeeklyTheme("monday", "Energy and motivation", "High-intensity activities"),
    WeeklyTheme("tuesday", "Learning and growth", "Study and skill development"),
    WeeklyTheme("wednesday", "Relationships", "Connect with accountability partner"),
    WeeklyTheme("thursday", "Physical health", "Workout and nutrition focus"),
    WeeklyTheme("friday", "Creative expression", "Hobbies and passion projects"),
    WeeklyTheme("saturday", "Rest and recovery", "Light activities and reflection"),
    WeeklyTheme("sunday", "Spiritual growth", "Church, meditation, and planning"),
)

MONTHLY_MILESTONES: tuple[str, ...] = (
    "Complete daily protocol for 21 consecutive days",
    "Achieve 3 quick wins in priority dimensions",
    "Connect with accountability partner weekly",
)

ACCOUNTABILITY_CHECKPOINTS = AccountabilityCheckpoints(
    daily="Complete daily protocol checklist",
    weekly="Review progress and adjust goals",
    monthly="Full assessment and plan revision",
    quarterly="Major milestone celebration and planning",
)


def create_daily_protocol(analysis: CompositeAnalysis) -> DailyProtocol:
    physical = analysis.dimension_scores.get("physical_vitality")
    movement = select_band(physical.current_score if physical else 5.0, MORNING_MOVEMENT_BANDS)

    midday = {
        "check_in": "Quick assessment of progress on daily goals",
        "adjustment": "Make necessary adjustments to stay on track",
    }
    if analysis.quick_win_dimensions:
        names = ", ".join(display_name(d) for d in analysis.quick_win_dimensions)
        midday["quick_win"] = f"Take one small step in {names}"

    evening = {
        "reflection": "Review daily progress and plan tomorrow",
        "preparation": "Prepare for next day's activities",
    }
    if analysis.biggest_opportunity:
        evening["tomorrow_focus"] = (
            f"Set one intention for {display_name(analysis.biggest_opportunity)}"
        )

    return DailyProtocol(
        morning={
            "spiritual": "5-10 minutes of prayer and reflection",
            "physical": movement,
            "mental": "5 minutes of goal setting and intention",
        },
        midday=midday,
        evening=evening,
    )


def create_focus_priorities(analysis: CompositeAnalysis) -> tuple[FocusPriority, ...]:
    """One ranked entry per long-term-focus dimension."""
    priorities = []
    for rank, dimension in enumerate(analysis.long_term_focus_dimensions, start=1):
        score = analysis.dimension_scores.get(dimension)
        if score is None:
            continue
        name = display_name(dimension)
        threshold = next_level_threshold(score.current_score)
        if score.level == "master":
            milestone = f"Sustain master level in {name}"
        else:
            milestone = f"Reach {classify_level(threshold)} level in {name} ({threshold:g}+)"
        priorities.append(FocusPriority(
            dimension=dimension,
            priority=rank,
            specific_actions=score.quick_wins,
            success_metrics=(
                f"Raise {name} from {score.current_score:.1f} toward {score.potential_score:.1f}",
                milestone,
            ),
        ))
    return tuple(priorities)


def create_monthly_goals(analysis: CompositeAnalysis) -> MonthlyGoals:
    primary = (
        f"Improve {display_name(analysis.biggest_opportunity)} by 2-3 points"
        if analysis.biggest_opportunity
        else "Complete the full life audit to choose a primary focus"
    )
    secondary = (
        f"Maintain {display_name(analysis.strongest_dimension)} excellence"
        if analysis.strongest_dimension
        else "Build one consistent daily habit"
    )
    return MonthlyGoals(primary=primary, secondary=secondary, milestones=MONTHLY_MILESTONES)


def build_plan(analysis: CompositeAnalysis) -> Protocol:
    """Assemble the full protocol for an analysis. Never fails on a well-formed analysis."""
    plan = Protocol(
        ascension_score=analysis.ascension_score,
        focus_areas=analysis.long_term_focus_dimensions,
        quick_wins=analysis.quick_win_dimensions,
        recommendations=analysis.personalized_recommendations,
        transformation_forecast=analysis.transformation_forecast,
        daily_protocol=create_daily_protocol(analysis),
        weekly_schedule=WEEKLY_THEMES,
        focus_priorities=create_focus_priorities(analysis),
        monthly_goals=create_monthly_goals(analysis),
        accountability_checkpoints=ACCOUNTABILITY_CHECKPOINTS,
    )
    logger.debug(
        "Plan built: ascension=%d focus=%s", plan.ascension_score, list(plan.focus_areas)
    )
    return plan
