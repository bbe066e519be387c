"""Unit tests for plan assembly."""

from __future__ import annotations

from dataclasses import asdict

from ascend.domains.life_audit.domain_logic.plan_builder import (
    ACCOUNTABILITY_CHECKPOINTS,
    MONTHLY_MILESTONES,
    WEEKLY_THEMES,
    build_plan,
)


class TestDailyProtocol:
    def test_morning_movement_for_mid_physical(self, engine, make_items):
        plan = build_plan(engine.analyze(make_items(5)))
        morning = plan.daily_protocol.morning
        assert morning["physical"] == "15-20 minutes of movement or exercise"
        assert set(morning) == {"spiritual", "physical", "mental"}

    def test_morning_movement_tracks_physical_score(self, engine, make_items):
        low = build_plan(engine.analyze(make_items(5, per_dimension={"physical_vitality": 2})))
        high = build_plan(engine.analyze(make_items(5, per_dimension={"physical_vitality": 9})))
        assert low.daily_protocol.morning["physical"] == "10 minutes of gentle stretching or walking"
        assert high.daily_protocol.morning["physical"] == "20-30 minutes of challenging training"

    def test_midday_quick_win_only_when_dimensions_near_a_level(self, engine, make_items):
        without = build_plan(engine.analyze(make_items(5)))
        with_wins = build_plan(engine.analyze(make_items(8)))
        assert "quick_win" not in without.daily_protocol.midday
        assert with_wins.daily_protocol.midday["quick_win"] == (
            "Take one small step in Physical Vitality, Mental Mastery, Spiritual Connection"
        )

    def test_evening_names_biggest_opportunity(self, engine, make_items):
        items = make_items(8, per_dimension={"financial_wisdom": 1})
        plan = build_plan(engine.analyze(items))
        assert plan.daily_protocol.evening["tomorrow_focus"] == (
            "Set one intention for Financial Wisdom"
        )


class TestSchedulesAndGoals:
    def test_weekly_schedule_covers_every_day(self, engine, make_items):
        plan = build_plan(engine.analyze(make_items(5)))
        assert [t.day for t in plan.weekly_schedule] == [
            "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
        ]
        assert plan.weekly_schedule == WEEKLY_THEMES

    def test_monthly_goals(self, engine, make_items):
        plan = build_plan(engine.analyze(make_items(5)))
        assert plan.monthly_goals.primary == "Improve Physical Vitality by 2-3 points"
        assert plan.monthly_goals.secondary == "Maintain Physical Vitality excellence"
        assert plan.monthly_goals.milestones == MONTHLY_MILESTONES

    def test_monthly_goals_follow_strongest_and_opportunity(self, engine, make_items):
        items = make_items(8, per_dimension={"creative_expression": 9, "legacy_building": 2})
        plan = build_plan(engine.analyze(items))
        assert plan.monthly_goals.primary == "Improve Legacy Building by 2-3 points"
        assert plan.monthly_goals.secondary == "Maintain Creative Expression excellence"

    def test_accountability_checkpoints_are_fixed(self, engine, make_items):
        plan = build_plan(engine.analyze(make_items(3)))
        assert plan.accountability_checkpoints == ACCOUNTABILITY_CHECKPOINTS
        assert plan.accountability_checkpoints.quarterly.startswith("Major milestone")


class TestFocusPriorities:
    def test_ranked_entries_for_long_term_focus(self, engine, make_items):
        analysis = engine.analyze(make_items(5))
        plan = build_plan(analysis)
        assert [p.dimension for p in plan.focus_priorities] == list(
            analysis.long_term_focus_dimensions
        )
        assert [p.priority for p in plan.focus_priorities] == [1, 2, 3]

    def test_success_metrics(self, engine, make_items):
        plan = build_plan(engine.analyze(make_items(5)))
        first = plan.focus_priorities[0]
        assert first.success_metrics == (
            "Raise Physical Vitality from 5.0 toward 7.5",
            "Reach expert level in Physical Vitality (7+)",
        )

    def test_actions_are_the_dimension_quick_wins(self, engine, make_items):
        analysis = engine.analyze(make_items(5))
        plan = build_plan(analysis)
        first = plan.focus_priorities[0]
        assert first.specific_actions == analysis.dimension_scores[first.dimension].quick_wins

    def test_master_dimensions_are_sustained(self, engine, make_items):
        plan = build_plan(engine.analyze(make_items(10)))
        assert plan.focus_priorities[0].success_metrics[1] == (
            "Sustain master level in Physical Vitality"
        )


class TestBuildPlan:
    def test_copies_analysis_summary(self, engine, make_items):
        analysis = engine.analyze(make_items(8, per_dimension={"mental_mastery": 1}))
        plan = build_plan(analysis)
        assert plan.ascension_score == analysis.ascension_score
        assert plan.focus_areas == analysis.long_term_focus_dimensions
        assert plan.quick_wins == analysis.quick_win_dimensions
        assert plan.recommendations == analysis.personalized_recommendations
        assert plan.transformation_forecast == analysis.transformation_forecast

    def test_deterministic(self, engine, make_items):
        analysis = engine.analyze(make_items(6, per_dimension={"spiritual_connection": 3}))
        assert asdict(build_plan(analysis)) == asdict(build_plan(analysis))

    def test_daily_blocks_are_not_shared_between_plans(self, engine, make_items):
        analysis = engine.analyze(make_items(8))
        first = build_plan(analysis)
        second = build_plan(analysis)
        first.daily_protocol.midday.clear()
        assert "quick_win" in second.daily_protocol.midday

    def test_engine_delegates(self, engine, make_items):
        analysis = engine.analyze(make_items(7))
        assert engine.build_plan(analysis) == build_plan(analysis)
