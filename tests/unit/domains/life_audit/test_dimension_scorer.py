"""Unit tests for dimension scoring and level classification."""

from __future__ import annotations

import math

import pytest

from ascend.domains.life_audit.domain_logic.assessment_models import (
    AssessmentItem,
    InvalidInputError,
    ScoringParameters,
)
from ascend.domains.life_audit.domain_logic.dimension_scorer import (
    classify_level,
    compute_current_score,
    compute_dimension_metrics,
    compute_potential_score,
    distance_to_next_level,
    next_level_threshold,
)


def _item(response: int, weight: float = 1.0) -> AssessmentItem:
    return AssessmentItem(dimension="mental_mastery", response=response, weight=weight)


class TestCurrentScore:
    def test_uniform_weights_is_plain_mean(self):
        items = [_item(4), _item(6), _item(8)]
        assert compute_current_score(items) == 6.0

    def test_weights_pull_toward_heavier_items(self):
        # (2*1 + 8*3) / 4 = 6.5
        items = [_item(2, weight=1.0), _item(8, weight=3.0)]
        assert compute_current_score(items) == 6.5

    def test_rounds_to_one_decimal_half_up(self):
        # (5 + 5 + 5 + 6) / 4 = 5.25 -> 5.3
        items = [_item(5), _item(5), _item(5), _item(6)]
        assert compute_current_score(items) == 5.3

    def test_repeating_decimal(self):
        # (5 + 6 + 6) / 3 = 5.666... -> 5.7
        assert compute_current_score([_item(5), _item(6), _item(6)]) == 5.7

    def test_empty_defaults_to_midpoint(self):
        assert compute_current_score([]) == 5.0


class TestPotentialScore:
    def test_adds_flat_bonus(self):
        assert compute_potential_score([_item(5), _item(5)]) == 7.5

    def test_ceiling_bound(self):
        assert compute_potential_score([_item(9), _item(10)]) == 10.0

    def test_mixed_ceiling(self):
        # min(10, 3.5)=3.5 and min(10, 11.5)=10 -> 6.75 -> 6.8
        assert compute_potential_score([_item(1), _item(9)]) == 6.8

    def test_empty_defaults_to_full_headroom(self):
        assert compute_potential_score([]) == 10.0

    def test_bonus_is_configurable(self):
        params = ScoringParameters(potential_bonus=1.0)
        assert compute_potential_score([_item(5), _item(6)], params) == 6.5


class TestDimensionMetrics:
    def test_gap_is_potential_minus_current(self):
        current, potential, gap = compute_dimension_metrics([_item(5), _item(6)])
        assert current == 5.5
        assert potential == 8.0
        assert gap == 2.5

    def test_gap_zero_at_ceiling(self):
        assert compute_dimension_metrics([_item(10)] * 11) == (10.0, 10.0, 0.0)

    def test_empty_fallback_gap_is_five(self):
        assert compute_dimension_metrics([]) == (5.0, 10.0, 5.0)

    @pytest.mark.parametrize("response", range(1, 11))
    def test_scores_stay_in_range_and_gap_non_negative(self, response):
        items = [_item(response, weight=w) for w in (0.8, 1.0, 1.1, 1.3, 1.4)]
        current, potential, gap = compute_dimension_metrics(items)
        assert 1.0 <= current <= 10.0
        assert 1.0 <= potential <= 10.0
        assert gap >= 0.0

    def test_increasing_a_response_never_lowers_the_score(self):
        base = [_item(r, weight=w) for r, w in [(3, 1.2), (6, 0.9), (7, 1.4), (4, 1.0)]]
        before = compute_current_score(base)
        for index, item in enumerate(base):
            bumped = list(base)
            bumped[index] = _item(item.response + 1, weight=item.weight)
            assert compute_current_score(bumped) >= before


class TestLevelClassifier:
    @pytest.mark.parametrize(
        ("score", "level"),
        [
            (10.0, "master"),
            (9.0, "master"),
            (8.9, "expert"),
            (7.0, "expert"),
            (6.9, "advanced"),
            (5.0, "advanced"),
            (4.9, "developing"),
            (3.0, "developing"),
            (2.9, "novice"),
            (1.0, "novice"),
            (-3.0, "novice"),
        ],
    )
    def test_thresholds(self, score, level):
        assert classify_level(score) == level


class TestNextLevelThreshold:
    @pytest.mark.parametrize(
        ("score", "threshold"),
        [(1.0, 3.0), (3.0, 5.0), (4.9, 5.0), (6.2, 7.0), (8.0, 9.0), (9.0, 10.0), (10.0, 10.0)],
    )
    def test_next_threshold(self, score, threshold):
        assert next_level_threshold(score) == threshold

    def test_distance_is_rounded(self):
        assert distance_to_next_level(6.1) == 0.9
        assert distance_to_next_level(8.0) == 1.0
        assert distance_to_next_level(10.0) == 0.0


class TestAssessmentItemValidation:
    @pytest.mark.parametrize("response", [0, 11, -1])
    def test_out_of_range_response_rejected(self, response):
        with pytest.raises(InvalidInputError):
            _item(response)

    @pytest.mark.parametrize("response", [5.5, "7", True, None])
    def test_non_integer_response_rejected(self, response):
        with pytest.raises(InvalidInputError):
            AssessmentItem(dimension="mental_mastery", response=response)

    def test_non_positive_weight_rejected(self):
        with pytest.raises(InvalidInputError):
            _item(5, weight=0.0)

    @pytest.mark.parametrize("weight", [math.nan, math.inf, -math.inf, "1.0", None, True])
    def test_non_finite_or_non_numeric_weight_rejected(self, weight):
        with pytest.raises(InvalidInputError):
            _item(5, weight=weight)

    def test_integer_weight_accepted(self):
        assert _item(5, weight=2).weight == 2

    def test_invalid_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            _item(42)
