"""Life audit engine: answered items -> CompositeAnalysis -> Protocol.

The engine holds only the read-only catalog and scoring parameters, so one
instance can be shared across threads, or a fresh one created per call.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timezone
from typing import Sequence

from ascend.core.catalog.registry import QuestionCatalog
from ascend.domains.life_audit.domain_logic.assessment_models import (
    AssessmentItem,
    AssessmentRecord,
    CompositeAnalysis,
    DimensionScore,
    InvalidInputError,
    Protocol,
    ScoringParameters,
)
from ascend.domains.life_audit.domain_logic.bands import round_half_up
from ascend.domains.life_audit.domain_logic.composite_aggregator import (
    compute_ascension_score,
    identify_biggest_opportunity,
    identify_strongest_dimension,
)
from ascend.domains.life_audit.domain_logic.dimension_insights import (
    generate_dimension_insights,
    identify_improvement_areas,
    identify_item_quick_wins,
)
from ascend.domains.life_audit.domain_logic.dimension_scorer import (
    classify_level,
    compute_dimension_metrics,
)
from ascend.domains.life_audit.domain_logic.plan_builder import build_plan
from ascend.domains.life_audit.domain_logic.questionnaire import load_default_catalog
from ascend.domains.life_audit.domain_logic.recommendations import (
    generate_overall_insights,
    generate_personalized_recommendations,
    identify_long_term_focus,
    identify_quick_win_dimensions,
)
from ascend.domains.life_audit.domain_logic.transformation_forecaster import (
    forecast_transformation,
)

logger = logging.getLogger(__name__)

MINUTES_PER_QUESTION = 1.5


def _hash_responses(items: Sequence[AssessmentItem]) -> str:
    """SHA-256 of the canonical JSON of the submitted responses.

    Submission order does not affect the hash.
    """
    payload = sorted([i.dimension, i.id, i.response] for i in items)
    canonical = json.dumps(payload, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


class AssessmentEngine:
    """Scores a life audit submission and derives insights and a plan.

    Usage::

        engine = AssessmentEngine()
        analysis = engine.analyze(items)
        plan = engine.build_plan(analysis)
    """

    def __init__(
        self,
        catalog: QuestionCatalog | None = None,
        parameters: ScoringParameters | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else load_default_catalog()
        self._params = parameters or ScoringParameters()

    @property
    def catalog(self) -> QuestionCatalog:
        return self._catalog

    @property
    def parameters(self) -> ScoringParameters:
        return self._params

    # ---------------------------------------------------------------
    # Per-dimension
    # ---------------------------------------------------------------

    def score_dimension(
        self, dimension: str, items: Sequence[AssessmentItem]
    ) -> DimensionScore:
        """Score one dimension and attach its narrative buckets."""
        if not items:
            logger.warning("No items submitted for %s; using neutral fallback scores", dimension)

        current, potential, gap = compute_dimension_metrics(items, self._params)
        return DimensionScore(
            dimension=dimension,
            current_score=current,
            potential_score=potential,
            gap=gap,
            level=classify_level(current),
            insights=tuple(generate_dimension_insights(dimension, current, gap)),
            improvement_areas=tuple(identify_improvement_areas(dimension, items, current)),
            quick_wins=tuple(identify_item_quick_wins(dimension, items, current)),
        )

    def calculate_dimension_scores(
        self, items: Sequence[AssessmentItem]
    ) -> dict[str, DimensionScore]:
        """Score every catalog dimension, in catalog order."""
        by_dimension: dict[str, list[AssessmentItem]] = {
            d: [] for d in self._catalog.dimension_ids()
        }
        for item in items:
            bucket = by_dimension.get(item.dimension)
            if bucket is None:
                logger.warning("Ignoring item for unknown dimension %r", item.dimension)
                continue
            bucket.append(item)

        return {d: self.score_dimension(d, dim_items) for d, dim_items in by_dimension.items()}

    # ---------------------------------------------------------------
    # Public operations
    # ---------------------------------------------------------------

    def analyze(self, items: Sequence[AssessmentItem] | None) -> CompositeAnalysis:
        """Analyse a submission.

        Raises:
            InvalidInputError: If ``items`` is None or holds something other
                than AssessmentItems. Empty or partial submissions degrade to
                fallback scores instead.
        """
        if items is None:
            raise InvalidInputError("No assessment items were submitted")
        for index, item in enumerate(items):
            if not isinstance(item, AssessmentItem):
                raise InvalidInputError(
                    f"Item {index} is not an AssessmentItem: {type(item).__name__}"
                )

        logger.debug("Analyzing life audit: %d items", len(items))
        dimension_scores = self.calculate_dimension_scores(items)

        ascension = compute_ascension_score(dimension_scores)
        strongest = identify_strongest_dimension(dimension_scores)
        opportunity = identify_biggest_opportunity(dimension_scores)
        quick_wins = identify_quick_win_dimensions(dimension_scores, self._params)
        long_term = identify_long_term_focus(dimension_scores)

        analysis = CompositeAnalysis(
            ascension_score=ascension,
            dimension_scores=dimension_scores,
            strongest_dimension=strongest,
            biggest_opportunity=opportunity,
            quick_win_dimensions=tuple(quick_wins),
            long_term_focus_dimensions=tuple(long_term),
            overall_insights=tuple(generate_overall_insights(dimension_scores, ascension)),
            personalized_recommendations=tuple(
                generate_personalized_recommendations(dimension_scores, strongest, opportunity)
            ),
            transformation_forecast=forecast_transformation(
                dimension_scores, ascension, long_term
            ),
        )
        logger.debug(
            "Analysis complete: ascension=%d strongest=%s opportunity=%s",
            ascension,
            strongest,
            opportunity,
        )
        return analysis

    def build_plan(self, analysis: CompositeAnalysis) -> Protocol:
        """Build the day/week/month protocol for an analysis."""
        return build_plan(analysis)

    def create_assessment_record(
        self,
        user_id: str,
        items: Sequence[AssessmentItem] | None,
        *,
        now: datetime | None = None,
    ) -> AssessmentRecord:
        """Analyse ``items`` and shape the result for an external store.

        Does not persist anything. ``now`` overrides the completion timestamp.

        Raises:
            InvalidInputError: If ``user_id`` or ``items`` is missing.
        """
        if not user_id:
            raise InvalidInputError("A user id is required to create an assessment record")
        analysis = self.analyze(items)

        total = len(items)
        catalog_size = len(self._catalog)
        answered = len({i.id for i in items if self._catalog.get_question(i.id) is not None})
        completion = (
            min(100, int(round_half_up(answered / catalog_size * 100))) if catalog_size else 0
        )
        completed_at = (now or datetime.now(timezone.utc)).isoformat()

        return AssessmentRecord(
            user_id=user_id,
            completed_at=completed_at,
            dimensions=dict(analysis.dimension_scores),
            ascension_score=analysis.ascension_score,
            total_questions=total,
            time_spent_minutes=int(round_half_up(total * MINUTES_PER_QUESTION)),
            completion_rate=completion,
            responses_hash=_hash_responses(items),
        )
