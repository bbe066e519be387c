"""The shipped life audit questionnaire and response -> item conversion."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from ascend.core.catalog.loader import load_questionnaire_file
from ascend.core.catalog.registry import QuestionCatalog
from ascend.domains.life_audit.domain_logic.assessment_models import (
    AssessmentItem,
    InvalidInputError,
    display_name,
)

logger = logging.getLogger(__name__)

# Questionnaire YAML lives under src/ascend/domains/life_audit/questionnaires/
QUESTIONNAIRE_DIR = Path(__file__).resolve().parent.parent / "questionnaires"
DEFAULT_QUESTIONNAIRE = QUESTIONNAIRE_DIR / "life_audit.v1.yaml"


@lru_cache(maxsize=1)
def load_default_catalog() -> QuestionCatalog:
    """Load the shipped 7 x 11 catalog once; the result is shared read-only."""
    return load_questionnaire_file(DEFAULT_QUESTIONNAIRE)


def items_from_responses(
    catalog: QuestionCatalog,
    responses: Mapping[str, int],
) -> list[AssessmentItem]:
    """Build AssessmentItems (catalog order) from ``{question_id: response}``.

    Unanswered questions are omitted; their dimension falls back to the
    neutral scores.

    Raises:
        InvalidInputError: ``responses`` is None, names an unknown question,
            or holds a response outside the catalog's scale.
    """
    if responses is None:
        raise InvalidInputError("No assessment responses were submitted")

    unknown = sorted(qid for qid in responses if catalog.get_question(qid) is None)
    if unknown:
        raise InvalidInputError(f"Unknown question ids: {', '.join(unknown)}")

    items = []
    for question in catalog.all_questions():
        if question.id not in responses:
            continue
        response = responses[question.id]
        if isinstance(response, int) and not (
            catalog.scale.min <= response <= catalog.scale.max
        ):
            raise InvalidInputError(
                f"Response for {question.id} must be between "
                f"{catalog.scale.min} and {catalog.scale.max}, got {response}"
            )
        items.append(AssessmentItem(
            dimension=question.dimension,
            response=response,
            category=question.category,
            weight=question.weight,
            id=question.id,
            question=question.text,
        ))

    logger.debug("Built %d items from %d responses", len(items), len(responses))
    return items


def catalog_as_dict(catalog: QuestionCatalog) -> dict[str, Any]:
    """JSON-ready view of a catalog for discovery resources."""
    return {
        "id": catalog.id,
        "version": catalog.version,
        "response_scale": {"min": catalog.scale.min, "max": catalog.scale.max},
        "question_count": len(catalog),
        "dimensions": [
            {
                "id": dimension,
                "display_name": display_name(dimension),
                "questions": [
                    {
                        "id": q.id,
                        "text": q.text,
                        "category": q.category,
                        "weight": q.weight,
                    }
                    for q in catalog.questions_for(dimension)
                ],
            }
            for dimension in catalog.dimension_ids()
        ],
    }
