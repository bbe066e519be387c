"""Shared test fixtures for Ascend life audit tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable, Mapping

import pytest

# ---------------------------------------------------------------------------
# Test hermeticity
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _force_hermetic_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "QUESTIONNAIRE_PATH",
        "POTENTIAL_BONUS",
        "QUICK_WIN_MARGIN",
        "ASCEND_HOST",
        "ASCEND_PORT",
        "ASCEND_LOG_LEVEL",
        "ASCEND_ALLOW_INSECURE_BIND",
    ):
        monkeypatch.delenv(var, raising=False)

# Allow running tests without `pip install -e .` by making `src/` importable.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_SRC_DIR = _PROJECT_ROOT / "src"
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from ascend.core.catalog.registry import QuestionCatalog  # noqa: E402
from ascend.domains.life_audit.domain_logic.assessment_models import (  # noqa: E402
    AssessmentItem,
)
from ascend.domains.life_audit.domain_logic.engine import AssessmentEngine  # noqa: E402
from ascend.domains.life_audit.domain_logic.questionnaire import (  # noqa: E402
    load_default_catalog,
)

ItemFactory = Callable[..., list[AssessmentItem]]


# ---------------------------------------------------------------------------
# Catalog and engine
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog() -> QuestionCatalog:
    """The shipped 7 x 11 life audit catalog."""
    return load_default_catalog()


@pytest.fixture
def engine(catalog: QuestionCatalog) -> AssessmentEngine:
    """An engine with default scoring parameters."""
    return AssessmentEngine(catalog=catalog)


@pytest.fixture
def make_items(catalog: QuestionCatalog) -> ItemFactory:
    """Factory for full catalog submissions.

    ``make_items(5)`` answers every item with 5; ``per_dimension`` overrides
    the response for whole dimensions, ``omit`` drops dimensions entirely and
    ``weight`` replaces every catalog weight (e.g. 1.0 for uniform weights).
    """

    def _make(
        response: int = 5,
        *,
        per_dimension: Mapping[str, int] | None = None,
        omit: Iterable[str] = (),
        weight: float | None = None,
    ) -> list[AssessmentItem]:
        per_dimension = per_dimension or {}
        omitted = set(omit)
        items = []
        for question in catalog.all_questions():
            if question.dimension in omitted:
                continue
            items.append(AssessmentItem(
                dimension=question.dimension,
                response=per_dimension.get(question.dimension, response),
                category=question.category,
                weight=question.weight if weight is None else weight,
                id=question.id,
                question=question.text,
            ))
        return items

    return _make
