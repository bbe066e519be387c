"""Question catalog — in-memory index for a loaded questionnaire."""

from __future__ import annotations

import logging

from ascend.core.catalog.models import CatalogDimension, CatalogQuestion, ResponseScale

logger = logging.getLogger(__name__)


class QuestionCatalog:
    """In-memory, read-only-after-load index of a questionnaire.

    Dimension order is registration order, which is the order the engine
    iterates in and therefore the tie-break order for every ranking.
    """

    def __init__(
        self,
        catalog_id: str = "life_audit",
        version: str = "1.0.0",
        scale: ResponseScale | None = None,
    ) -> None:
        self.id = catalog_id
        self.version = version
        self.scale = scale or ResponseScale()
        self._dimensions: dict[str, CatalogDimension] = {}
        self._questions: dict[str, CatalogQuestion] = {}

    def register(self, dimension: CatalogDimension) -> None:
        """Add a dimension and all of its questions to the indexes."""
        if dimension.id in self._dimensions:
            raise ValueError(f"Duplicate dimension id registered: {dimension.id!r}")
        for question in dimension.questions:
            if question.id in self._questions:
                raise ValueError(f"Duplicate question id registered: {question.id!r}")

        self._dimensions[dimension.id] = dimension
        for question in dimension.questions:
            self._questions[question.id] = question

    def dimension_ids(self) -> list[str]:
        """Return dimension ids in catalog order."""
        return list(self._dimensions)

    def questions_for(self, dimension: str) -> tuple[CatalogQuestion, ...]:
        """Return a dimension's questions, or an empty tuple if unknown."""
        entry = self._dimensions.get(dimension)
        return entry.questions if entry else ()

    def get_question(self, question_id: str) -> CatalogQuestion | None:
        """Look up a question by ID."""
        return self._questions.get(question_id)

    def all_questions(self) -> list[CatalogQuestion]:
        """Return every question in catalog order."""
        return [q for d in self._dimensions.values() for q in d.questions]

    def __contains__(self, dimension: object) -> bool:
        return dimension in self._dimensions

    def __len__(self) -> int:
        return len(self._questions)
