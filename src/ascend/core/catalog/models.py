"""Data models for questionnaire catalogs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogQuestion:
    """A single weighted questionnaire item."""

    id: str
    dimension: str
    text: str
    category: str
    weight: float


@dataclass(frozen=True)
class CatalogDimension:
    """An ordered group of questions scored together."""

    id: str
    questions: tuple[CatalogQuestion, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ResponseScale:
    """Inclusive bounds of an item response."""

    min: int = 1
    max: int = 10
