"""Questionnaire loader — reads a YAML catalog definition from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ascend.core.catalog.models import CatalogDimension, CatalogQuestion, ResponseScale
from ascend.core.catalog.registry import QuestionCatalog

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a questionnaire file is missing or malformed."""


def load_questionnaire_file(path: str | Path) -> QuestionCatalog:
    """Parse and validate a YAML questionnaire into a QuestionCatalog.

    Raises:
        CatalogError: If the file cannot be read or fails validation.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogError(f"Questionnaire file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise CatalogError(f"Invalid YAML in {path}: {exc}") from exc

    catalog = build_catalog(data, source=str(path))
    logger.info(
        "Loaded questionnaire %s (v%s): %d dimensions, %d questions",
        catalog.id,
        catalog.version,
        len(catalog.dimension_ids()),
        len(catalog),
    )
    return catalog


def build_catalog(data: dict[str, Any], *, source: str = "<memory>") -> QuestionCatalog:
    """Build a QuestionCatalog from an already-parsed mapping."""
    errors = validate_questionnaire(data)
    if errors:
        raise CatalogError(f"{source}: " + "; ".join(errors))

    scale_data = data.get("response_scale", {})
    catalog = QuestionCatalog(
        catalog_id=data.get("id", "life_audit"),
        version=str(data.get("version", "1.0.0")),
        scale=ResponseScale(
            min=int(scale_data.get("min", 1)),
            max=int(scale_data.get("max", 10)),
        ),
    )

    for dim in data["dimensions"]:
        catalog.register(CatalogDimension(
            id=dim["id"],
            questions=tuple(
                CatalogQuestion(
                    id=q["id"],
                    dimension=dim["id"],
                    text=q.get("text", "").strip(),
                    category=q.get("category", ""),
                    weight=float(q.get("weight", 1.0)),
                )
                for q in dim["questions"]
            ),
        ))
    return catalog


def validate_questionnaire(data: Any) -> list[str]:
    """Return a list of problems with a parsed questionnaire (empty if valid)."""
    if not isinstance(data, dict):
        return ["Questionnaire must be a mapping"]

    dimensions = data.get("dimensions")
    if not dimensions or not isinstance(dimensions, list):
        return ["Questionnaire defines no dimensions"]

    errors: list[str] = []
    seen_dims: set[str] = set()
    seen_questions: set[str] = set()

    for index, dim in enumerate(dimensions):
        dim_id = dim.get("id") if isinstance(dim, dict) else None
        if not dim_id:
            errors.append(f"Dimension #{index} has no id")
            continue
        if dim_id in seen_dims:
            errors.append(f"Duplicate dimension id '{dim_id}'")
        seen_dims.add(dim_id)

        questions = dim.get("questions") or []
        if not questions:
            errors.append(f"Dimension '{dim_id}' has no questions")
            continue

        for q in questions:
            q_id = q.get("id") if isinstance(q, dict) else None
            if not q_id:
                errors.append(f"Dimension '{dim_id}' has a question without an id")
                continue
            if q_id in seen_questions:
                errors.append(f"Duplicate question id '{q_id}'")
            seen_questions.add(q_id)

            try:
                weight = float(q.get("weight", 1.0))
            except (TypeError, ValueError):
                errors.append(f"Question '{q_id}' has a non-numeric weight")
                continue
            if weight <= 0:
                errors.append(f"Question '{q_id}' weight must be positive")

    return errors
