"""MCP tools for the Seven Dimensions life audit.

Each tool accepts ``{question_id: response}`` from the questionnaire, runs
the deterministic engine and returns JSON. Nothing is persisted here; the
record tool only shapes a document for the caller's own store.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from fastmcp import Context, FastMCP

if TYPE_CHECKING:
    from ascend.domains.life_audit.domain_logic.engine import AssessmentEngine

from ascend.domains.life_audit.domain_logic.assessment_models import InvalidInputError
from ascend.domains.life_audit.domain_logic.questionnaire import items_from_responses

logger = logging.getLogger(__name__)

INCOMPLETE_MESSAGE = "Please complete the assessment before requesting results."


def _invalid_input(exc: InvalidInputError) -> str:
    return json.dumps({
        "status": "invalid_input",
        "message": INCOMPLETE_MESSAGE,
        "detail": str(exc),
    })


def _ok(payload: dict[str, Any]) -> str:
    return json.dumps({"status": "ok", **payload}, indent=2)


def register_life_audit_tools(mcp: FastMCP, engine: AssessmentEngine) -> None:
    """Register life audit analysis tools on the MCP server."""

    @mcp.tool
    async def life_audit_analyze(ctx: Context, responses: dict[str, int]) -> str:
        """Score a Seven Dimensions life audit.

        Returns per-dimension scores, levels and insights, the 0-100 ascension
        score, quick-win and long-term-focus dimensions, recommendations and a
        transformation forecast.

        Args:
            responses: Mapping of question id (e.g. 'pv_1') to a 1-10 response.
        """
        start_time = time.monotonic()
        try:
            items = items_from_responses(engine.catalog, responses)
            analysis = engine.analyze(items)
        except InvalidInputError as exc:
            logger.info("life_audit_analyze rejected input: %s", exc)
            return _invalid_input(exc)

        elapsed_ms = (time.monotonic() - start_time) * 1000
        logger.info(
            "life_audit_analyze: %d responses, ascension=%d (%.1f ms)",
            len(items),
            analysis.ascension_score,
            elapsed_ms,
        )
        return _ok({"analysis": asdict(analysis)})

    @mcp.tool
    async def life_audit_plan(ctx: Context, responses: dict[str, int]) -> str:
        """Build a personalized daily/weekly/monthly protocol from a life audit.

        Args:
            responses: Mapping of question id (e.g. 'pv_1') to a 1-10 response.
        """
        try:
            items = items_from_responses(engine.catalog, responses)
            analysis = engine.analyze(items)
        except InvalidInputError as exc:
            logger.info("life_audit_plan rejected input: %s", exc)
            return _invalid_input(exc)

        plan = engine.build_plan(analysis)
        return _ok({"plan": asdict(plan)})

    @mcp.tool
    async def life_audit_record(
        ctx: Context,
        user_id: str,
        responses: dict[str, int],
    ) -> str:
        """Shape a completed life audit into a record ready for storage.

        The server does not store the record; save it with your own store.

        Args:
            user_id: Identifier of the user who completed the audit.
            responses: Mapping of question id (e.g. 'pv_1') to a 1-10 response.
        """
        try:
            items = items_from_responses(engine.catalog, responses)
            record = engine.create_assessment_record(user_id, items)
        except InvalidInputError as exc:
            logger.info("life_audit_record rejected input: %s", exc)
            return _invalid_input(exc)

        return _ok({"record": asdict(record)})
