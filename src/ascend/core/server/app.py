"""Ascend Life Audit MCP Server — application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from ascend.core.catalog.loader import load_questionnaire_file
from ascend.core.config.settings import get_settings
from ascend.domains.life_audit.domain_logic.assessment_models import ScoringParameters
from ascend.domains.life_audit.domain_logic.engine import AssessmentEngine
from ascend.domains.life_audit.domain_logic.questionnaire import load_default_catalog
from ascend.domains.life_audit.prompts.life_audit_prompts import register_life_audit_prompts
from ascend.domains.life_audit.resources.questionnaire import register_questionnaire_resources
from ascend.domains.life_audit.tools.life_audit_tools import register_life_audit_tools

logger = logging.getLogger(__name__)


def create_app(*, engine_override: AssessmentEngine | None = None) -> FastMCP:
    """Create and configure the Ascend Life Audit MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Loads the questionnaire catalog (shipped or configured)
    3. Builds the assessment engine with the configured scoring parameters
    4. Registers all tools, resources, and prompts
    """
    settings = get_settings()

    # --- Server instance ---
    server = FastMCP(
        "Ascend Life Audit",
        instructions=(
            "Seven Dimensions life audit server. Scores questionnaire responses "
            "into per-dimension levels and an ascension score, and builds a "
            "personalized daily, weekly and monthly transformation protocol."
        ),
    )

    # --- Initialize engine ---
    if engine_override is not None:
        engine = engine_override
    else:
        if settings.questionnaire_path:
            catalog = load_questionnaire_file(settings.questionnaire_path)
        else:
            catalog = load_default_catalog()
        engine = AssessmentEngine(
            catalog=catalog,
            parameters=ScoringParameters(
                potential_bonus=settings.potential_bonus,
                quick_win_margin=settings.quick_win_margin,
            ),
        )
    logger.info(
        "Assessment engine ready: questionnaire %s v%s (%d questions)",
        engine.catalog.id,
        engine.catalog.version,
        len(engine.catalog),
    )

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "Ascend Life Audit",
            "version": "0.1.0",
            "questionnaire": engine.catalog.id,
            "questionnaire_version": engine.catalog.version,
            "dimensions": engine.catalog.dimension_ids(),
            "question_count": len(engine.catalog),
        }

    register_life_audit_tools(server, engine)
    logger.info("Life audit tools registered")

    # --- Register resources ---
    register_questionnaire_resources(server, engine.catalog)

    # --- Register prompts ---
    register_life_audit_prompts(server)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when accessed (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
