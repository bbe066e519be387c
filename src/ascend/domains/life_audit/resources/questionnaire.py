"""MCP Resources for questionnaire discovery."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastmcp import FastMCP

from ascend.domains.life_audit.domain_logic.questionnaire import catalog_as_dict

if TYPE_CHECKING:
    from ascend.core.catalog.registry import QuestionCatalog


def register_questionnaire_resources(mcp: FastMCP, catalog: QuestionCatalog) -> None:
    """Register the life audit questionnaire resource on the MCP server."""

    @mcp.resource("catalog://life_audit/questions")
    def life_audit_questions_resource() -> str:
        """The Seven Dimensions questionnaire: dimensions, items, weights."""
        return json.dumps(catalog_as_dict(catalog), indent=2)
