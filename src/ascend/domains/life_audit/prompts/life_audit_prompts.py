"""MCP Prompts — pre-built interaction templates for life audit journeys."""

from __future__ import annotations

from fastmcp import FastMCP


def register_life_audit_prompts(mcp: FastMCP) -> None:
    """Register life audit MCP prompts."""

    @mcp.prompt()
    def life_audit_prompt() -> str:
        """Prompt template for taking the Seven Dimensions life audit."""
        return """I'd like to take the Seven Dimensions life audit. Please:

1. Walk me through the questions one dimension at a time
2. Ask me to rate each item from 1 to 10
3. Score my answers with the life audit tools
4. Explain my strongest dimension and my biggest opportunity
5. Suggest two or three quick wins I can start this week

Please be honest but encouraging."""

    @mcp.prompt()
    def plan_review_prompt(focus: str = "my biggest opportunity") -> str:
        """Prompt template for reviewing a transformation plan."""
        return f"""Let's review my transformation plan with a focus on {focus}. I'd like to:

1. Go over my daily protocol and weekly themes
2. Check which focus priorities matter most right now
3. Adjust my monthly goals if they feel unrealistic
4. Agree on my next accountability checkpoint

Please keep the advice specific and practical."""
