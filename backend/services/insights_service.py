"""Dashboard career insights parsed from a formatted Gemini reply."""

import logging

from models.schemas.career_insight import CareerInsight
from models.schemas.display_block import (
    BulletBlock,
    DisplayBlock,
    HeaderBlock,
    NumberedBlock,
    ParagraphBlock,
)
from services import gemini_client, prompt_builder
from services.display_formatter import format_blocks

logger = logging.getLogger(__name__)

INSIGHT_COUNT = 4

# Priority by position: first insight is the most urgent
_PRIORITIES = ["high", "medium", "medium", "low"]

DEFAULT_INSIGHTS: list[CareerInsight] = [
    CareerInsight(
        title="Professional Development",
        description="Focus on continuous learning and skill enhancement.",
        action_items=["Identify skill gaps", "Enroll in relevant courses", "Seek mentorship opportunities"],
        priority="high",
    ),
    CareerInsight(
        title="Network Building",
        description="Expand your professional network for career opportunities.",
        action_items=["Join industry groups", "Attend networking events", "Connect with professionals on LinkedIn"],
        priority="medium",
    ),
    CareerInsight(
        title="Career Planning",
        description="Set clear career goals and create a roadmap.",
        action_items=["Define short and long-term goals", "Create a career timeline", "Regular progress reviews"],
        priority="medium",
    ),
    CareerInsight(
        title="Personal Branding",
        description="Build a strong professional presence online and offline.",
        action_items=["Update LinkedIn profile", "Create a portfolio", "Share industry insights"],
        priority="low",
    ),
]


def _priority_for(position: int) -> str:
    if position < len(_PRIORITIES):
        return _PRIORITIES[position]
    return "low"


def parse_insights(blocks: list[DisplayBlock], limit: int = INSIGHT_COUNT) -> list[CareerInsight]:
    """Group blocks into insights.

    Each header opens an insight; the first paragraph after it becomes the
    description (later ones are appended), bullets and numbered items become
    action items. Content before the first header is ignored.
    """
    grouped: list[dict] = []
    for block in blocks:
        if isinstance(block, HeaderBlock):
            grouped.append({"title": block.text, "description": [], "action_items": []})
        elif not grouped:
            continue
        elif isinstance(block, (BulletBlock, NumberedBlock)):
            grouped[-1]["action_items"].append(block.text)
        elif isinstance(block, ParagraphBlock):
            grouped[-1]["description"].append(block.text)

    insights = []
    for position, item in enumerate(grouped[:limit]):
        insights.append(
            CareerInsight(
                title=item["title"],
                description=" ".join(item["description"]),
                action_items=item["action_items"],
                priority=_priority_for(position),
            )
        )
    return insights


async def generate_insights() -> list[CareerInsight]:
    """Ask Gemini for insights, falling back to the defaults on any failure."""
    reply = await gemini_client.generate_text(
        prompt_builder.build_insights_prompt(INSIGHT_COUNT),
        system_prompt=prompt_builder.build_chat_system_prompt("general"),
    )
    if reply is None:
        logger.warning("Gemini insights unavailable, using default insights")
        return list(DEFAULT_INSIGHTS)

    insights = parse_insights(format_blocks(reply))
    if not insights:
        logger.warning("No insights parsed from reply (%d chars), using defaults", len(reply))
        return list(DEFAULT_INSIGHTS)
    return insights
