"""Career recommendations: profile -> prompt -> Gemini -> extracted recommendations."""

import json
import logging

from config import settings
from models.requests import ChatMessage, ProfileIntake
from models.responses import RecommendationsResponse
from models.schemas.interpreted_reply import ExtractionFailure
from services import gemini_client, prompt_builder
from services.gemini_client import LLMUnavailableError
from services.structured_extractor import interpret, recommendations_from

logger = logging.getLogger(__name__)

USER_FACING_ERROR = (
    "Sorry, we couldn't get recommendations. The AI response might have been "
    "in an unexpected format. Please try rephrasing your skills and interests."
)

_PREVIEW_CHARS = 500


class RecommendationError(Exception):
    """The reply could not be turned into recommendations.

    ``reason`` keeps the specific failure for diagnostics; callers show
    ``USER_FACING_ERROR`` regardless of it.
    """

    def __init__(self, reason: ExtractionFailure, raw_reply: str = "") -> None:
        super().__init__(f"recommendation extraction failed: {reason.value}")
        self.reason = reason
        self.raw_reply = raw_reply


async def get_recommendations(profile: ProfileIntake) -> RecommendationsResponse:
    prompt = prompt_builder.build_recommendation_prompt(
        profile, count=settings.recommendation_count
    )
    raw_reply = await gemini_client.generate_text(
        prompt,
        system_prompt=prompt_builder.RECOMMENDATION_SYSTEM_PROMPT,
        expect_json=True,
    )
    if raw_reply is None:
        raise LLMUnavailableError("Gemini unavailable for recommendations")

    reply = interpret(raw_reply, expect_json=True)
    recommendations, reason = recommendations_from(reply)
    if reason is not None:
        logger.error(
            "Could not extract recommendations (%s). Raw reply: %r",
            reason.value, raw_reply[:_PREVIEW_CHARS],
        )
        raise RecommendationError(reason, raw_reply)

    logger.info("Extracted %d recommendations", len(recommendations))

    history = [
        ChatMessage(
            sender="user",
            text="Here is my profile for career recommendations:\n"
            + prompt_builder.describe_profile(profile),
        ),
        ChatMessage(
            sender="ai",
            text="Based on your profile, here are some recommendations: "
            + json.dumps([r.model_dump() for r in recommendations], indent=2),
        ),
    ]
    return RecommendationsResponse(recommendations=recommendations, history=history)
