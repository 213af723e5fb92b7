"""Career chat: forwards the transcript to Gemini and formats the reply."""

import logging

from models.requests import ChatMessage
from models.responses import ChatResponse
from services import gemini_client, prompt_builder
from services.gemini_client import LLMUnavailableError
from services.structured_extractor import interpret

logger = logging.getLogger(__name__)

MAX_HISTORY_MESSAGES = 20


async def send_message(
    message: str,
    history: list[ChatMessage] | None = None,
    category: str = "",
) -> ChatResponse:
    """Send one user message with prior transcript; raises ValueError on blank input."""
    if not message.strip():
        raise ValueError("Message must not be empty")

    # Oldest turns are dropped first
    recent = (history or [])[-MAX_HISTORY_MESSAGES:]
    reply = await gemini_client.generate_text(
        message,
        system_prompt=prompt_builder.build_chat_system_prompt(category),
        history=[(m.sender, m.text) for m in recent],
    )
    if reply is None:
        raise LLMUnavailableError("Gemini unavailable for chat")

    prose = interpret(reply, expect_json=False)
    if not prose.blocks:
        logger.warning("Chat reply produced no display blocks (%d chars)", len(reply))

    return ChatResponse(response=prose.text, blocks=prose.blocks, category=category)
