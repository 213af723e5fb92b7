"""Google Gemini API wrapper with error handling."""

import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

# Transcript sender -> Gemini content role
_ROLES = {"user": "user", "ai": "model"}


class LLMUnavailableError(RuntimeError):
    """Gemini is not configured or the call failed."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


def build_contents(prompt: str, history: list[tuple[str, str]] | None = None) -> list[types.Content]:
    """Turn (sender, text) pairs plus the new prompt into Gemini contents."""
    contents = [
        types.Content(role=_ROLES.get(sender, "user"), parts=[types.Part(text=text)])
        for sender, text in history or []
        if text
    ]
    contents.append(types.Content(role="user", parts=[types.Part(text=prompt)]))
    return contents


async def generate_text(
    prompt: str,
    system_prompt: str | None = None,
    history: list[tuple[str, str]] | None = None,
    expect_json: bool = False,
) -> str | None:
    """Send a prompt to Gemini and return the raw reply text.

    The reply is returned untouched; callers decide whether to run it through
    the structured extractor or the display formatter. Returns None when the
    client is not configured or the call fails.
    """
    client = get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=settings.gemini_model,
            contents=build_contents(prompt, history),
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_output_tokens,
                response_mime_type="application/json" if expect_json else None,
            ),
        )
        return response.text or ""

    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
