"""Best-effort recovery of JSON payloads from noisy model replies.

Models asked for "ONLY valid JSON" still wrap it in code fences, lead with
"Sure! Here you go:" or append commentary after the closing bracket. The
extractor strips fence markers, drops everything before the first ``[`` or
``{``, and if the remainder does not parse, shortens it from the right until
a prefix does.

Known limitation: when the real payload is truncated mid-value, the first
parseable prefix may be a coincidental smaller value rather than the intended
payload. Nothing here tries to tell the two apart.
"""

import json
import logging
import re
from typing import Any

from config import settings
from models.schemas.career_recommendation import CareerRecommendation
from models.schemas.interpreted_reply import (
    ExtractionFailure,
    ExtractionResult,
    InterpretedReply,
    ProseReply,
    StructuredReply,
    Unparsable,
)
from services.display_formatter import format_blocks

logger = logging.getLogger(__name__)

JSON_FENCE_RE = re.compile(r"```json[\s\S]*?```", re.IGNORECASE)
JSON_FENCE_MARKER_RE = re.compile(r"```json|```", re.IGNORECASE)
FENCE_RE = re.compile(r"```[\s\S]*?```")
JSON_START_RE = re.compile(r"[\[{]")

_CLOSERS = ("]", "}")


class InvalidShapeError(ValueError):
    """Parsed JSON is not a list of recommendation-like objects."""

    reason = ExtractionFailure.INVALID_SHAPE


def strip_code_fences(text: str) -> str:
    """Remove fence markers, keeping fenced content and surrounding text in place."""
    text = JSON_FENCE_RE.sub(lambda m: JSON_FENCE_MARKER_RE.sub("", m.group(0)), text)
    text = FENCE_RE.sub(lambda m: m.group(0).replace("```", ""), text)
    return text


def _try_parse(candidate: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(candidate)
    except ValueError:
        return False, None


def extract(text: str | None, max_chars: int | None = None) -> ExtractionResult:
    """Recover the first JSON array/object embedded in ``text``.

    ``max_chars`` caps how much of the candidate the right-truncation pass
    considers (defaults to ``settings.max_extract_chars``). The full-length
    parse is always attempted.
    """
    if not text:
        return ExtractionResult.failure(ExtractionFailure.EMPTY_REPLY)

    cleaned = strip_code_fences(text).strip()
    start = JSON_START_RE.search(cleaned)
    if start is None:
        return ExtractionResult.failure(ExtractionFailure.NO_JSON_FOUND)
    cleaned = cleaned[start.start():]

    ok, value = _try_parse(cleaned)
    if ok:
        return ExtractionResult.success(value)

    if max_chars is None:
        max_chars = settings.max_extract_chars
    limit = min(len(cleaned), max(max_chars, 0))
    if limit < len(cleaned):
        logger.warning(
            "Reply candidate is %d chars; truncation recovery limited to first %d",
            len(cleaned), limit,
        )

    # A prefix starting with '[' or '{' can only parse if it ends with a closer,
    # so the other lengths are skipped without changing which prefix wins.
    for end in range(limit, 0, -1):
        if cleaned[end - 1] not in _CLOSERS:
            continue
        ok, value = _try_parse(cleaned[:end])
        if ok:
            logger.debug("Recovered JSON by dropping %d trailing chars", len(cleaned) - end)
            return ExtractionResult.success(value)

    return ExtractionResult.failure(ExtractionFailure.UNPARSABLE_JSON)


def extract_json(text: str | None, max_chars: int | None = None) -> Any | None:
    """Return the embedded JSON value, or None when nothing could be recovered."""
    result = extract(text, max_chars=max_chars)
    return result.value if result.ok else None


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # Whole floats render like integers ("5", not "5.0")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return json.dumps(value, ensure_ascii=False)


def _normalize_item(item: Any) -> CareerRecommendation:
    if not isinstance(item, dict):
        return CareerRecommendation()

    title = item.get("title")
    description = item.get("description")
    skills = item.get("key_skills")
    return CareerRecommendation(
        title=_to_text(title) if title else "",
        description=_to_text(description) if description else "",
        key_skills=[_to_text(s) for s in skills] if isinstance(skills, list) else [],
    )


def normalize(value: Any) -> list[CareerRecommendation]:
    """Coerce a parsed JSON array into recommendations.

    Malformed elements are defaulted field by field, never dropped. Raises
    InvalidShapeError when ``value`` is not an array.
    """
    if not isinstance(value, list):
        raise InvalidShapeError(f"expected a JSON array, got {type(value).__name__}")
    return [_normalize_item(item) for item in value]


def interpret(
    text: str | None, expect_json: bool, max_chars: int | None = None
) -> InterpretedReply:
    """Classify a reply as structured JSON, display-ready prose, or unparsable."""
    if expect_json:
        result = extract(text, max_chars=max_chars)
        if result.ok:
            return StructuredReply(value=result.value)
        return Unparsable(reason=result.reason)
    return ProseReply(text=text or "", blocks=format_blocks(text or ""))


def recommendations_from(
    reply: InterpretedReply,
) -> tuple[list[CareerRecommendation], ExtractionFailure | None]:
    """Turn an interpreted reply into recommendations.

    Returns ``(recommendations, None)`` on success or ``([], reason)``. Prose
    and arrays that yield no recommendations count as INVALID_SHAPE.
    """
    if isinstance(reply, Unparsable):
        return [], reply.reason
    if isinstance(reply, ProseReply):
        return [], ExtractionFailure.INVALID_SHAPE
    try:
        recommendations = normalize(reply.value)
    except InvalidShapeError:
        return [], ExtractionFailure.INVALID_SHAPE
    if not recommendations:
        return [], ExtractionFailure.INVALID_SHAPE
    return recommendations, None


def extract_recommendations(
    text: str | None, max_chars: int | None = None
) -> tuple[list[CareerRecommendation], ExtractionFailure | None]:
    """Interpret ``text`` as JSON and normalize it in one step."""
    return recommendations_from(interpret(text, expect_json=True, max_chars=max_chars))
