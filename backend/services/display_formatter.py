"""Prose reply formatting: typed display blocks and inline markup stripping."""

import re

from models.schemas.display_block import (
    BulletBlock,
    DisplayBlock,
    HeaderBlock,
    NumberedBlock,
    ParagraphBlock,
)

# Inline markup. Bold must run before italic since both use '*'.
FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")
BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
ITALIC_RE = re.compile(r"\*(?!\s)(.+?)(?<!\s)\*")
INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
LINK_RE = re.compile(r"\[([^\]\n]*)\]\([^)\n]*\)")
BLANK_RUN_RE = re.compile(r"\n(?:[ \t]*\n)+")

# Line classification
# Content is optional so a bare marker ("# ", "1. ") is recognized and dropped
HEADER_RE = re.compile(r"^(#{1,3})(?:\s+(.*))?$")
BULLET_RE = re.compile(r"^[-*+•](?:\s+(.*))?$")
NUMBERED_RE = re.compile(r"^\d+\.(?:\s+(.*))?$")
TABLE_SEPARATOR_RE = re.compile(r"^[|\-:\s]+$")
HORIZONTAL_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,})$")
FENCE_MARKER_RE = re.compile(r"^```[\w+-]*$")


def _strip_once(text: str) -> str:
    text = FENCED_CODE_RE.sub("", text)
    text = BOLD_RE.sub(r"\1", text)
    text = ITALIC_RE.sub(r"\1", text)
    text = INLINE_CODE_RE.sub(r"\1", text)
    text = LINK_RE.sub(r"\1", text)
    text = BLANK_RUN_RE.sub("\n", text)
    return text.strip()


def strip_inline_markup(text: str) -> str:
    """Remove markdown emphasis, code, and link syntax, keeping the visible text.

    Passes repeat until nothing changes, so nested markers such as
    ``***x***`` or ``[**x**](url)`` are fully unwrapped and the result is
    stable under a second call. Every pass that changes the text shortens
    it, so the loop terminates.
    """
    if not text:
        return ""
    current = text
    while True:
        stripped = _strip_once(current)
        if stripped == current:
            return stripped
        current = stripped


def _is_skippable(line: str) -> bool:
    return bool(
        TABLE_SEPARATOR_RE.match(line)
        or HORIZONTAL_RULE_RE.match(line)
        or FENCE_MARKER_RE.match(line)
    )


def format_blocks(text: str) -> list[DisplayBlock]:
    """Split a prose reply into header, bullet, numbered and paragraph blocks.

    Numbered items get their own increasing display index; the number the
    model wrote is discarded since models often restart or skip numbers.
    Lines whose content is empty once markup is stripped produce no block.
    """
    blocks: list[DisplayBlock] = []
    if not text:
        return blocks

    next_index = 1
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or _is_skippable(stripped):
            continue

        header = HEADER_RE.match(stripped)
        if header:
            content = strip_inline_markup(header.group(2) or "")
            if content:
                blocks.append(HeaderBlock(text=content, level=len(header.group(1))))
            continue

        bullet = BULLET_RE.match(stripped)
        if bullet:
            content = strip_inline_markup(bullet.group(1) or "")
            if content:
                blocks.append(BulletBlock(text=content))
            continue

        numbered = NUMBERED_RE.match(stripped)
        if numbered:
            content = strip_inline_markup(numbered.group(1) or "")
            if content:
                blocks.append(NumberedBlock(text=content, index=next_index))
                next_index += 1
            continue

        content = strip_inline_markup(stripped)
        if content:
            blocks.append(ParagraphBlock(text=content))

    return blocks


def blocks_to_text(blocks: list[DisplayBlock]) -> str:
    """Plain-text rendering of blocks, one per line."""
    lines = []
    for block in blocks:
        if isinstance(block, BulletBlock):
            lines.append(f"• {block.text}")
        elif isinstance(block, NumberedBlock):
            lines.append(f"{block.index}. {block.text}")
        else:
            lines.append(block.text)
    return "\n".join(lines)
