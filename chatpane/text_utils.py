"""Separating model reasoning ("thinking") blocks from response text."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from chatpane.layout import wrap_text

_log = logging.getLogger(__name__)

_THINK_RE = re.compile(
    r"<think(?:ing)?>(.*?)</think(?:ing)?>", re.IGNORECASE | re.MULTILINE | re.DOTALL
)


@dataclass(frozen=True)
class ParsedContent:
    """Message content split into its thinking part and its response part."""

    thinking_block: str
    response_content: str
    has_thinking: bool


def parse_thinking_block(content: str) -> ParsedContent:
    """Split ``<think>``/``<thinking>`` blocks out of ``content``.

    Several blocks are joined with blank lines; empty blocks count as no thinking.
    """
    bodies = _THINK_RE.findall(content)
    if not bodies:
        return ParsedContent("", content.strip(), False)

    parts = [body.strip() for body in bodies if body.strip()]
    response = _THINK_RE.sub("", content).strip()
    _log.debug(
        "parsed thinking block: %d part(s), response length %d", len(parts), len(response)
    )
    return ParsedContent("\n\n".join(parts), response, bool(parts))


def truncate_thinking_block(content: str, max_lines: int, width: int) -> str:
    """Wrap ``content`` to ``width`` and keep at most ``max_lines`` lines.

    When lines are dropped, the last kept line is replaced by ``...``.
    """
    if not content:
        return ""

    lines = wrap_text(content, width)
    if len(lines) <= max_lines:
        return "\n".join(lines)
    if max_lines < 1:
        raise ValueError(f"max_lines must be at least 1, got {max_lines}")
    return "\n".join([*lines[: max_lines - 1], "..."])