"""Line layout helpers shared by the renderers.

Rendered fragments are lists of lines. Nesting indents every line of a
fragment; hanging a fragment after a prefix puts its first line on the
prefix line and aligns the rest under it.
"""

from __future__ import annotations

import textwrap
from enum import Enum


class CommentPosition(Enum):
    """Where a documentation comment sits relative to what it documents."""

    BEFORE = "|"
    AFTER = "^"


def nest(amount: int, lines: list[str]) -> list[str]:
    """Indent every non-blank line by ``amount`` spaces."""
    pad = " " * amount
    return [pad + line if line else line for line in lines]


def hang(prefix: str, lines: list[str]) -> list[str]:
    """Join ``prefix`` and the first line, align following lines after it."""
    if not lines:
        return [prefix]
    return [f"{prefix} {lines[0]}", *nest(len(prefix) + 1, lines[1:])]


def join_blocks(blocks: list[list[str]]) -> list[str]:
    """Concatenate fragments with one blank line between each."""
    lines: list[str] = []
    for i, block in enumerate(blocks):
        if i:
            lines.append("")
        lines.extend(block)
    return lines


def paragraph_fill(text: str, width: int) -> list[str]:
    """Greedy word wrap, words are never split.

    Args:
    ----
        text: Free text; all whitespace runs, newlines included, count as
            a single word separator.
        width: Maximum characters per line, exceeded only by a single
            word longer than the width.

    Returns:
    -------
        The wrapped lines, empty if the text has no words.

    """
    return textwrap.wrap(
        " ".join(text.split()),
        width=width,
        break_long_words=False,
        break_on_hyphens=False,
    )


def render_comment(comment: str | None, position: CommentPosition, width: int) -> list[str]:
    """Render a documentation comment.

    Args:
    ----
        comment: The comment text, may be None or blank.
        position: BEFORE renders ``-- |``, AFTER renders ``-- ^``.
        width: Text width for word wrapping.

    Returns:
    -------
        Comment lines, empty for an absent or blank comment.

    """
    if comment is None:
        return []

    lines = paragraph_fill(comment, width)
    if not lines:
        return []

    first, *rest = lines
    return [f"-- {position.value} {first}", *(f"--   {line}" for line in rest)]
