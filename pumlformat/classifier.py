"""Lexical line classification for PlantUML text."""

from __future__ import annotations

from collections.abc import Iterable

from .constants import (
    BLOCK_CLOSER_PATTERN,
    BLOCK_CLOSER_SUFFIX,
    BLOCK_OPENER_PATTERN,
    BLOCK_OPENER_SUFFIX,
    COMMENT_PREFIX,
    DEFAULT_MAX_LINE_LENGTH,
    WORD_CHAR_PATTERN,
)
from .exceptions import LineTooLongError
from .models import ClassifiedLine, LineKind


def _is_closer(line: str) -> bool:
    return line.endswith(BLOCK_CLOSER_SUFFIX) or BLOCK_CLOSER_PATTERN.match(line) is not None


def _is_opener(line: str) -> bool:
    if BLOCK_OPENER_PATTERN.match(line) is not None:
        return True
    # An identifier-bearing line ending in `{`
    return (
        line.endswith(BLOCK_OPENER_SUFFIX)
        and WORD_CHAR_PATTERN.search(line, 0, len(line) - 1) is not None
    )


def classify_line(line: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> LineKind:
    """Classify a stripped line against the block rule tables.

    Blank and comment lines are recognised first and never reach the block
    rules. The closer and opener tests are then evaluated independently, so a
    line matching both (``else``, ``elseif``) is reported as
    `LineKind.BRANCH`. Every test runs in time linear in the line length.

    Args:
        line: Line content with surrounding whitespace already removed.
        max_line_length: Longest line, in characters, that will be classified.

    Returns:
        LineKind: Classification of the line.

    Raises:
        LineTooLongError: If the line is longer than `max_line_length`.

    Examples:
        classify_line("alt")  # LineKind.OPENER
        classify_line("else")  # LineKind.BRANCH
        classify_line("note right: inline")  # LineKind.PLAIN
    """
    if len(line) > max_line_length:
        raise LineTooLongError(line, max_line_length)

    if not line:
        return LineKind.BLANK

    if line.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT

    closes = _is_closer(line)
    opens = _is_opener(line)

    if closes and opens:
        return LineKind.BRANCH
    if closes:
        return LineKind.CLOSER
    if opens:
        return LineKind.OPENER
    return LineKind.PLAIN


def classify_lines(
    lines: Iterable[str], max_line_length: int = DEFAULT_MAX_LINE_LENGTH
) -> list[ClassifiedLine]:
    """Strip and classify a sequence of raw lines.

    Args:
        lines: Raw lines, with or without surrounding whitespace.
        max_line_length: Longest stripped line, in characters, that will be
            classified.

    Returns:
        list[ClassifiedLine]: One entry per input line, in order.

    Raises:
        LineTooLongError: If any line is too long; `line_number` is set to its
            one-based position.
    """
    classified = []
    for line_number, raw_line in enumerate(lines, start=1):
        content = raw_line.strip()
        if len(content) > max_line_length:
            raise LineTooLongError(content, max_line_length, line_number)
        classified.append(ClassifiedLine(content, classify_line(content, max_line_length)))
    return classified
