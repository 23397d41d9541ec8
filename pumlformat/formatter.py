"""Indentation formatting for PlantUML text."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .classifier import classify_lines
from .constants import BLANK_RUN_PATTERN, DEFAULT_INDENT_SIZE, DEFAULT_MAX_LINE_LENGTH
from .exceptions import InvalidIndentSizeError
from .models import ClassifiedLine, IndentState, LineKind

logger = logging.getLogger(__name__)


def collapse_blank_lines(text: str) -> str:
    """Trim a document and collapse runs of blank lines.

    Any run of two or more whitespace-only lines becomes a single empty line.
    A lone blank line is kept as it is.

    Args:
        text: Raw document text.

    Returns:
        str: Trimmed text with blank-line runs collapsed.

    Examples:
        collapse_blank_lines("\\n\\na\\n\\n\\n\\nb\\n")  # "a\\n\\nb"
        collapse_blank_lines("a\\n\\nb")  # "a\\n\\nb"
    """
    return BLANK_RUN_PATTERN.sub("\n\n", text.strip())


def _leave_block(state: IndentState) -> None:
    # Closing at depth 0 is a no-op
    state.depth = max(state.depth - 1, 0)


def _enter_block(state: IndentState) -> None:
    state.depth += 1


def emit_lines(lines: Iterable[ClassifiedLine], indent_size: int) -> str:
    """Render classified lines with depth-based indentation.

    Closers are emitted one level out from the block they close; openers
    push the lines after them one level in. Branch lines do both, so they
    sit level with the opener while their body stays indented.

    Args:
        lines: Classified lines in document order.
        indent_size: Number of spaces per nesting level.

    Returns:
        str: Newline-joined output ending with exactly one newline.
    """
    state = IndentState()
    formatted_lines = []

    for line in lines:
        if line.kind is LineKind.BLANK:
            formatted_lines.append("")
            continue

        if line.kind.closes_block:
            _leave_block(state)

        logger.debug("line: %s, indent_level: %d", line.content, state.depth)
        formatted_lines.append(" " * (state.depth * indent_size) + line.content)

        if line.kind.opens_block:
            _enter_block(state)

    output = "\n".join(formatted_lines)
    if not output.endswith("\n"):
        output += "\n"
    return output


def format_plantuml(
    text: str,
    indent_size: int = DEFAULT_INDENT_SIZE,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> str:
    """Re-indent PlantUML text by lexical block nesting.

    Args:
        text: Raw PlantUML document.
        indent_size: Number of spaces per nesting level.
        max_line_length: Longest line, in characters, that will be classified.

    Returns:
        str: Formatted document ending with a single newline.

    Raises:
        InvalidIndentSizeError: If `indent_size` is not a non-negative integer.
        PatternMatchError: If a line cannot be classified, including
            `LineTooLongError` for lines over `max_line_length`. No output is
            produced in that case.

    Examples:
        format_plantuml("@startuml\\nalt\\nA-->B\\nend\\n@enduml")
        format_plantuml(source, indent_size=2)
    """
    if isinstance(indent_size, bool) or not isinstance(indent_size, int) or indent_size < 0:
        raise InvalidIndentSizeError(indent_size)

    collapsed = collapse_blank_lines(text)
    classified = classify_lines(collapsed.split("\n"), max_line_length)
    return emit_lines(classified, indent_size)
