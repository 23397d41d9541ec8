"""Data models for pumlformat."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LineKind(Enum):
    """Lexical classification of a single diagram line.

    Attributes:
        BLANK: Empty after stripping; emitted without indentation.
        COMMENT: Starts with a single quote; indented but never changes depth.
        PLAIN: Matches neither rule set.
        OPENER: Opens a block; depth grows after the line.
        CLOSER: Closes a block; depth shrinks before the line.
        BRANCH: Matches both rule sets (``else``/``elseif``); emitted one
            level out, then reopens the block.
    """

    BLANK = "blank"
    COMMENT = "comment"
    PLAIN = "plain"
    OPENER = "opener"
    CLOSER = "closer"
    BRANCH = "branch"

    @property
    def opens_block(self) -> bool:
        return self in (LineKind.OPENER, LineKind.BRANCH)

    @property
    def closes_block(self) -> bool:
        return self in (LineKind.CLOSER, LineKind.BRANCH)


@dataclass(frozen=True)
class ClassifiedLine:
    """A stripped line paired with its classification.

    Attributes:
        content: Line text with surrounding whitespace removed.
        kind: Classification of `content`.
    """

    content: str
    kind: LineKind


@dataclass
class IndentState:
    """Nesting depth threaded through a single formatting pass.

    Attributes:
        depth: Number of currently open blocks, never negative.
    """

    depth: int = 0
