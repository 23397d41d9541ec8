"""Package-specific exception types."""

from __future__ import annotations


class FormatError(ValueError):
    """Base class for formatting-related errors.

    Represents failures of the formatting core. The core never produces
    partial output: either the whole document formats or this is raised.
    """


class PatternMatchError(FormatError):
    """Raised when a line cannot be matched against the block rules.

    Args:
        line: Stripped content of the line being classified.
        line_number: One-based index of the offending line, when known.
    """

    def __init__(self, line: str, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        super().__init__(self._build_message())

    def _location(self) -> str:
        return f"line {self.line_number}" if self.line_number is not None else "line"

    def _build_message(self) -> str:
        return f"Failed to classify {self._location()}: {self.line!r}"


class LineTooLongError(PatternMatchError):
    """Raised when a line exceeds the maximum length the classifier accepts.

    Args:
        line: Stripped content of the offending line.
        max_line_length: Maximum allowed line length in characters.
        line_number: One-based index of the offending line, when known.
    """

    def __init__(self, line: str, max_line_length: int, line_number: int | None = None):
        self.max_line_length = max_line_length
        super().__init__(line, line_number)

    def _build_message(self) -> str:
        return (
            f"Failed to classify {self._location()}: length {len(self.line)} exceeds "
            f"maximum allowed length of {self.max_line_length} characters"
        )


class InvalidIndentSizeError(FormatError):
    """Raised when the indentation width is not a non-negative integer.

    Args:
        indent_size: The rejected value.
    """

    def __init__(self, indent_size: object):
        self.indent_size = indent_size
        super().__init__(f"Indent size must be a non-negative integer, got {indent_size!r}")
