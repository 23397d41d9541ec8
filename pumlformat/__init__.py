"""
pumlformat: indentation formatter for PlantUML diagrams.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    pumlformat diagram.puml -o diagram.puml
    cat diagram.puml | pumlformat --indent 2

Library Usage:
    from pathlib import Path
    from pumlformat import format_plantuml

    source = Path("diagram.puml").read_text()
    formatted = format_plantuml(source, indent_size=4)
"""

__version__ = "0.1.0"

from .classifier import classify_line, classify_lines
from .exceptions import FormatError, InvalidIndentSizeError, LineTooLongError, PatternMatchError
from .formatter import collapse_blank_lines, emit_lines, format_plantuml
from .models import ClassifiedLine, IndentState, LineKind

__all__ = [
    # Core functionality
    "format_plantuml",
    "collapse_blank_lines",
    "classify_line",
    "classify_lines",
    "emit_lines",
    # Data models
    "ClassifiedLine",
    "IndentState",
    "LineKind",
    # Exceptions
    "FormatError",
    "InvalidIndentSizeError",
    "LineTooLongError",
    "PatternMatchError",
    # Version
    "__version__",
]
