"""Constants used across the pumlformat package."""

from __future__ import annotations

import re

DEFAULT_INDENT_SIZE = 4
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_MAX_LINE_LENGTH = 100_000

# Block rules, checked case-insensitively against stripped line content.
# Each rule is a keyword prefix plus a closing-character suffix. `else`/`elseif`
# appear in both keyword tables: they close one branch and open the next.
BLOCK_OPENER_KEYWORDS = (
    "if",
    "while",
    "fork",
    "package",
    "namespace",
    r"note(?!.*:)",
    "group",
    "loop",
    "repeat",
    "alt",
    "opt",
    "critical",
    "else",
    "elseif",
)
BLOCK_CLOSER_KEYWORDS = (
    "endif",
    "endwhile",
    "endfork",
    r"end\s*note",
    "endgroup",
    "end",
    "stop",
    "endrepeat",
    "endpackage",
    "endnamespace",
    "else",
    "elseif",
)
# Openers also include any line with a word character before a trailing `{`
BLOCK_OPENER_SUFFIX = "{"
BLOCK_CLOSER_SUFFIX = "}"

# Anchored with `match`; no nested quantifiers, so matching is linear in line length
BLOCK_OPENER_PATTERN = re.compile("(?:" + "|".join(BLOCK_OPENER_KEYWORDS) + ")", re.IGNORECASE)
BLOCK_CLOSER_PATTERN = re.compile(
    "(?:" + "|".join(BLOCK_CLOSER_KEYWORDS) + r")\b", re.IGNORECASE
)
WORD_CHAR_PATTERN = re.compile(r"\w")

# A newline followed by two or more whitespace-only lines
BLANK_RUN_PATTERN = re.compile(r"\n(?:[^\S\n]*\n){2,}")

COMMENT_PREFIX = "'"

# Configuration discovery
CONFIG_TABLE = "pumlformat"
PYPROJECT_FILENAME = "pyproject.toml"
DOTFILE_FILENAME = ".pumlformat.toml"

# Environment
MAX_FILE_SIZE_ENV_VAR = "PUMLFORMAT_MAX_FILE_SIZE"
LOG_LEVEL_ENV_VAR = "PUMLFORMAT_LOG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
