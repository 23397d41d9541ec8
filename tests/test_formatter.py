from __future__ import annotations

import logging
import textwrap
import time

import pytest

from pumlformat.exceptions import InvalidIndentSizeError, LineTooLongError, PatternMatchError
from pumlformat.formatter import collapse_blank_lines, emit_lines, format_plantuml
from pumlformat.models import ClassifiedLine, LineKind


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


def test_trims_document_and_surrounding_blank_lines():
    source = "\n    \n    @startuml\nactor User\n@enduml\n\n\n\n"

    assert format_plantuml(source, 4) == "@startuml\nactor User\n@enduml\n"


def test_indents_alt_body():
    source = "@startuml\nalt\nA-->B:TODO\nend\n@enduml\n"

    assert format_plantuml(source, 4) == "@startuml\nalt\n    A-->B:TODO\nend\n@enduml\n"


def test_collapses_whitespace_only_run_and_appends_newline():
    source = "@startuml\nalt\nA-->B:TODO\n   \n  \n       \nend\n@enduml"

    assert format_plantuml(source, 4) == "@startuml\nalt\n    A-->B:TODO\n\nend\n@enduml\n"


def test_commented_out_block_is_left_at_depth_zero():
    source = "@startuml\n\n' class Test <<Interface>>{\n'     + test()\n' }\n\n@enduml"

    assert format_plantuml(source, 4) == source + "\n"


def test_nested_blocks_and_branches():
    source = _dedent(
        """
        @startuml
        alt success
        loop 3 times
        A -> B
        end
        else failure
        B -> A
        end
        @enduml
        """
    )

    assert format_plantuml(source) == _dedent(
        """
        @startuml
        alt success
            loop 3 times
                A -> B
            end
        else failure
            B -> A
        end
        @enduml
        """
    )


def test_activity_if_elseif_else():
    source = _dedent(
        """
        start
        if (a?) then (yes)
        :one;
        elseif (b?) then (yes)
        :two;
        else (no)
        :three;
        endif
        stop
        """
    )

    assert format_plantuml(source, 2) == _dedent(
        """
        start
        if (a?) then (yes)
          :one;
        elseif (b?) then (yes)
          :two;
        else (no)
          :three;
        endif
        stop
        """
    )


def test_brace_blocks():
    source = "class Foo {\n+bar()\npackage inner {\nclass Baz\n}\n}\n"

    assert format_plantuml(source) == (
        "class Foo {\n    +bar()\n    package inner {\n        class Baz\n    }\n}\n"
    )


def test_note_block_form_indents_body():
    source = "note right of Alice\nremember this\nend note\nAlice -> Bob\n"

    assert format_plantuml(source) == (
        "note right of Alice\n    remember this\nend note\nAlice -> Bob\n"
    )


def test_note_inline_form_does_not_indent():
    source = "note right: some text\nAlice -> Bob\n"

    assert format_plantuml(source) == "note right: some text\nAlice -> Bob\n"


def test_closers_at_depth_zero_do_not_go_negative():
    source = "end\n}\nendif\nalt\nA -> B\nend\n"

    assert format_plantuml(source) == "end\n}\nendif\nalt\n    A -> B\nend\n"


def test_comments_are_indented_but_keep_depth():
    source = "alt\n' end\n' alt\nA -> B\nend\n"

    assert format_plantuml(source) == "alt\n    ' end\n    ' alt\n    A -> B\nend\n"


def test_existing_indentation_is_replaced():
    source = "alt\n\t\t   A -> B\n        end\n"

    assert format_plantuml(source) == "alt\n    A -> B\nend\n"


def test_keywords_match_case_insensitively():
    assert format_plantuml("ALT\nA -> B\nEND") == "ALT\n    A -> B\nEND\n"


def test_crlf_input_is_normalized():
    assert format_plantuml("alt\r\nA -> B\r\nend\r\n") == "alt\n    A -> B\nend\n"


@pytest.mark.parametrize(
    ("indent_size", "expected"),
    [
        (0, "alt\nA -> B\nend\n"),
        (1, "alt\n A -> B\nend\n"),
        (2, "alt\n  A -> B\nend\n"),
        (8, "alt\n        A -> B\nend\n"),
    ],
)
def test_indent_size_is_configurable(indent_size: int, expected: str):
    assert format_plantuml("alt\nA -> B\nend", indent_size) == expected


@pytest.mark.parametrize("source", ["", "   ", "\n\n\n", " \t\n \n"])
def test_empty_documents_format_to_single_newline(source: str):
    assert format_plantuml(source) == "\n"


def test_single_blank_line_is_preserved():
    assert format_plantuml("A -> B\n\nB -> A") == "A -> B\n\nB -> A\n"
    assert format_plantuml("A -> B\n   \nB -> A") == "A -> B\n\nB -> A\n"


def test_every_blank_run_is_collapsed():
    source = "a\n\n\nb\n \n \n \nc\n\nd"

    assert format_plantuml(source) == "a\n\nb\n\nc\n\nd\n"


@pytest.mark.parametrize("indent_size", [-1, True, 1.5, "4", None])
def test_rejects_invalid_indent_size(indent_size):
    with pytest.raises(InvalidIndentSizeError):
        format_plantuml("alt\nend", indent_size)  # type: ignore[arg-type]


def test_format_fails_without_partial_output():
    source = "\n\n@startuml\nalt\n" + "A" * 50 + "\nend\n@enduml\n"

    with pytest.raises(PatternMatchError) as excinfo:
        format_plantuml(source, max_line_length=20)

    assert isinstance(excinfo.value, LineTooLongError)
    assert excinfo.value.line_number == 3


def test_long_sprite_data_line_formats_quickly():
    source = "@startuml\nsprite $foo [16x16/16z] {\n" + "a" * 100_000 + "\n}\n@enduml\n"

    start = time.perf_counter()
    formatted = format_plantuml(source)
    elapsed = time.perf_counter() - start

    assert formatted.splitlines()[2] == "    " + "a" * 100_000
    assert elapsed < 2.0


def test_line_length_limit_is_configurable():
    assert format_plantuml("alt\n" + "x" * 30 + "\nend", max_line_length=30).endswith("end\n")
    with pytest.raises(LineTooLongError):
        format_plantuml("alt\n" + "x" * 31 + "\nend", max_line_length=30)


def test_collapse_blank_lines():
    assert collapse_blank_lines("\n\n  a\n\n\n\nb  \n\n") == "a\n\nb"
    assert collapse_blank_lines("a\n \t \n\t\nb") == "a\n\nb"
    assert collapse_blank_lines("a\n  \nb") == "a\n  \nb"
    assert collapse_blank_lines("") == ""


def test_emit_lines_applies_branch_after_floor():
    lines = [
        ClassifiedLine("else", LineKind.BRANCH),
        ClassifiedLine("A -> B", LineKind.PLAIN),
        ClassifiedLine("", LineKind.BLANK),
        ClassifiedLine("' note", LineKind.COMMENT),
        ClassifiedLine("end", LineKind.CLOSER),
    ]

    assert emit_lines(lines, 3) == "else\n   A -> B\n\n   ' note\nend\n"


def test_emit_lines_with_no_lines():
    assert emit_lines([], 4) == "\n"


def test_logs_indent_level_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="pumlformat.formatter")

    format_plantuml("alt\nA -> B\nend")

    assert "line: A -> B, indent_level: 1" in caplog.text
    assert "line: end, indent_level: 0" in caplog.text
