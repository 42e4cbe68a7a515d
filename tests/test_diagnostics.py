import pytest

from apexdocpy.diagnostics import (
    DOC_CODE_NORMALIZER_FAILED,
    DOC_UNTERMINATED_CODE_BLOCK,
    LEXER_UNTERMINATED_COMMENT,
    collect_diagnostics,
    format_diagnostic,
    has_errors,
    summarize,
)
from apexdocpy.text import TextRange, slice_text_range


def test_diagnostic_code_builds_record_with_defaults() -> None:
    diagnostic = DOC_UNTERMINATED_CODE_BLOCK.at(TextRange(3, 9))

    assert diagnostic.code == "DOC_UNTERMINATED_CODE_BLOCK"
    assert diagnostic.severity == "warning"
    assert diagnostic.category == "doc"
    assert diagnostic.message == DOC_UNTERMINATED_CODE_BLOCK.message


def test_shifted_moves_range_only() -> None:
    diagnostic = DOC_CODE_NORMALIZER_FAILED.at(TextRange(2, 4), message="custom")

    shifted = diagnostic.shifted(10)

    assert shifted.range == TextRange(12, 14)
    assert shifted.message == "custom"
    assert diagnostic.range == TextRange(2, 4)


def test_has_errors_ignores_warnings() -> None:
    warning = DOC_UNTERMINATED_CODE_BLOCK.at(TextRange(0, 1))
    error = LEXER_UNTERMINATED_COMMENT.at(TextRange(0, 1))

    assert has_errors([warning]) is False
    assert has_errors(collect_diagnostics([warning], [error])) is True


def test_summarize_counts_per_code() -> None:
    diagnostics = [
        DOC_UNTERMINATED_CODE_BLOCK.at(TextRange(0, 1)),
        LEXER_UNTERMINATED_COMMENT.at(TextRange(0, 1)),
        DOC_UNTERMINATED_CODE_BLOCK.at(TextRange(5, 6)),
    ]

    assert summarize(diagnostics) == {
        "DOC_UNTERMINATED_CODE_BLOCK": 2,
        "LEXER_UNTERMINATED_COMMENT": 1,
    }


def test_format_diagnostic_reports_line_and_column() -> None:
    source = "class A {\n  /** x"
    diagnostic = LEXER_UNTERMINATED_COMMENT.at(TextRange(12, len(source)))

    assert format_diagnostic(diagnostic, source, path="A.cls") == (
        "A.cls:2:3: ERROR LEXER_UNTERMINATED_COMMENT Unterminated block comment."
    )


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError):
        TextRange(-1, 2)
    with pytest.raises(ValueError):
        TextRange(5, 2)

    assert TextRange.at(4, 3) == TextRange(4, 7)
    assert TextRange(1, 3).cover(TextRange(6, 8)) == TextRange(1, 8)
    assert TextRange(1, 3).ordering(TextRange(3, 5)) == -1
    assert slice_text_range("hello world", TextRange(6, 11)) == "world"
