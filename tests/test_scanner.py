import pytest

from apexdocpy.doc import (
    comment_indent_columns,
    is_doc_comment,
    normalize_comment_end,
    normalize_comment_start,
    split_body_lines,
    strip_code_gutter,
    strip_gutter,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("/**\n * Hello\n */", True),
        ("  /**\n * Hello\n */  ", True),
        ("/**\n */", False),
        ("/** */", False),
        ("/**/", False),
        ("/*\n * plain\n */", False),
        ("/**\n * never closed\n", False),
    ],
)
def test_is_doc_comment(text: str, expected: bool) -> None:
    assert is_doc_comment(text) is expected


def test_body_line_offsets_point_into_the_comment() -> None:
    value = "/**\n * Hello\n *   indented code\n */"

    lines = split_body_lines(value)

    assert [line.text for line in lines] == ["Hello", "  indented code"]
    for line in lines:
        assert value[line.start : line.end] == line.text
    assert value[lines[1].content_range.start : lines[1].content_range.end] == "indented code"


def test_opener_and_closer_text_is_body_content() -> None:
    value = "/** First line\n * middle\n * last */"

    lines = split_body_lines(value)

    assert [line.content for line in lines] == ["First line", "middle", "last"]
    assert value[lines[0].start : lines[0].end] == "First line"


def test_blank_gutter_lines_are_kept_as_blank_body_lines() -> None:
    lines = split_body_lines("/**\n * a\n *\n * b\n */")

    assert [line.is_blank for line in lines] == [False, True, False]


def test_crlf_line_endings_are_not_part_of_body_text() -> None:
    lines = split_body_lines("/**\r\n * a\r\n * b\r\n */")

    assert [line.text for line in lines] == ["a", "b"]


def test_strip_gutter_views() -> None:
    assert strip_gutter("   *  text  ") == "text"
    assert strip_gutter(" ** starred") == "starred"
    assert strip_code_gutter(" *     indented()") == "    indented()"
    assert strip_code_gutter("no gutter") == "no gutter"


def test_delimiter_normalization() -> None:
    assert normalize_comment_start("/*** Title") == "/** Title"
    assert normalize_comment_start("  /**** x") == "  /** x"
    assert normalize_comment_start("/** x") == "/** x"
    assert normalize_comment_end("text **/") == "text */"
    assert normalize_comment_end(" ***/") == " */"
    assert normalize_comment_end(" */") == " */"


def test_comment_indent_columns_expands_tabs() -> None:
    assert comment_indent_columns("    ", 2) == 4
    assert comment_indent_columns("\t", 4) == 4
    assert comment_indent_columns("\t  ", 4) == 6
    assert comment_indent_columns("", 2) == 0
