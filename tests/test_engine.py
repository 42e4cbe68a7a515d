import logging

import pytest

from apexdocpy.diagnostics import DOC_CODE_NORMALIZER_FAILED, DOC_UNTERMINATED_CODE_BLOCK
from apexdocpy.doc import (
    HARDLINE,
    CodeUnit,
    FormattingContext,
    TextUnit,
    normalize_doc_comment,
    normalize_doc_comment_code,
    splice_code_units,
)
from tests._shared_cases import DOC_COMMENT_CASES, DocCommentCase, case_id, case_source

CONTEXTS = (
    FormattingContext(),
    FormattingContext(comment_indent=4),
    FormattingContext(print_width=30, comment_indent=4),
    FormattingContext(print_width=40, tab_width=4, use_tabs=True, comment_indent=8),
)


def _fail(code: str) -> str:
    raise RuntimeError("normalizer exploded")


def test_inline_code_sample_is_cased_and_keeps_two_line_structure() -> None:
    result = normalize_doc_comment(case_source("example_with_inline_code"))

    assert result.text == "\n".join(
        [
            "/**",
            " * Example:",
            " * {@code String name = 'test'; }",
            " */",
        ]
    )
    assert result.changed is True
    assert result.diagnostics == []


def test_group_content_is_mapped_and_spacing_preserved() -> None:
    result = normalize_doc_comment(case_source("group_tag_keeps_spacing"))

    assert result.lines == ("/**", " * @group Class   My   description", " */")


def test_unterminated_code_block_is_captured_without_raising() -> None:
    source = case_source("unterminated_code_block")

    result = normalize_doc_comment(source)

    code_units = [unit for unit in result.units if isinstance(unit, CodeUnit)]
    assert len(code_units) == 1
    code = code_units[0]
    assert code.terminated is False
    assert code.start_pos == source.index("{@code")
    assert code.end_pos == source.index("y();") + len("y();")
    assert [d.code for d in result.diagnostics] == [DOC_UNTERMINATED_CODE_BLOCK.code]
    assert result.diagnostics[0].severity == "warning"
    assert result.lines == (
        "/**",
        " * Before",
        " * {@code",
        " * if (x) {",
        " *   y();",
        " */",
    )


def test_nested_code_block_keeps_relative_indentation() -> None:
    result = normalize_doc_comment(case_source("nested_code_block"))

    assert result.lines == (
        "/**",
        " * Usage:",
        " * {@code",
        " * if (x) {",
        " *     List<String> names = new List<String>();",
        " * }",
        " * }",
        " * Trailing text.",
        " */",
    )


def test_tag_lines_are_lowercased_and_continuations_reflowed() -> None:
    result = normalize_doc_comment(case_source("tag_lines_with_continuation"))

    assert result.lines == (
        "/**",
        " * Looks up an account.",
        " *",
        " * @param accountId the id of the account to look up",
        " * @return the matching account",
        " * @throws QueryException when nothing matches",
        " */",
    )


def test_repeated_blank_lines_collapse_and_edges_are_dropped() -> None:
    result = normalize_doc_comment(case_source("repeated_blank_lines"))

    assert result.lines == ("/**", " * First paragraph.", " *", " * Second paragraph.", " */")


def test_tolerant_markers_are_normalized() -> None:
    result = normalize_doc_comment(case_source("tolerant_markers"))

    assert result.text == "/**\n * Summary line more text\n */"


def test_prose_with_inline_code_is_not_reflowed() -> None:
    source = case_source("inline_code_in_prose")

    result = normalize_doc_comment(source)

    assert result.text == source
    assert result.changed is False


def test_example_tag_keeps_nested_indentation() -> None:
    source = case_source("example_tag_keeps_indentation")

    result = normalize_doc_comment(source, FormattingContext(comment_indent=4))

    assert result.lines == (
        "/**",
        "     * @example",
        "     *   if (a) {",
        "     *       b();",
        "     *   }",
        "     */",
    )


def test_inline_code_continuation_keeps_indentation() -> None:
    source = case_source("inline_code_spans_lines")

    result = normalize_doc_comment(source)

    assert result.lines == ("/**", " * Use {@code if (x) {", " *     y();", " * } } here.", " */")
    assert result.changed is False


def test_text_after_closing_brace_becomes_its_own_line() -> None:
    result = normalize_doc_comment(case_source("code_followed_by_text"))

    assert result.lines == ("/**", " * {@code a(); }", " * then prose", " */")


def test_sentence_boundary_keeps_line_break() -> None:
    result = normalize_doc_comment(case_source("sentence_boundaries"))

    assert result.lines == (
        "/**",
        " * First sentence.",
        " * Second sentence starts here and continues.",
        " */",
    )
    assert [type(unit) for unit in result.units] == [TextUnit, TextUnit]


def test_prose_wraps_within_effective_width() -> None:
    context = FormattingContext(print_width=40, comment_indent=4)

    result = normalize_doc_comment(case_source("long_prose"), context)

    body = result.lines[1:-1]
    assert all(line.startswith("     * ") for line in body)
    assert all(len(line) - len("     * ") <= 33 for line in body)
    assert result.lines[-1] == "     */"
    words = " ".join(line.removeprefix("     * ") for line in body).split()
    assert words[0] == "Returns"
    assert words[-1] == "service."


def test_tiny_print_width_still_emits_one_word_per_line() -> None:
    source = "/**\n * alpha beta gamma\n */"

    result = normalize_doc_comment(source, FormattingContext(print_width=1))

    assert result.lines == ("/**", " * alpha beta", " * gamma", " */")


@pytest.mark.parametrize("comment_indent", [0, 4])
def test_zero_print_width_falls_back_to_minimum_width(comment_indent: int) -> None:
    source = "/**\n * alphabet betatron gammaray\n */"
    context = FormattingContext(print_width=0, comment_indent=comment_indent)

    result = normalize_doc_comment(source, context)

    indent = " " * comment_indent
    assert result.lines == (
        "/**",
        f"{indent} * alphabet",
        f"{indent} * betatron",
        f"{indent} * gammaray",
        f"{indent} */",
    )
    assert result.diagnostics == []


@pytest.mark.parametrize("source", ["/** */", "/** Single line */", "/**\n */", "/* plain\n * block\n */"])
def test_non_doc_comments_pass_through(source: str) -> None:
    result = normalize_doc_comment(source)

    assert result.text == source
    assert result.changed is False
    assert result.units == ()


def test_normalizer_failure_keeps_raw_code(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="apexdocpy.doc.engine"):
        result = normalize_doc_comment(case_source("example_with_inline_code"), normalizer=_fail)

    assert " * {@code string name = 'test'; }" in result.lines
    assert [d.code for d in result.diagnostics] == [DOC_CODE_NORMALIZER_FAILED.code]
    assert "RuntimeError" in result.diagnostics[0].message
    assert any("code normalizer failed" in record.getMessage() for record in caplog.records)


def test_injected_normalizer_is_used_for_raw_code() -> None:
    seen: list[str] = []

    def shout(code: str) -> str:
        seen.append(code)
        return code.upper()

    result = normalize_doc_comment(case_source("example_with_inline_code"), normalizer=shout)

    assert seen == ["string name = 'test';"]
    assert " * {@code STRING NAME = 'TEST'; }" in result.lines


def test_embed_formatted_code_is_taken_verbatim() -> None:
    seen: list[str] = []

    def record(code: str) -> str:
        seen.append(code)
        return code.upper()

    context = FormattingContext(is_embed_formatted=True)
    result = normalize_doc_comment(case_source("example_with_inline_code"), context, normalizer=record)

    assert seen == []
    assert " * {@code string name = 'test'; }" in result.lines


def test_doc_interleaves_hardlines() -> None:
    result = normalize_doc_comment(case_source("example_with_inline_code"))

    assert result.doc == [
        "/**",
        HARDLINE,
        " * Example:",
        HARDLINE,
        " * {@code String name = 'test'; }",
        HARDLINE,
        " */",
    ]


def test_code_only_mode_keeps_everything_but_code() -> None:
    source = "/**\n * Keep   this   spacing.\n * {@code string s; }\n */"

    result = normalize_doc_comment_code(source)

    assert result.text == "/**\n * Keep   this   spacing.\n * {@code String s; }\n */"


def test_code_only_mode_rebuilds_multi_line_sample_with_gutters() -> None:
    source = "/**\n *  Odd   text\n * {@code\n *   list<string> x;\n * }\n */"

    result = normalize_doc_comment_code(source)

    assert result.text == "/**\n *  Odd   text\n * {@code\n *   List<String> x;\n * }\n */"


def test_code_only_mode_normalizes_delimiters() -> None:
    result = normalize_doc_comment_code(case_source("tolerant_markers"))

    assert result.text == "/** Summary line\n * more text\n */"


def test_splice_skips_unchanged_and_unnormalized_units() -> None:
    source = case_source("example_with_inline_code")
    result = normalize_doc_comment(source, normalizer=lambda code: code)

    assert splice_code_units(source, result.units) == source
    assert splice_code_units(source, ()) == source


@pytest.mark.parametrize("context", CONTEXTS)
@pytest.mark.parametrize("case", DOC_COMMENT_CASES, ids=case_id)
def test_normalization_is_idempotent(case: DocCommentCase, context: FormattingContext) -> None:
    first = normalize_doc_comment(case.source, context)
    second = normalize_doc_comment(first.text, context)

    assert second.text == first.text
    assert second.changed is False


@pytest.mark.parametrize("case", DOC_COMMENT_CASES, ids=case_id)
def test_code_only_mode_is_idempotent(case: DocCommentCase) -> None:
    first = normalize_doc_comment_code(case.source)
    second = normalize_doc_comment_code(first.text)

    assert second.text == first.text
