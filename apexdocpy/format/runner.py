"""Format runner over every doc comment in a source file."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from apexdocpy.casing import CodeNormalizer
from apexdocpy.diagnostics import Diagnostic
from apexdocpy.doc import (
    DocCommentResult,
    comment_indent_columns,
    normalize_doc_comment,
    normalize_doc_comment_code,
)
from apexdocpy.format.options import FormatMode, FormatOptions
from apexdocpy.format.results import FormatRunResult
from apexdocpy.lexer import Lexer, Token, token_text

logger = logging.getLogger(__name__)


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    normalizer: CodeNormalizer | None = None,
) -> FormatRunResult:
    """Normalize the doc comments of one source text.

    Only comments that start a line (nothing but whitespace before `/**`) are
    rewritten; trailing comments after code and unterminated comments are left
    as they are. Diagnostics are reported at file offsets.
    """
    resolved_options = options or FormatOptions()
    lexer = Lexer(text)
    tokens = lexer.lex()
    diagnostics: list[Diagnostic] = list(lexer.diagnostics)
    newline = "\r\n" if "\r\n" in text else "\n"

    pieces: list[str] = []
    cursor = 0
    comment_count = 0
    changed_comment_count = 0
    for token in tokens:
        if not _is_formattable_comment(token):
            continue
        line_start = text.rfind("\n", 0, token.range.start) + 1
        prefix = text[line_start : token.range.start]
        if prefix.strip():
            continue

        comment_count += 1
        value = token_text(text, token)
        context = resolved_options.context_for(comment_indent_columns(prefix, resolved_options.tab_width))
        if resolved_options.mode == FormatMode.CODE_ONLY:
            result = normalize_doc_comment_code(value, context, normalizer=normalizer)
        else:
            result = normalize_doc_comment(value, context, normalizer=normalizer)

        diagnostics.extend(diagnostic.shifted(token.range.start) for diagnostic in result.diagnostics)
        replacement = _replacement_text(result, newline)
        if replacement == value:
            continue

        changed_comment_count += 1
        pieces.append(text[cursor : token.range.start])
        pieces.append(replacement)
        cursor = token.range.end

    pieces.append(text[cursor:])
    formatted_text = "".join(pieces)
    logger.debug(
        "formatted %d doc comments, %d changed",
        comment_count,
        changed_comment_count,
    )
    return FormatRunResult(
        source_text=text,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=formatted_text != text,
        comment_count=comment_count,
        changed_comment_count=changed_comment_count,
    )


def format_file(
    path: Path,
    options: FormatOptions | None = None,
    *,
    normalizer: CodeNormalizer | None = None,
    write: bool = False,
) -> FormatRunResult:
    """Format one file. A leading UTF-8 BOM is kept out of the formatter and restored on write."""
    decoded = path.read_bytes().decode("utf-8")
    had_bom = decoded.startswith("\ufeff")
    text = decoded[1:] if had_bom else decoded

    result = run_format(text, options, normalizer=normalizer)
    if write and result.changed:
        output = f"\ufeff{result.formatted_text}" if had_bom else result.formatted_text
        path.write_bytes(output.encode("utf-8"))
        logger.info("wrote %s", path)

    return replace(result, path=path, had_bom=had_bom)


def _is_formattable_comment(token: Token) -> bool:
    return token.is_doc_comment() and token.is_terminated()


def _replacement_text(result: DocCommentResult, newline: str) -> str:
    if newline == "\n":
        return result.text
    return result.text.replace("\r\n", "\n").replace("\n", newline)
