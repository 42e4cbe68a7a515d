"""Doc-comment normalization entrypoints."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from apexdocpy.casing import CodeNormalizer, normalize_code_casing
from apexdocpy.diagnostics import Diagnostic
from apexdocpy.diagnostics.codes import DOC_CODE_NORMALIZER_FAILED, DOC_UNTERMINATED_CODE_BLOCK
from apexdocpy.doc.braces import CODE_TAG
from apexdocpy.doc.layout import CommentLayout
from apexdocpy.doc.options import FormattingContext
from apexdocpy.doc.reflow import DocPart, join_doc, recompose, render_units
from apexdocpy.doc.scanner import (
    gutter_prefix,
    is_doc_comment,
    normalize_comment_end,
    normalize_comment_start,
    split_body_lines,
)
from apexdocpy.doc.segmenter import segment
from apexdocpy.doc.units import CodeUnit, DocCommentUnit

logger = logging.getLogger(__name__)

_DEFAULT_GUTTER = " * "


@dataclass(frozen=True, slots=True)
class DocCommentResult:
    """Normalized comment text plus the units and diagnostics that produced it."""

    text: str
    lines: tuple[str, ...]
    units: tuple[DocCommentUnit, ...]
    diagnostics: list[Diagnostic]
    changed: bool

    @property
    def doc(self) -> list[DocPart]:
        """The normalized lines separated by `HARDLINE`."""
        return join_doc(self.lines)


def normalize_doc_comment(
    value: str,
    context: FormattingContext | None = None,
    *,
    normalizer: CodeNormalizer | None = None,
) -> DocCommentResult:
    """Re-render a `/** ... */` comment with reflowed prose and normalized code samples.

    Values that are not multi-line doc comments come back unchanged.
    """
    if not is_doc_comment(value):
        return _unchanged(value)

    resolved_context = context or FormattingContext()
    units, diagnostics = _prepare_units(value, resolved_context, normalizer)
    layout = CommentLayout.from_context(resolved_context)
    lines = tuple(recompose(render_units(units, layout.width), layout))
    text = "\n".join(lines)

    logger.debug(
        "normalized doc comment: %d units, width=%d, changed=%s",
        len(units),
        layout.width,
        text != value,
    )
    return DocCommentResult(
        text=text,
        lines=lines,
        units=units,
        diagnostics=diagnostics,
        changed=text != value,
    )


def normalize_doc_comment_code(
    value: str,
    context: FormattingContext | None = None,
    *,
    normalizer: CodeNormalizer | None = None,
) -> DocCommentResult:
    """Normalize only the `{@code}` samples of a comment, leaving everything else as written.

    Delimiters such as `/***` and `**/` are collapsed to their canonical form.
    """
    if not is_doc_comment(value):
        return _unchanged(value)

    resolved_context = context or FormattingContext()
    units, diagnostics = _prepare_units(value, resolved_context, normalizer)
    text = normalize_comment_end(normalize_comment_start(splice_code_units(value, units)))

    logger.debug("spliced code samples: %d units, changed=%s", len(units), text != value)
    return DocCommentResult(
        text=text,
        lines=tuple(text.split("\n")),
        units=units,
        diagnostics=diagnostics,
        changed=text != value,
    )


def splice_code_units(value: str, units: Sequence[DocCommentUnit]) -> str:
    """Replace each normalized code sample in `value` at its original offsets.

    Code lines are re-prefixed with the gutter of the line the sample starts on.
    Bytes outside code samples, and samples whose code did not change, are kept.
    """
    pieces: list[str] = []
    cursor = 0
    for unit in units:
        if not isinstance(unit, CodeUnit):
            continue
        if unit.normalized_code is None or unit.normalized_code == unit.raw_code:
            continue
        pieces.append(value[cursor : unit.start_pos])
        pieces.append(_rebuild_code_span(value, unit))
        cursor = unit.end_pos
    pieces.append(value[cursor:])
    return "".join(pieces)


def _prepare_units(
    value: str,
    context: FormattingContext,
    normalizer: CodeNormalizer | None,
) -> tuple[tuple[DocCommentUnit, ...], list[Diagnostic]]:
    delegate = normalizer or normalize_code_casing
    diagnostics: list[Diagnostic] = []
    units: list[DocCommentUnit] = []
    for unit in segment(split_body_lines(value)):
        if isinstance(unit, CodeUnit):
            if not unit.terminated:
                diagnostics.append(DOC_UNTERMINATED_CODE_BLOCK.at(unit.range))
            unit = _normalize_code_unit(unit, context, delegate, diagnostics)
        units.append(unit)
    return tuple(units), diagnostics


def _normalize_code_unit(
    unit: CodeUnit,
    context: FormattingContext,
    delegate: CodeNormalizer,
    diagnostics: list[Diagnostic],
) -> CodeUnit:
    if context.is_embed_formatted:
        return replace(unit, normalized_code=unit.raw_code)
    try:
        normalized = delegate(unit.raw_code)
    except Exception as exc:
        logger.warning("code normalizer failed for sample at %s: %s", unit.range.as_tuple(), exc)
        diagnostics.append(
            DOC_CODE_NORMALIZER_FAILED.at(
                unit.range,
                message=f"{DOC_CODE_NORMALIZER_FAILED.message} ({type(exc).__name__}: {exc})",
            )
        )
        return unit
    return replace(unit, normalized_code=normalized)


def _rebuild_code_span(value: str, unit: CodeUnit) -> str:
    code_lines = unit.code.split("\n")
    single_line = "\n" not in value[unit.start_pos : unit.end_pos]
    if single_line and len(code_lines) == 1:
        closing = " }" if unit.terminated else ""
        return f"{CODE_TAG} {code_lines[0].strip()}{closing}"

    gutter = _span_gutter(value, unit.start_pos)
    rebuilt = [CODE_TAG]
    rebuilt.extend(f"{gutter}{line}".rstrip() for line in code_lines)
    if unit.terminated:
        rebuilt.append(f"{gutter}}}")
    return "\n".join(rebuilt)


def _span_gutter(value: str, offset: int) -> str:
    line_start = value.rfind("\n", 0, offset) + 1
    gutter = gutter_prefix(value[line_start:offset])
    if gutter:
        return gutter if gutter.endswith(" ") else f"{gutter} "
    return _DEFAULT_GUTTER


def _unchanged(value: str) -> DocCommentResult:
    return DocCommentResult(
        text=value,
        lines=tuple(value.split("\n")),
        units=(),
        diagnostics=[],
        changed=False,
    )
