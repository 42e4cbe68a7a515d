"""Segment doc-comment body lines into typed units.

Segmentation is a fold over the body lines: `step` maps a `SegmenterState`
and one line to the next state, and `finish` closes whatever is still open.
States are immutable, so any prefix of a comment can be inspected in
isolation.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from functools import reduce
from typing import Final, TypeAlias

from apexdocpy.doc.braces import CODE_TAG, starts_code_block, track_braces
from apexdocpy.doc.scanner import BodyLine
from apexdocpy.doc.tags import match_tag
from apexdocpy.doc.units import (
    AnnotationUnit,
    CodeUnit,
    DocCommentUnit,
    ParagraphBreakUnit,
    TextUnit,
)
from apexdocpy.text import TextRange

_SENTENCE_END: Final[tuple[str, ...]] = (".", "!", "?")
_LIST_ITEM_RE: Final[re.Pattern[str]] = re.compile(r"^(?:[-+]|\d+[.)])(?:\s|$)")


@dataclass(frozen=True, slots=True)
class _OpenCode:
    lines: tuple[str, ...]
    start: int
    end: int


_Pending: TypeAlias = TextUnit | ParagraphBreakUnit | AnnotationUnit | _OpenCode | None


@dataclass(frozen=True, slots=True)
class SegmenterState:
    brace_count: int = 0
    in_code_block: bool = False
    units: tuple[DocCommentUnit, ...] = ()
    pending: _Pending = None


def segment(lines: Iterable[BodyLine]) -> tuple[DocCommentUnit, ...]:
    """Segment gutter-stripped body lines into units in offset order."""
    return finish(reduce(step, lines, SegmenterState()))


def step(state: SegmenterState, line: BodyLine) -> SegmenterState:
    if state.in_code_block and isinstance(state.pending, _OpenCode):
        return _step_code(state, state.pending, line, opening=False)

    content = line.content
    if starts_code_block(content):
        tag_index = line.text.index(CODE_TAG)
        tag_start = line.start + tag_index
        block = _OpenCode(lines=(), start=tag_start, end=tag_start + len(CODE_TAG))
        opened = replace(_flush(state), brace_count=1, in_code_block=True, pending=block)
        return _step_code(opened, block, line.tail(tag_index + len(CODE_TAG)), opening=True)

    pending = state.pending
    if not content:
        if isinstance(pending, ParagraphBreakUnit):
            return replace(state, pending=ParagraphBreakUnit(pending.range.cover(line.range)))
        return replace(_flush(state), pending=ParagraphBreakUnit(line.range))

    content_range = line.content_range
    tag = match_tag(content)
    if tag is not None:
        name, rest = tag
        return replace(_flush(state), pending=AnnotationUnit(name=name, content=rest, range=content_range))

    if isinstance(pending, AnnotationUnit) and (
        pending.keeps_layout or not _starts_new_unit(_last_line(pending), content)
    ):
        kept = line.text.rstrip() if pending.keeps_layout else content
        return replace(
            state,
            pending=replace(
                pending,
                continuation=pending.continuation + (kept,),
                range=pending.range.cover(content_range),
            ),
        )
    if isinstance(pending, TextUnit) and not _starts_new_unit(pending.lines[-1], content):
        kept = line.text.rstrip() if pending.keeps_layout else content
        return replace(
            state,
            pending=TextUnit(lines=pending.lines + (kept,), range=pending.range.cover(content_range)),
        )
    return replace(_flush(state), pending=TextUnit(lines=(content,), range=content_range))


def finish(state: SegmenterState) -> tuple[DocCommentUnit, ...]:
    """Close the open unit; an unclosed code block becomes an unterminated `CodeUnit`."""
    if state.in_code_block and isinstance(state.pending, _OpenCode):
        pending = state.pending
        unit = CodeUnit(
            raw_code=_join_code(pending.lines),
            range=TextRange(pending.start, pending.end),
            terminated=False,
        )
        return state.units + (unit,)
    return _flush(state).units


def dump_units(units: Iterable[DocCommentUnit], value: str | None = None) -> None:
    """Print a unit sequence for debugging."""
    for index, unit in enumerate(units):
        kind = type(unit).__name__
        match unit:
            case TextUnit():
                detail = unit.rendered
            case CodeUnit():
                detail = f"terminated={unit.terminated} code={unit.code!r}"
            case AnnotationUnit():
                detail = f"@{unit.name} {unit.content!r} continuation={list(unit.continuation)!r}"
            case _:
                detail = ""
        print(f"{index:03d} {kind:<18} range={unit.range.as_tuple()} {detail}")
        if value is not None:
            print(f"    source={value[unit.range.start : unit.range.end]!r}")


def _step_code(state: SegmenterState, pending: _OpenCode, line: BodyLine, *, opening: bool) -> SegmenterState:
    brace = track_braces(line.text, state.brace_count)

    if not brace.will_end or brace.end is None:
        lines = pending.lines
        end = pending.end
        if opening:
            if line.text.strip():
                lines = lines + (line.text.strip(),)
        else:
            lines = lines + (line.text.rstrip(),)
        if line.text.strip():
            end = line.content_range.end
        return replace(
            state,
            brace_count=brace.count,
            pending=_OpenCode(lines=lines, start=pending.start, end=end),
        )

    piece = line.text[: brace.end - 1]
    lines = pending.lines
    if piece.strip():
        lines = lines + ((piece.strip() if opening else piece.rstrip()),)
    unit = CodeUnit(
        raw_code=_join_code(lines),
        range=TextRange(pending.start, line.start + brace.end),
        terminated=True,
    )
    closed = replace(
        state,
        brace_count=0,
        in_code_block=False,
        units=state.units + (unit,),
        pending=None,
    )
    trailing = line.tail(brace.end)
    if trailing.is_blank:
        return closed
    return step(closed, trailing)


def _flush(state: SegmenterState) -> SegmenterState:
    pending = state.pending
    if pending is None or isinstance(pending, _OpenCode):
        return state
    return replace(state, units=state.units + (pending,), pending=None)


def _starts_new_unit(previous: str, content: str) -> bool:
    if previous.endswith(_SENTENCE_END) and content[:1].isupper():
        return True
    return _LIST_ITEM_RE.match(content) is not None


def _last_line(unit: AnnotationUnit) -> str:
    if unit.continuation:
        return unit.continuation[-1]
    return unit.content


def _join_code(lines: tuple[str, ...]) -> str:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return "\n".join(lines[start:end])
