"""Render doc-comment units back into gutter lines."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from apexdocpy.doc.braces import CODE_TAG
from apexdocpy.doc.layout import CommentLayout
from apexdocpy.doc.tags import lowercase_tag_word, normalize_group_content
from apexdocpy.doc.units import (
    AnnotationUnit,
    CodeUnit,
    DocCommentUnit,
    ParagraphBreakUnit,
    TextUnit,
)


@dataclass(frozen=True, slots=True)
class Hardline:
    """Forced line break between the lines of a rendered comment."""

    def __repr__(self) -> str:
        return "HARDLINE"


HARDLINE: Final[Hardline] = Hardline()

DocPart: TypeAlias = str | Hardline


def wrap_words(words: Sequence[str], width: int) -> list[str]:
    """Greedy word wrap. A word longer than `width` gets a line of its own."""
    lines: list[str] = []
    current = ""
    for word in words:
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def render_text(unit: TextUnit, width: int) -> list[str]:
    if unit.keeps_layout:
        return list(unit.lines)
    return wrap_words([lowercase_tag_word(word) for word in unit.rendered.split()], width)


def render_code(unit: CodeUnit, width: int) -> list[str]:
    lines = _dedent([line.rstrip() for line in unit.code.split("\n")])
    while lines and not lines[-1]:
        lines.pop()
    while lines and not lines[0]:
        lines.pop(0)

    if not lines:
        return [f"{CODE_TAG}}}"] if unit.terminated else [CODE_TAG]
    if unit.terminated and len(lines) == 1:
        inline = f"{CODE_TAG} {lines[0].strip()} }}"
        if len(inline) <= width:
            return [inline]

    rendered = [CODE_TAG, *lines]
    if unit.terminated:
        rendered.append("}")
    return rendered


def render_annotation(unit: AnnotationUnit, width: int) -> list[str]:
    tag = unit.tag
    if unit.keeps_layout:
        content = normalize_group_content(unit.content) if tag == "group" else unit.content
        head = f"@{tag} {content}" if content else f"@{tag}"
        return [head, *unit.continuation]

    # The tag is the first word, so the first line has `len("@tag ")` less room.
    words = [f"@{tag}"]
    for line in (unit.content, *unit.continuation):
        words.extend(lowercase_tag_word(word) for word in line.split())
    return wrap_words(words, width)


def render_units(units: Iterable[DocCommentUnit], width: int) -> list[str]:
    """Body line contents (gutter not included). Blank entries are paragraph breaks."""
    contents: list[str] = []
    pending_break = False
    for unit in units:
        match unit:
            case ParagraphBreakUnit():
                pending_break = bool(contents)
                continue
            case TextUnit():
                rendered = render_text(unit, width)
            case CodeUnit():
                rendered = render_code(unit, width)
            case AnnotationUnit():
                rendered = render_annotation(unit, width)
        if pending_break:
            contents.append("")
            pending_break = False
        contents.extend(rendered)
    return contents


def recompose(contents: Iterable[str], layout: CommentLayout) -> list[str]:
    """Wrap body contents in `/**`, gutters and ` */`."""
    return [layout.opener, *(layout.line(content) for content in contents), layout.closer]


def join_doc(lines: Sequence[str]) -> list[DocPart]:
    """Interleave lines with `HARDLINE` separators."""
    parts: list[DocPart] = []
    for index, line in enumerate(lines):
        if index:
            parts.append(HARDLINE)
        parts.append(line)
    return parts


def _dedent(lines: list[str]) -> list[str]:
    first = next((line for line in lines if line.strip()), None)
    if first is None:
        return []
    indent = len(first) - len(first.lstrip())
    dedented: list[str] = []
    for line in lines:
        leading = len(line) - len(line.lstrip())
        dedented.append(line[min(indent, leading) :])
    return dedented
