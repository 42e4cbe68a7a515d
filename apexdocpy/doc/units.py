"""Typed content units of a doc comment body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from apexdocpy.doc.braces import CODE_TAG
from apexdocpy.doc.tags import VERBATIM_TAGS
from apexdocpy.text import TextRange


@dataclass(frozen=True, slots=True)
class TextUnit:
    """Prose lines that reflow together."""

    lines: tuple[str, ...]
    range: TextRange

    @property
    def rendered(self) -> str:
        return " ".join(self.lines)

    @property
    def keeps_layout(self) -> bool:
        """Prose holding an inline `{@code` is kept line for line, indentation included."""
        return any(CODE_TAG in line for line in self.lines)


@dataclass(frozen=True, slots=True)
class ParagraphBreakUnit:
    """One or more consecutive blank lines."""

    range: TextRange


@dataclass(frozen=True, slots=True)
class CodeUnit:
    """A `{@code ...}` sample.

    `raw_code` is the text between `{@code` and the balancing `}` with gutters
    removed. `range` covers the tag through the closing brace, or through the
    last content line when the block is never closed.
    """

    raw_code: str
    range: TextRange
    terminated: bool = True
    normalized_code: str | None = None

    @property
    def start_pos(self) -> int:
        return self.range.start

    @property
    def end_pos(self) -> int:
        return self.range.end

    @property
    def code(self) -> str:
        return self.normalized_code if self.normalized_code is not None else self.raw_code


@dataclass(frozen=True, slots=True)
class AnnotationUnit:
    """A tag line such as `@param name description` plus its continuation lines."""

    name: str
    content: str
    range: TextRange
    continuation: tuple[str, ...] = ()

    @property
    def tag(self) -> str:
        return self.name.lower()

    @property
    def keeps_layout(self) -> bool:
        if self.tag in VERBATIM_TAGS:
            return True
        return any(CODE_TAG in line for line in (self.content, *self.continuation))


DocCommentUnit: TypeAlias = TextUnit | ParagraphBreakUnit | CodeUnit | AnnotationUnit
