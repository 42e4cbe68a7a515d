"""Doc-comment boundary detection and gutter handling.

Comment values are taken verbatim from the source (`/**` through `*/`). The
scanner turns a value into body lines whose offsets still point into that
value, so later stages can report and splice at exact positions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from apexdocpy.text import TextRange

DOC_OPEN: Final[str] = "/**"
DOC_CLOSE: Final[str] = "*/"

_OPENER_RE: Final[re.Pattern[str]] = re.compile(r"^[ \t]*/\*\*+")
_CLOSER_RE: Final[re.Pattern[str]] = re.compile(r"\*+/[ \t]*$")
_GUTTER_RE: Final[re.Pattern[str]] = re.compile(r"^[ \t]*\*+ ?")


@dataclass(frozen=True, slots=True)
class BodyLine:
    """One physical line of a comment body with the gutter marker removed.

    `text` keeps the indentation that follows the gutter. `start` is the offset
    of `text[0]` inside the comment value.
    """

    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def content(self) -> str:
        return self.text.strip()

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)

    @property
    def content_range(self) -> TextRange:
        """Range of the line with surrounding whitespace excluded."""
        leading = len(self.text) - len(self.text.lstrip())
        if leading == len(self.text):
            return TextRange.empty(self.start)
        return TextRange(self.start + leading, self.start + len(self.text.rstrip()))

    def tail(self, index: int) -> "BodyLine":
        """The part of the line starting at `index`."""
        return BodyLine(self.text[index:], self.start + index)


def is_doc_comment(text: str) -> bool:
    """True for `/** ... */` blocks spanning at least three lines."""
    stripped = text.strip()
    if not stripped.startswith(DOC_OPEN) or not stripped.endswith(DOC_CLOSE):
        return False
    # `/**/` is an empty plain comment.
    if len(stripped) < len(DOC_OPEN) + len(DOC_CLOSE):
        return False
    return len(stripped.splitlines()) >= 3


def strip_gutter(line: str) -> str:
    """Text view of a body line: the leading `*` run and surrounding whitespace removed."""
    return strip_code_gutter(line).strip()


def strip_code_gutter(line: str) -> str:
    """Code view of a body line: the `*` run and at most one following space removed."""
    return line[len(gutter_prefix(line)) :]


def gutter_prefix(line: str) -> str:
    """The indentation, `*` run and single space that start a body line, if any."""
    match = _GUTTER_RE.match(line)
    return match.group(0) if match is not None else ""


def normalize_comment_start(text: str) -> str:
    """Collapse `/***...` openers to `/**`."""
    return re.sub(r"^([ \t]*)/\*{3,}", r"\1/**", text, count=1)


def normalize_comment_end(text: str) -> str:
    """Collapse `**/` closers to `*/`."""
    return re.sub(r"\*{2,}/([ \t]*)$", r"*/\1", text, count=1)


def comment_indent_columns(prefix: str, tab_width: int) -> int:
    """Columns covered by the whitespace in front of a comment's `/**`."""
    return len(prefix.expandtabs(tab_width))


def split_body_lines(value: str) -> tuple[BodyLine, ...]:
    """Split a comment value into gutter-stripped body lines.

    Text sharing a line with the opener (`/** text`) or the closer (`text */`)
    is kept as body content; the delimiter lines themselves are dropped when
    nothing else is on them.
    """
    spans = _split_lines(value)
    if not spans:
        return ()

    body: list[BodyLine] = []
    last_index = len(spans) - 1
    for index, (start, end) in enumerate(spans):
        text = value[start:end]
        offset = start

        if index == 0:
            opener = _OPENER_RE.match(text)
            if opener is not None:
                text = text[opener.end() :]
                offset += opener.end()
        if index == last_index:
            closer = _CLOSER_RE.search(text)
            if closer is not None:
                text = text[: closer.start()]

        if index == 0:
            leading = len(text) - len(text.lstrip())
            text = text[leading:]
            offset += leading
        else:
            gutter = gutter_prefix(text)
            text = text[len(gutter) :]
            offset += len(gutter)

        if (index == 0 or index == last_index) and not text.strip():
            continue
        body.append(BodyLine(text=text, start=offset))
    return tuple(body)


def _split_lines(value: str) -> list[tuple[int, int]]:
    lines: list[tuple[int, int]] = []
    offset = 0
    for line_with_break in value.splitlines(keepends=True):
        line = line_with_break.rstrip("\r\n")
        lines.append((offset, offset + len(line)))
        offset += len(line_with_break)
    return lines
