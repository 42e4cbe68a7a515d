"""Width and indentation math for rendered doc comments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from apexdocpy.doc.options import FormattingContext

GUTTER: Final[str] = " * "
GUTTER_WIDTH: Final[int] = len(GUTTER)
MIN_EFFECTIVE_WIDTH: Final[int] = 10
BODY_INDENT_WHEN_ZERO: Final[int] = 2
ZERO_INDENT: Final[int] = 0


def body_indent(comment_indent: int) -> int:
    """Continuation indent: a fixed amount for top-level comments, none for nested ones."""
    if comment_indent == ZERO_INDENT:
        return BODY_INDENT_WHEN_ZERO
    return ZERO_INDENT


def indent_columns(comment_indent: int, tab_width: int, use_tabs: bool) -> int:
    if use_tabs:
        return comment_indent // tab_width * tab_width
    return comment_indent


def effective_width(print_width: int, tab_width: int, comment_indent: int, use_tabs: bool) -> int:
    """Usable text width once indentation, body indent and gutter are taken off."""
    used = indent_columns(comment_indent, tab_width, use_tabs) + body_indent(comment_indent) + GUTTER_WIDTH
    return max(MIN_EFFECTIVE_WIDTH, print_width - used)


def create_indent(comment_indent: int, tab_width: int, use_tabs: bool) -> str:
    if use_tabs:
        return "\t" * (comment_indent // tab_width)
    return " " * comment_indent


@dataclass(frozen=True, slots=True)
class CommentLayout:
    indent: str
    width: int
    gutter: str = GUTTER

    @staticmethod
    def from_context(context: FormattingContext) -> "CommentLayout":
        return CommentLayout(
            indent=create_indent(context.comment_indent, context.tab_width, context.use_tabs),
            width=effective_width(
                context.print_width,
                context.tab_width,
                context.comment_indent,
                context.use_tabs,
            ),
        )

    @property
    def opener(self) -> str:
        # First line starts at the comment column.
        return "/**"

    @property
    def closer(self) -> str:
        return f"{self.indent} */"

    def line(self, content: str) -> str:
        if not content:
            return f"{self.indent}{self.gutter.rstrip()}"
        return f"{self.indent}{self.gutter}{content}"
