"""Doc-comment normalization engine."""

from apexdocpy.doc.braces import CODE_TAG, BraceStep, starts_code_block, track_braces
from apexdocpy.doc.engine import (
    DocCommentResult,
    normalize_doc_comment,
    normalize_doc_comment_code,
    splice_code_units,
)
from apexdocpy.doc.layout import (
    BODY_INDENT_WHEN_ZERO,
    GUTTER,
    MIN_EFFECTIVE_WIDTH,
    CommentLayout,
    body_indent,
    create_indent,
    effective_width,
    indent_columns,
)
from apexdocpy.doc.options import FormattingContext
from apexdocpy.doc.reflow import HARDLINE, Hardline, recompose, render_units, wrap_words
from apexdocpy.doc.scanner import (
    BodyLine,
    comment_indent_columns,
    is_doc_comment,
    normalize_comment_end,
    normalize_comment_start,
    split_body_lines,
    strip_code_gutter,
    strip_gutter,
)
from apexdocpy.doc.segmenter import SegmenterState, dump_units, finish, segment, step
from apexdocpy.doc.tags import DOC_TAGS, GROUP_NAMES, match_tag, normalize_group_content
from apexdocpy.doc.units import (
    AnnotationUnit,
    CodeUnit,
    DocCommentUnit,
    ParagraphBreakUnit,
    TextUnit,
)

__all__ = [
    "BODY_INDENT_WHEN_ZERO",
    "CODE_TAG",
    "DOC_TAGS",
    "GROUP_NAMES",
    "GUTTER",
    "HARDLINE",
    "MIN_EFFECTIVE_WIDTH",
    "AnnotationUnit",
    "BodyLine",
    "BraceStep",
    "CodeUnit",
    "CommentLayout",
    "DocCommentResult",
    "DocCommentUnit",
    "FormattingContext",
    "Hardline",
    "ParagraphBreakUnit",
    "SegmenterState",
    "TextUnit",
    "body_indent",
    "comment_indent_columns",
    "create_indent",
    "dump_units",
    "effective_width",
    "finish",
    "indent_columns",
    "is_doc_comment",
    "match_tag",
    "normalize_comment_end",
    "normalize_comment_start",
    "normalize_doc_comment",
    "normalize_doc_comment_code",
    "normalize_group_content",
    "recompose",
    "render_units",
    "segment",
    "splice_code_units",
    "starts_code_block",
    "step",
    "strip_code_gutter",
    "strip_gutter",
    "track_braces",
    "wrap_words",
]
