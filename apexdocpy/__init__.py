"""Doc-comment normalization for Apex sources."""

from apexdocpy.doc import FormattingContext, normalize_doc_comment, normalize_doc_comment_code
from apexdocpy.format import FormatMode, FormatOptions, format_file, run_format

__all__ = [
    "FormatMode",
    "FormatOptions",
    "FormattingContext",
    "format_file",
    "normalize_doc_comment",
    "normalize_doc_comment_code",
    "run_format",
]
