"""Diagnostics."""

from apexdocpy.diagnostics.codes import (
    DOC_CODE_NORMALIZER_FAILED,
    DOC_UNTERMINATED_CODE_BLOCK,
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from apexdocpy.diagnostics.diagnostic import Diagnostic, Severity
from apexdocpy.diagnostics.report import (
    collect_diagnostics,
    format_diagnostic,
    has_errors,
    summarize,
)

__all__ = [
    "DOC_CODE_NORMALIZER_FAILED",
    "DOC_UNTERMINATED_CODE_BLOCK",
    "LEXER_UNTERMINATED_COMMENT",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
    "summarize",
]
