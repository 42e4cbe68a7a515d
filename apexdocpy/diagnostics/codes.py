"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from apexdocpy.diagnostics.diagnostic import Diagnostic, Severity
from apexdocpy.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def at(self, range: TextRange, *, message: str | None = None) -> Diagnostic:
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a single quote.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_COMMENT",
    message="Unterminated block comment.",
    hint="Close the comment with `*/`.",
    severity="error",
    category="lexer",
)

DOC_UNTERMINATED_CODE_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_UNTERMINATED_CODE_BLOCK",
    message="`{@code` block is not closed before the end of the comment.",
    hint="Balance the braces of the code sample or close it with `}`.",
    severity="warning",
    category="doc",
)

DOC_CODE_NORMALIZER_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="DOC_CODE_NORMALIZER_FAILED",
    message="Code normalization failed; the code sample was kept as written.",
    severity="warning",
    category="doc",
)
