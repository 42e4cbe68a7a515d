"""Diagnostics core types."""

from dataclasses import dataclass, replace
from typing import Literal

from apexdocpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, the doc-comment engine and the format runner."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def shifted(self, delta: int) -> "Diagnostic":
        """Re-anchor a comment-relative diagnostic at a file offset."""
        return replace(self, range=self.range.shift(delta))
