"""Format run result carriers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from apexdocpy.diagnostics import Diagnostic


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting every doc comment in one source text."""

    source_text: str
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
    comment_count: int = 0
    changed_comment_count: int = 0
    path: Path | None = None
    had_bom: bool = False
