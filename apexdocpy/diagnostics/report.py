"""Diagnostics helpers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from apexdocpy.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def summarize(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Count diagnostics per code, most frequent first."""
    return dict(Counter(d.code for d in diagnostics).most_common())


def format_diagnostic(diagnostic: Diagnostic, source: str, *, path: str = "<memory>") -> str:
    """Render `path:line:column: SEVERITY CODE message` for command-line output."""
    offset = diagnostic.range.start
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return f"{path}:{line}:{column}: {diagnostic.severity.upper()} {diagnostic.code} {diagnostic.message}"
