"""Whole-file doc-comment formatting."""

from apexdocpy.format.options import FormatMode, FormatOptions
from apexdocpy.format.results import FormatRunResult
from apexdocpy.format.runner import format_file, run_format

__all__ = [
    "FormatMode",
    "FormatOptions",
    "FormatRunResult",
    "format_file",
    "run_format",
]
