"""Offsets and ranges into comment and source text."""

from apexdocpy.text.text import TextRange, slice_text_range

__all__ = ["TextRange", "slice_text_range"]
