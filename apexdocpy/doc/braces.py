"""Brace balance tracking for `{@code ...}` blocks."""

import re
from dataclasses import dataclass
from typing import Final

CODE_TAG: Final[str] = "{@code"

_CODE_TAG_RE: Final[re.Pattern[str]] = re.compile(r"\{@code(?=\s|\}|$)")


@dataclass(frozen=True, slots=True)
class BraceStep:
    """Outcome of feeding one line to the tracker.

    `end` is the index just past the closing brace when `will_end` is set.
    """

    count: int
    will_end: bool = False
    end: int | None = None


def track_braces(line: str, count: int) -> BraceStep:
    """Update the open-brace `count` with the braces on `line`.

    Every brace counts, including ones inside string literals. The block ends
    at the first `}` on this line that brings a positive count back to zero.
    """
    for index, ch in enumerate(line):
        if ch == "{":
            count += 1
        elif ch == "}":
            count -= 1
            if count == 0:
                return BraceStep(count=0, will_end=True, end=index + 1)
    return BraceStep(count=count)


def starts_code_block(content: str) -> bool:
    """True if trimmed line content opens a `{@code` block."""
    return _CODE_TAG_RE.match(content) is not None
