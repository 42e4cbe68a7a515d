"""Doc tag vocabulary and `@group` content normalization."""

import re
from types import MappingProxyType
from typing import Final, Mapping

DOC_TAGS: Final[frozenset[str]] = frozenset(
    {
        "param",
        "return",
        "throws",
        "see",
        "since",
        "author",
        "version",
        "deprecated",
        "group",
        "example",
    }
)

# Tags whose content is kept line for line instead of being reflowed.
VERBATIM_TAGS: Final[frozenset[str]] = frozenset({"group", "example"})

GROUP_NAMES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "class": "Class",
        "method": "Method",
        "interface": "Interface",
        "enum": "Enum",
        "property": "Property",
        "variable": "Variable",
    }
)

_TAG_LINE_RE: Final[re.Pattern[str]] = re.compile(r"@([A-Za-z]+)(?=\s|$)")
_TAG_WORD_RE: Final[re.Pattern[str]] = re.compile(
    r"^@(" + "|".join(sorted(DOC_TAGS)) + r")\b",
    re.IGNORECASE,
)


def match_tag(content: str) -> tuple[str, str] | None:
    """Split a trimmed line into `(name, rest)` if it starts with a known tag.

    `name` keeps its original casing; `rest` is the stripped remainder.
    """
    match = _TAG_LINE_RE.match(content)
    if match is None or match.group(1).lower() not in DOC_TAGS:
        return None
    return match.group(1), content[match.end() :].strip()


def lowercase_tag_word(word: str) -> str:
    """Lowercase a known tag at the start of a prose word (`@Param,` -> `@param,`)."""
    return _TAG_WORD_RE.sub(lambda match: match.group(0).lower(), word, count=1)


def normalize_group_content(content: str) -> str:
    """Map the group name to its canonical casing, keeping the rest verbatim."""
    trimmed = content.strip()
    if not trimmed:
        return ""
    name, separator, rest = trimmed.partition(" ")
    canonical = GROUP_NAMES.get(name.lower(), name)
    return f"{canonical}{separator}{rest}"
