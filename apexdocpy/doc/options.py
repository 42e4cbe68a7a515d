"""Per-comment formatting configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormattingContext:
    """Layout settings for one doc comment.

    `comment_indent` is the number of columns in front of the comment's `/**`.
    `is_embed_formatted` marks `{@code}` samples as already formatted upstream,
    in which case they are taken verbatim instead of going through the code
    normalizer.

    Any `print_width` is accepted; the text width is floored at
    `MIN_EFFECTIVE_WIDTH` when the comment is laid out.
    """

    print_width: int = 80
    tab_width: int = 2
    use_tabs: bool = False
    comment_indent: int = 0
    is_embed_formatted: bool = False

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")
        if self.comment_indent < 0:
            raise ValueError("comment_indent cannot be negative")
