"""Format modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from apexdocpy.doc.options import FormattingContext


class FormatMode(StrEnum):
    """How much of each doc comment the runner rewrites."""

    REFLOW = "reflow"
    CODE_ONLY = "code-only"


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """File-level settings; each comment gets a `FormattingContext` derived from them."""

    mode: FormatMode = FormatMode.REFLOW
    print_width: int = 80
    tab_width: int = 2
    use_tabs: bool = False
    is_embed_formatted: bool = False

    @staticmethod
    def for_mode(
        mode: FormatMode,
        *,
        print_width: int = 80,
        tab_width: int = 2,
        use_tabs: bool = False,
        is_embed_formatted: bool = False,
    ) -> "FormatOptions":
        if mode == FormatMode.CODE_ONLY:
            # Samples always go through the normalizer in code-only mode.
            return FormatOptions(
                mode=mode,
                print_width=print_width,
                tab_width=tab_width,
                use_tabs=use_tabs,
                is_embed_formatted=False,
            )

        return FormatOptions(
            mode=mode,
            print_width=print_width,
            tab_width=tab_width,
            use_tabs=use_tabs,
            is_embed_formatted=is_embed_formatted,
        )

    def context_for(self, comment_indent: int) -> FormattingContext:
        return FormattingContext(
            print_width=self.print_width,
            tab_width=self.tab_width,
            use_tabs=self.use_tabs,
            comment_indent=comment_indent,
            is_embed_formatted=self.is_embed_formatted,
        )
