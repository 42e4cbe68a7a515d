"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from apexdocpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    LINE_COMMENT = 12  # // ...
    BLOCK_COMMENT = 13  # /* ... */ and /** ... */
    SKIPPED = 14

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # 'quoted' or "quoted"
    NUMBER = 22

    # -------------------------
    # Punctuation / separators
    # -------------------------
    AT = 40  # @
    DOT = 41  # .
    COMMA = 42  # ,
    SEMICOLON = 43  # ;
    LESS_THAN = 44  # <
    GREATER_THAN = 45  # >

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    # Any other operator character (= + - * / % ! & | ^ ? : ~).
    OPERATOR = 70

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.LINE_COMMENT,
            TokenKind.BLOCK_COMMENT,
            TokenKind.SKIPPED,
        )


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE before
    DOC_COMMENT = 1 << 1  # block comment opened with /**
    UNTERMINATED = 1 << 2  # string or block comment missing its closer


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def is_doc_comment(self) -> bool:
        return self.kind == TokenKind.BLOCK_COMMENT and bool(self.flags & TokenFlags.DOC_COMMENT)

    def is_terminated(self) -> bool:
        return not self.flags & TokenFlags.UNTERMINATED

