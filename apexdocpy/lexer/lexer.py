"""Lossless lexer for Apex source and `{@code}` samples."""

from typing import Final

from apexdocpy.diagnostics import Diagnostic
from apexdocpy.diagnostics.codes import (
    LEXER_UNTERMINATED_COMMENT,
    LEXER_UNTERMINATED_STRING,
)
from apexdocpy.lexer.tokens import Token, TokenFlags, TokenKind
from apexdocpy.text import TextRange, slice_text_range

_PUNCTUATION: Final[dict[str, TokenKind]] = {
    "@": TokenKind.AT,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_OPERATOR_CHARS: Final[frozenset[str]] = frozenset("=+-*/%!&|^?:~")


class Lexer:
    """Lossless lexer for Apex-like source and code samples.

    Every character of the input ends up in exactly one token, so joining the
    token texts reproduces the source. Comments and string literals are kept as
    single tokens so callers can leave their contents alone.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._after_newline = False
        self._current_start = 0
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def next_token(self) -> Token:
        self._current_start = self._position
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        kind = self._lex_token()
        if self._after_newline:
            self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK

        if not kind.is_trivia:
            self._after_newline = False

        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch in "\r\n\t ":
            return self._consume_newline_or_whitespaces()

        if ch == "/":
            if self._peek_char() == "/":
                return self._lex_line_comment()
            if self._peek_char() == "*":
                return self._lex_block_comment()

        if ch == "'" or ch == '"':
            return self._lex_string(ch)

        if ch.isdigit():
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            self._advance(1)
            return kind

        if ch in _OPERATOR_CHARS:
            self._advance(1)
            return TokenKind.OPERATOR

        # Fallback: preserve bytes as SKIPPED.
        self._advance(1)
        return TokenKind.SKIPPED

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.LINE_COMMENT

    def _lex_block_comment(self) -> TokenKind:
        self._advance(2)
        # `/**/` is an empty plain comment, not a doc comment.
        if self._current_char() == "*" and self._peek_char() != "/":
            self._current_flags |= TokenFlags.DOC_COMMENT

        while not self.is_eof:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance(2)
                return TokenKind.BLOCK_COMMENT
            self._advance(1)

        self._current_flags |= TokenFlags.UNTERMINATED
        self._diagnostics.append(LEXER_UNTERMINATED_COMMENT.at(self.current_range))
        return TokenKind.BLOCK_COMMENT

    def _lex_string(self, quote: str) -> TokenKind:
        # Consume opening quote
        self._advance(1)
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            if ch == quote:
                self._advance(1)
                closed = True
                break
            if ch == "\\":
                self._advance(1)
                if not self.is_eof:
                    self._advance(1)
                continue
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)

        if not closed:
            self._current_flags |= TokenFlags.UNTERMINATED
            self._diagnostics.append(LEXER_UNTERMINATED_STRING.at(self.current_range))

        return TokenKind.STRING

    def _lex_number(self) -> TokenKind:
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch.isdigit():
                self._advance(1)
                continue
            if ch == "." and not saw_dot and self._peek_char().isdigit():
                saw_dot = True
                self._advance(1)
                continue
            break
        # Literal suffixes such as 1000000L or 1.5d.
        if self._current_char() in ("l", "L", "d", "D"):
            self._advance(1)
        return TokenKind.NUMBER

    def _lex_identifier(self) -> TokenKind:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        return TokenKind.IDENTIFIER

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            self._after_newline = True
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str, diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} flags={tok.flags!r} text={text!r}")

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}")
