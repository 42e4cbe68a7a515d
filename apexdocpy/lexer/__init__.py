"""Lexer."""

from apexdocpy.lexer.lexer import Lexer, dump_tokens, token_text
from apexdocpy.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "token_text",
]
