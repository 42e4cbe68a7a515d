"""Casing normalization for Apex code samples embedded in doc comments."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from apexdocpy.casing.refs import APEX_ANNOTATIONS, PRIMITIVE_AND_COLLECTION_TYPES
from apexdocpy.lexer import Lexer, Token, TokenKind, token_text

CodeNormalizer: TypeAlias = Callable[[str], str]
"""Rewrites a code sample and returns text of the same logical structure."""

_GENERIC_RESET_KINDS = frozenset(
    {
        TokenKind.SEMICOLON,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
    }
)


def normalize_type_name(name: str) -> str:
    """Canonical spelling of a primitive or collection type, or `name` unchanged."""
    return PRIMITIVE_AND_COLLECTION_TYPES.get(name.lower(), name)


def normalize_annotation_name(name: str) -> str:
    """Canonical spelling of a standard annotation name (without `@`), or `name` unchanged."""
    return APEX_ANNOTATIONS.get(name.lower(), name)


def normalize_code_casing(code: str) -> str:
    """Normalize type and annotation casing in a code sample.

    Only identifiers in a type position are touched (declarations, generic
    arguments, array types and `new` expressions); string literals, comments
    and member accesses are left alone. The token stream is lossless, so
    whitespace and line structure are preserved exactly.
    """
    tokens = Lexer(code).lex()
    significant = [index for index, token in enumerate(tokens) if not token.kind.is_trivia and token.kind != TokenKind.EOF]
    replacements: dict[int, str] = {}
    generic_depth = 0

    for position, index in enumerate(significant):
        token = tokens[index]
        previous = tokens[significant[position - 1]] if position > 0 else None
        following = tokens[significant[position + 1]] if position + 1 < len(significant) else None
        after_following = tokens[significant[position + 2]] if position + 2 < len(significant) else None

        if token.kind == TokenKind.LESS_THAN and previous is not None and _is_type_like(previous, code):
            generic_depth += 1
            continue
        if token.kind == TokenKind.GREATER_THAN and generic_depth > 0:
            generic_depth -= 1
            continue
        if token.kind in _GENERIC_RESET_KINDS:
            generic_depth = 0
            continue
        if token.kind != TokenKind.IDENTIFIER:
            continue

        text = token_text(code, token)
        if previous is not None and previous.kind == TokenKind.AT and previous.range.end == token.range.start:
            replacements[index] = normalize_annotation_name(text)
            continue
        if text.lower() not in PRIMITIVE_AND_COLLECTION_TYPES:
            continue
        if previous is not None and previous.kind == TokenKind.DOT:
            continue
        if generic_depth > 0 or _in_type_position(code, previous, following, after_following):
            replacements[index] = normalize_type_name(text)

    if not replacements:
        return code
    return "".join(replacements.get(index, token_text(code, token)) for index, token in enumerate(tokens))


def _in_type_position(
    code: str,
    previous: Token | None,
    following: Token | None,
    after_following: Token | None,
) -> bool:
    if previous is not None and previous.kind == TokenKind.IDENTIFIER and token_text(code, previous).lower() == "new":
        return True
    if following is None:
        return False
    match following.kind:
        case TokenKind.IDENTIFIER | TokenKind.LESS_THAN:
            return True
        case TokenKind.LBRACKET:
            return after_following is not None and after_following.kind == TokenKind.RBRACKET
        case _:
            return False


def _is_type_like(token: Token, code: str) -> bool:
    # `Map<` and `list<` open type arguments; `count < limit` does not.
    if token.kind != TokenKind.IDENTIFIER:
        return False
    text = token_text(code, token)
    return text.lower() in PRIMITIVE_AND_COLLECTION_TYPES or text[:1].isupper()
