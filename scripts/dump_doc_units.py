#!/usr/bin/env python3
"""Print the unit sequence of every doc comment in a source file."""

from __future__ import annotations

import argparse
from pathlib import Path

from apexdocpy.doc import dump_units, is_doc_comment, segment, split_body_lines
from apexdocpy.lexer import Lexer, token_text


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump doc-comment units for debugging")
    parser.add_argument("path", type=Path, help="Apex source file")
    parser.add_argument("--source", action="store_true", help="Also print the source slice of each unit")
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8-sig")
    lexer = Lexer(text)
    for token in lexer.lex():
        if not token.is_doc_comment():
            continue
        value = token_text(text, token)
        line = text.count("\n", 0, token.range.start) + 1
        if not is_doc_comment(value):
            print(f"line {line}: single-line doc comment, skipped")
            continue
        print(f"line {line}:")
        dump_units(segment(split_body_lines(value)), value if args.source else None)
        print()

    for diagnostic in lexer.diagnostics:
        print(f"- {diagnostic.severity.upper()} {diagnostic.code} range={diagnostic.range.as_tuple()} {diagnostic.message}")


if __name__ == "__main__":
    main()
