#!/usr/bin/env python3
"""Normalize the doc comments of Apex source files."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from apexdocpy.diagnostics import Diagnostic, format_diagnostic, has_errors, summarize
from apexdocpy.format import FormatMode, FormatOptions, format_file

APEX_SUFFIXES = (".cls", ".trigger")


def _collect_files(paths: list[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*") if p.suffix in APEX_SUFFIXES and p.is_file()))
        elif path.is_file():
            files.append(path)
        else:
            raise SystemExit(f"No such file or directory: {path}")
    return files


def main() -> int:
    parser = argparse.ArgumentParser(description="Normalize doc comments in Apex source files")
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories (.cls/.trigger) to format")
    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if any file would change; write nothing",
    )
    action.add_argument("--write", action="store_true", help="Rewrite changed files in place")
    parser.add_argument("--print-width", type=int, default=80, help="Line width (default: 80)")
    parser.add_argument("--tab-width", type=int, default=2, help="Columns per tab (default: 2)")
    parser.add_argument("--use-tabs", action="store_true", help="Indent comments with tabs")
    parser.add_argument(
        "--code-only",
        action="store_true",
        help="Only normalize {@code} samples, leave prose and layout alone",
    )
    parser.add_argument(
        "--embed-formatted",
        action="store_true",
        help="Trust {@code} samples as already formatted and keep them verbatim (reflow mode only)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bar",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = FormatMode.CODE_ONLY if args.code_only else FormatMode.REFLOW
    options = FormatOptions.for_mode(
        mode,
        print_width=args.print_width,
        tab_width=args.tab_width,
        use_tabs=args.use_tabs,
        is_embed_formatted=args.embed_formatted,
    )

    files = _collect_files(args.paths)
    iterator = files if args.no_progress else tqdm(files, desc="format", unit="file")

    changed: list[Path] = []
    diagnostics: list[Diagnostic] = []
    for path in iterator:
        result = format_file(path, options, write=args.write)
        for diagnostic in result.diagnostics:
            tqdm.write(format_diagnostic(diagnostic, result.source_text, path=str(path)))
        diagnostics.extend(result.diagnostics)
        if result.changed:
            changed.append(path)

    verb = "reformatted" if args.write else "would reformat"
    for path in changed:
        print(f"{verb} {path}")
    print(f"{len(changed)} of {len(files)} files {'reformatted' if args.write else 'need formatting'}")
    for code, count in summarize(diagnostics).items():
        print(f"  {code}: {count}")

    if args.check and changed:
        return 1
    return 1 if has_errors(diagnostics) else 0


if __name__ == "__main__":
    raise SystemExit(main())
