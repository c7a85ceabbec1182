#!/usr/bin/env python3
"""CLI: sums the delimited integers of a file (or stdin) with the string calculator.

Expected output: SUM=<number>\n
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from string_calculator import (
    MAX_VALUE,
    NegativeNumberError,
    ParseError,
    StringCalculator,
)


USAGE = "python sum_cli.py [--max N] [<input_file_path>]"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("--max", dest="max_value", type=int, default=MAX_VALUE)
    p.add_argument("input_file", nargs="?")
    args = p.parse_args(argv[1:])
    if args.max_value < 0:
        raise ValueError("--max must be non-negative")
    return args


def _strip_utf8_bom(s: str) -> str:
    if s.startswith("\ufeff"):
        return s[1:]
    return s


def _normalize_newlines(s: str) -> str:
    return s.replace("\r\n", "\n")


def _read_input(path: Path | None) -> str:
    if path is None:
        text = sys.stdin.buffer.read().decode("utf-8")
    else:
        text = path.read_text(encoding="utf-8")
    return _normalize_newlines(_strip_utf8_bom(text))


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    try:
        args = _parse_args(argv)
    except (SystemExit, ValueError):
        print(f"Usage: {USAGE}", file=sys.stderr)
        return 2

    input_path = Path(args.input_file) if args.input_file is not None else None
    if input_path is not None and not input_path.is_file():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    try:
        text = _read_input(input_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    calculator = StringCalculator(max_value=args.max_value)
    try:
        total = calculator.add(text)
    except NegativeNumberError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"SUM={total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
