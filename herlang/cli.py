"""Command-line front end: compile a source file into C++."""

from __future__ import annotations

import sys
from typing import Sequence

from .generator import generate_cpp
from .indentation import check_indentation
from .lexer import LexError, lex
from .parser import ParseError, parse
from .utils import split_lines

USAGE = "Usage: hcp in.herc out.cpp"


def compile_source(source: str) -> str:
    """Compile program text into C++ code."""
    return generate_cpp(parse(lex(split_lines(source))))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the compiler on ``in.herc out.cpp``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    input_path, output_path = args

    try:
        with open(input_path, encoding="utf-8", newline="") as handle:
            source = handle.read()
    except OSError:
        print(f"Cannot open input file: {input_path}", file=sys.stderr)
        return 1

    for warning in check_indentation(source):
        print(warning, file=sys.stderr)

    try:
        code = compile_source(source)
    except (LexError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(code)
    except OSError:
        print(f"Cannot write to output file: {output_path}", file=sys.stderr)
        return 1

    print(f"Compilation successful: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())