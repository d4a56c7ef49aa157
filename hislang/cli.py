"""Command-line entry point: compile a source file to C++."""

from __future__ import annotations

import sys
from typing import Sequence

from hislang.generator import generate_cpp
from hislang.indentation import check_indentation
from hislang.lexer import LexError, lex
from hislang.parser import ParseError, parse
from hislang.utils import split_lines


def compile_source(source: str) -> str:
    """Check, tokenise, parse and translate ``source`` into C++ text."""
    check_indentation(source)
    tokens = lex(split_lines(source))
    return generate_cpp(parse(tokens))


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the file named by the first argument into the second."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: hcp in.herc out.cpp", file=sys.stderr)
        return 1
    in_path, out_path = args

    try:
        with open(in_path, encoding="utf-8") as handle:
            source = handle.read()
    except OSError:
        print(f"Cannot open input file: {in_path}", file=sys.stderr)
        return 1

    try:
        cpp_code = compile_source(source)
    except (LexError, ParseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        with open(out_path, "w", encoding="utf-8") as handle:
            handle.write(cpp_code)
    except OSError:
        print(f"Cannot write to output file: {out_path}", file=sys.stderr)
        return 1

    print(f"Compilation successful: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())