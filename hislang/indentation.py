"""Indentation checks that report warnings without stopping compilation."""

from __future__ import annotations

import sys
from typing import Iterator

from hislang.utils import split_lines, trim

_BLOCK_PREFIXES = ("function", "start:", "if", "elif", "else")


def _leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _iter_warnings(source: str) -> Iterator[str]:
    stack: list[int] = []
    for lineno, line in enumerate(split_lines(source), start=1):
        trimmed = trim(line)
        if not trimmed or trimmed.startswith("#"):
            continue

        indent = _leading_spaces(line)

        if trimmed == "end":
            if not stack:
                yield f"[Warning] Line {lineno}: 'end' without matching block start."
            else:
                expected = stack.pop()
                if indent != expected:
                    yield (
                        f"[Warning] Line {lineno}: 'end' indentation mismatch. "
                        f"Expected {expected} spaces but got {indent}."
                    )
        elif trimmed.startswith(_BLOCK_PREFIXES):
            stack.append(indent)
        elif stack and indent <= stack[-1]:
            yield (
                f"[Warning] Line {lineno}: Inconsistent indentation. "
                f"Expected greater than {stack[-1]} spaces but got {indent}."
            )

    if stack:
        yield "[Warning] EOF: Some blocks not closed properly (missing 'end')."


def check_indentation(source: str) -> list[str]:
    """Write indentation warnings for ``source`` to stderr and return them."""
    warnings = list(_iter_warnings(source))
    for warning in warnings:
        print(warning, file=sys.stderr)
    return warnings