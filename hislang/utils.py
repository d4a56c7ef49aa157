"""Small string helpers shared by the compiler stages."""

from __future__ import annotations

# The characters the C locale treats as whitespace.
ASCII_WHITESPACE = " \t\n\v\f\r"


def trim(s: str) -> str:
    """Strip leading and trailing ASCII whitespace from ``s``."""
    return s.strip(ASCII_WHITESPACE)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newlines; a trailing newline does not add an empty line."""
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines