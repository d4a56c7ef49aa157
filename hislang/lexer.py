"""Turn source lines into a flat list of tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator

from hislang.utils import ASCII_WHITESPACE, trim


class TokenType(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING_LITERAL = auto()
    SYMBOL = auto()
    INDENT = auto()
    DEDENT = auto()
    NEWLINE = auto()
    EOF = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int = 0


class LexError(ValueError):
    """Raised when a line cannot be tokenised."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.line = line


KEYWORDS = frozenset(
    {
        "function", "start", "end",
        "if", "elif", "else",
        "say", "set",
        "add", "minus", "multiply", "divide",
    }
)

SYMBOLS = frozenset(":=()")

NEWLINE_VALUE = "\\n"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _lex_line(line: str, lineno: int) -> Iterator[Token]:
    pos = 0
    while pos < len(line):
        ch = line[pos]
        if ch in ASCII_WHITESPACE:
            pos += 1
        elif ch == '"':
            close = line.find('"', pos + 1)
            if close < 0:
                raise LexError(f"Unterminated string at line {lineno}", lineno)
            yield Token(TokenType.STRING_LITERAL, line[pos + 1:close], lineno)
            pos = close + 1
        elif match := _IDENTIFIER.match(line, pos):
            word = match.group()
            kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
            yield Token(kind, word, lineno)
            pos = match.end()
        elif ch in SYMBOLS:
            yield Token(TokenType.SYMBOL, ch, lineno)
            pos += 1
        else:
            # Characters the language does not know are skipped.
            pos += 1


def lex(lines: Iterable[str]) -> list[Token]:
    """Tokenise ``lines``; each non-blank, non-comment line ends with a NEWLINE token."""
    lines = list(lines)
    tokens: list[Token] = []
    for lineno, raw in enumerate(lines, start=1):
        line = trim(raw)
        if not line or line.startswith("#"):
            continue
        tokens.extend(_lex_line(line, lineno))
        tokens.append(Token(TokenType.NEWLINE, NEWLINE_VALUE, lineno))
    tokens.append(Token(TokenType.EOF, "", len(lines)))
    return tokens