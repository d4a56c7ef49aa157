"""Syntax tree nodes for the language."""

from __future__ import annotations

from dataclasses import dataclass, field

from hislang.lexer import TokenType


class Statement:
    """Base class of every statement node."""


@dataclass
class SayStatement(Statement):
    args: list[str]
    is_vars: list[bool]
    end: str

    def __post_init__(self) -> None:
        if len(self.args) != len(self.is_vars):
            raise ValueError("say arguments and variable flags differ in length")


@dataclass
class SetStatement(Statement):
    var: str


@dataclass
class FunctionCall(Statement):
    name: str
    arg: str
    arg_type: TokenType = TokenType.EOF


@dataclass
class FunctionDef(Statement):
    name: str
    param: str
    body: list[Statement] = field(default_factory=list)


@dataclass
class StartBlock(Statement):
    body: list[Statement] = field(default_factory=list)


@dataclass
class Program:
    statements: list[Statement] = field(default_factory=list)