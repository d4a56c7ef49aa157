"""Build a syntax tree from a token list."""

from __future__ import annotations

from typing import Sequence

from hislang.lexer import NEWLINE_VALUE, Token, TokenType
from hislang.nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
    Statement,
)

_MAX_BLOCK_STATEMENTS = 10000

_EOF = Token(TokenType.EOF, "")


class ParseError(ValueError):
    """Raised when the token stream does not form a valid program."""


def _is_keyword(token: Token, word: str) -> bool:
    return token.type is TokenType.KEYWORD and token.value == word


class _Parser:
    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Token:
        if self.at_end():
            return _EOF
        return self.tokens[self.pos]

    def advance(self) -> Token:
        if self.at_end():
            return _EOF
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def skip_newlines(self) -> None:
        while self.peek().type is TokenType.NEWLINE:
            self.advance()

    def program(self) -> Program:
        program = Program()
        while not self.at_end():
            if self.peek().type is TokenType.EOF:
                break
            stmt = self.statement()
            if stmt is not None:
                program.statements.append(stmt)
            else:
                self.advance()
        return program

    def block(self) -> list[Statement]:
        body: list[Statement] = []
        count = 0
        while True:
            self.skip_newlines()
            current = self.peek()
            if _is_keyword(current, "end"):
                self.advance()
                return body
            if current.type is TokenType.EOF:
                raise ParseError("Unexpected end of file inside block.")

            stmt = self.statement()
            if stmt is not None:
                body.append(stmt)
            else:
                self.advance()

            count += 1
            if count > _MAX_BLOCK_STATEMENTS:
                raise ParseError("Too many statements parsed without encountering 'end'")

    def statement(self) -> Statement | None:
        self.skip_newlines()
        tok = self.peek()

        if tok.type is TokenType.EOF:
            return None
        if _is_keyword(tok, "function"):
            return self.function_def()
        if _is_keyword(tok, "start"):
            return self.start_block()
        if _is_keyword(tok, "say"):
            return self.say()
        if _is_keyword(tok, "set"):
            self.advance()
            return SetStatement(self.advance().value)
        if tok.type is TokenType.IDENTIFIER:
            return self.call()

        # Unknown statement: skip it so parsing always moves forward.
        self.advance()
        return None

    def function_def(self) -> FunctionDef:
        self.advance()
        name = self.advance()
        after_name = self.advance()
        param = ""
        if not (after_name.type is TokenType.SYMBOL and after_name.value == ":"):
            param = after_name.value
            if self.advance().value != ":":
                raise ParseError("Expected ':' after parameter in function definition")
        return FunctionDef(name.value, param, self.block())

    def start_block(self) -> StartBlock:
        self.advance()
        if self.advance().value != ":":
            raise ParseError("Expected ':' after start")
        return StartBlock(self.block())

    def say(self) -> SayStatement:
        self.advance()
        args: list[str] = []
        is_vars: list[bool] = []
        ending = NEWLINE_VALUE

        while True:
            nxt = self.peek()
            if _is_keyword(nxt, "end"):
                self.advance()
                eq = self.peek()
                if eq.type is not TokenType.SYMBOL or eq.value != "=":
                    raise ParseError("Expected '=' after 'end'")
                self.advance()
                if self.peek().type is not TokenType.STRING_LITERAL:
                    raise ParseError("Expected string literal after end=")
                ending = self.advance().value
                break
            if nxt.type in (TokenType.NEWLINE, TokenType.EOF):
                self.advance()
                break
            if nxt.type in (TokenType.STRING_LITERAL, TokenType.IDENTIFIER):
                arg = self.advance()
                args.append(arg.value)
                is_vars.append(arg.type is TokenType.IDENTIFIER)
                comma = self.peek()
                if comma.type is TokenType.SYMBOL and comma.value == ",":
                    self.advance()
            else:
                raise ParseError(f"Unexpected token in 'say': {nxt.value}")

        return SayStatement(args, is_vars, ending)

    def call(self) -> FunctionCall:
        func = self.advance()
        nxt = self.peek()
        if nxt.type in (TokenType.STRING_LITERAL, TokenType.IDENTIFIER):
            arg = self.advance()
            return FunctionCall(func.value, arg.value, arg.type)
        return FunctionCall(func.value, "", TokenType.EOF)


def parse(tokens: Sequence[Token]) -> Program:
    """Parse ``tokens`` into a :class:`Program`."""
    return _Parser(tokens).program()