import pytest

from hislang.lexer import TokenType, lex
from hislang.nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
)
from hislang.parser import ParseError, parse


def parse_lines(*lines):
    return parse(lex(list(lines)))


def test_empty_token_list():
    assert parse([]) == Program([])


def test_only_eof():
    assert parse_lines() == Program([])


def test_function_without_param():
    program = parse_lines("function greet:", 'say "hi"', "end")
    assert program == Program(
        [FunctionDef("greet", "", [SayStatement(["hi"], [False], "\\n")])]
    )


def test_function_with_param():
    program = parse_lines("function greet name:", "say name", "end")
    assert program == Program(
        [FunctionDef("greet", "name", [SayStatement(["name"], [True], "\\n")])]
    )


def test_start_block_with_set_and_calls():
    program = parse_lines("start:", "set x", 'greet "Bob"', "greet x", "greet", "end")
    assert program == Program(
        [
            StartBlock(
                [
                    SetStatement("x"),
                    FunctionCall("greet", "Bob", TokenType.STRING_LITERAL),
                    FunctionCall("greet", "x", TokenType.IDENTIFIER),
                    FunctionCall("greet", "", TokenType.EOF),
                ]
            )
        ]
    )


def test_say_with_custom_end():
    program = parse_lines("start:", 'say "a" x end=""', "end")
    say = program.statements[0].body[0]
    assert say == SayStatement(["a", "x"], [False, True], "")


def test_statements_in_order():
    program = parse_lines("function f:", "end", "start:", "f", "end")
    assert [type(s) for s in program.statements] == [FunctionDef, StartBlock]


def test_nested_function_inside_block():
    program = parse_lines("start:", "function inner:", "end", "end")
    assert program == Program([StartBlock([FunctionDef("inner", "", [])])])


def test_unknown_statement_is_skipped():
    program = parse_lines("if x", "start:", "end")
    assert program == Program([StartBlock([])])


def test_missing_end_raises():
    with pytest.raises(ParseError, match="Unexpected end of file inside block."):
        parse_lines("start:", 'say "hi"')


def test_start_without_colon():
    with pytest.raises(ParseError, match="Expected ':' after start"):
        parse_lines("start", "end")


def test_function_param_without_colon():
    with pytest.raises(ParseError, match="Expected ':' after parameter"):
        parse_lines("function f a b", "end")


def test_say_end_without_equals():
    with pytest.raises(ParseError, match="Expected '=' after 'end'"):
        parse_lines("start:", 'say "a" end', "end")


def test_say_end_needs_string():
    with pytest.raises(ParseError, match="Expected string literal after end="):
        parse_lines("start:", "say end=x", "end")


def test_say_rejects_keyword():
    with pytest.raises(ParseError, match="Unexpected token in 'say': add"):
        parse_lines("start:", "say add", "end")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_lines("start:")


def test_block_statement_limit():
    lines = ["start:"] + ['say "x"'] * 10001 + ["end"]
    with pytest.raises(ParseError, match="Too many statements"):
        parse_lines(*lines)


def test_block_at_limit_is_accepted():
    lines = ["start:"] + ['say "x"'] * 10000 + ["end"]
    program = parse_lines(*lines)
    assert len(program.statements[0].body) == 10000