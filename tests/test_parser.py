import pytest

from herlang.lexer import Token, TokenType, lex
from herlang.nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
)
from herlang.parser import ParseError, Parser, parse
from herlang.utils import split_lines


def parse_text(text):
    return parse(lex(split_lines(text)))


def test_function_with_parameter():
    program = parse_text('function greet name:\n    say "Hello, " name\nend\n')
    assert program == Program(
        [
            FunctionDef(
                "greet",
                "name",
                [SayStatement(["Hello, ", "name"], [False, True], "\\n")],
            )
        ]
    )


def test_function_without_parameter():
    program = parse_text('function hello:\n    say "hi"\nend\n')
    assert program.statements == [
        FunctionDef("hello", "", [SayStatement(["hi"], [False])])
    ]


def test_start_block_with_set_and_calls():
    source = 'start:\n    set x\n    greet "Bob"\n    greet x\n    hello\nend\n'
    program = parse_text(source)
    assert program.statements == [
        StartBlock(
            [
                SetStatement("x"),
                FunctionCall("greet", "Bob", TokenType.STRING_LITERAL),
                FunctionCall("greet", "x", TokenType.IDENTIFIER),
                FunctionCall("hello", "", TokenType.EOF),
            ]
        )
    ]


def test_say_with_custom_ending():
    program = parse_text('start:\n    say "a" end=""\nend\n')
    (block,) = program.statements
    assert block.body == [SayStatement(["a"], [False], "")]


def test_blank_lines_and_comments_are_ignored():
    program = parse_text('\n# comment\nstart:\n\n    set y\n\nend\n')
    assert program.statements == [StartBlock([SetStatement("y")])]


def test_empty_input_gives_empty_program():
    assert parse_text("") == Program([])
    assert parse([]) == Program([])


def test_tokens_without_eof_are_accepted():
    tokens = [
        Token(TokenType.KEYWORD, "set", 1),
        Token(TokenType.IDENTIFIER, "x", 1),
    ]
    assert Parser(tokens).parse().statements == [SetStatement("x")]


def test_unknown_tokens_are_skipped():
    program = parse_text("= = set x\n")
    assert program.statements == [SetStatement("x")]


def test_missing_colon_after_start():
    with pytest.raises(ParseError, match="Expected ':' after start"):
        parse_text("start\n    set x\nend\n")


def test_missing_colon_after_parameter():
    with pytest.raises(ParseError, match="Expected ':' after parameter"):
        parse_text("function f x y\nend\n")


def test_unterminated_block():
    with pytest.raises(ParseError, match="Unexpected end of file inside block."):
        parse_text('start:\n    say "hi"\n')


def test_say_end_requires_equals():
    with pytest.raises(ParseError, match="Expected '=' after 'end'"):
        parse_text('start:\n    say "a" end "b"\nend\n')


def test_say_end_requires_string():
    with pytest.raises(ParseError, match="Expected string literal after end="):
        parse_text('start:\n    say "a" end=b\nend\n')


def test_say_rejects_symbols():
    with pytest.raises(ParseError, match="Unexpected token in 'say': \\("):
        parse_text('start:\n    say ( "a"\nend\n')