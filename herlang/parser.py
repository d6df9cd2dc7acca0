"""Build a syntax tree from the token stream."""

from __future__ import annotations

from typing import Sequence

from .lexer import Token, TokenType
from .nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
    Statement,
)

_MAX_BLOCK_STATEMENTS = 10000
_DEFAULT_ENDING = "\\n"
_ARGUMENT_TYPES = (TokenType.STRING_LITERAL, TokenType.IDENTIFIER)


class ParseError(ValueError):
    """Raised when the tokens do not form a valid program."""


class Parser:
    """Recursive-descent parser over a list of tokens."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token:
        if self._pos >= len(self._tokens):
            return Token(TokenType.EOF, "")
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._peek()
        if self._pos < len(self._tokens):
            self._pos += 1
        return token

    def _at_keyword(self, token: Token, word: str) -> bool:
        return token.type is TokenType.KEYWORD and token.value == word

    def _skip_newlines(self) -> None:
        while self._peek().type is TokenType.NEWLINE:
            self._advance()

    def parse(self) -> Program:
        """Parse every top-level statement and return the program."""
        program = Program()
        while self._pos < len(self._tokens):
            if self._peek().type is TokenType.EOF:
                break
            statement = self._statement()
            if statement is not None:
                program.statements.append(statement)
            else:
                self._advance()
        return program

    def _block(self) -> list[Statement]:
        body: list[Statement] = []
        parsed = 0
        while True:
            self._skip_newlines()
            current = self._peek()
            if self._at_keyword(current, "end"):
                self._advance()
                return body
            if current.type is TokenType.EOF:
                raise ParseError("Unexpected end of file inside block.")

            statement = self._statement()
            if statement is not None:
                body.append(statement)
            else:
                self._advance()

            parsed += 1
            if parsed > _MAX_BLOCK_STATEMENTS:
                raise ParseError(
                    "Too many statements parsed without encountering 'end'"
                )

    def _statement(self) -> Statement | None:
        self._skip_newlines()
        token = self._peek()

        if token.type is TokenType.EOF:
            return None
        if self._at_keyword(token, "function"):
            return self._function_def()
        if self._at_keyword(token, "start"):
            return self._start_block()
        if self._at_keyword(token, "say"):
            return self._say()
        if self._at_keyword(token, "set"):
            self._advance()
            return SetStatement(self._advance().value)
        if token.type is TokenType.IDENTIFIER:
            return self._call()

        # Unknown statement: skip the token so parsing makes progress.
        self._advance()
        return None

    def _function_def(self) -> FunctionDef:
        self._advance()
        name = self._advance()
        after_name = self._advance()

        param = ""
        if not (after_name.type is TokenType.SYMBOL and after_name.value == ":"):
            param = after_name.value
            if self._advance().value != ":":
                raise ParseError(
                    "Expected ':' after parameter in function definition"
                )
        return FunctionDef(name.value, param, self._block())

    def _start_block(self) -> StartBlock:
        self._advance()
        if self._advance().value != ":":
            raise ParseError("Expected ':' after start")
        return StartBlock(self._block())

    def _say(self) -> SayStatement:
        self._advance()
        args: list[str] = []
        is_vars: list[bool] = []
        ending = _DEFAULT_ENDING

        while True:
            following = self._peek()

            if self._at_keyword(following, "end"):
                self._advance()
                eq = self._peek()
                if eq.type is not TokenType.SYMBOL or eq.value != "=":
                    raise ParseError("Expected '=' after 'end'")
                self._advance()
                if self._peek().type is not TokenType.STRING_LITERAL:
                    raise ParseError("Expected string literal after end=")
                ending = self._advance().value
                break

            if following.type in (TokenType.NEWLINE, TokenType.EOF):
                self._advance()
                break

            if following.type in _ARGUMENT_TYPES:
                arg = self._advance()
                args.append(arg.value)
                is_vars.append(arg.type is TokenType.IDENTIFIER)
                comma = self._peek()
                if comma.type is TokenType.SYMBOL and comma.value == ",":
                    self._advance()
            else:
                raise ParseError(f"Unexpected token in 'say': {following.value}")

        return SayStatement(args, is_vars, ending)

    def _call(self) -> FunctionCall:
        name = self._advance()
        if self._peek().type in _ARGUMENT_TYPES:
            arg = self._advance()
            return FunctionCall(name.value, arg.value, arg.type)
        return FunctionCall(name.value, "", TokenType.EOF)


def parse(tokens: Sequence[Token]) -> Program:
    """Parse *tokens* into a program."""
    return Parser(tokens).parse()