"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from .lexer import TokenType


class Statement:
    """Base class of every statement node."""


@dataclass
class SayStatement(Statement):
    """Print the arguments, then *end* (a literal ``\\n`` means a line break)."""

    args: list[str] = field(default_factory=list)
    is_vars: list[bool] = field(default_factory=list)
    end: str = "\\n"


@dataclass
class SetStatement(Statement):
    """Declare a variable initialised to zero."""

    var: str


@dataclass
class FunctionCall(Statement):
    """Call a function with at most one argument."""

    name: str
    arg: str = ""
    arg_type: TokenType = TokenType.EOF


@dataclass
class FunctionDef(Statement):
    """Define a function with an optional single parameter."""

    name: str
    param: str = ""
    body: list[Statement] = field(default_factory=list)


@dataclass
class StartBlock(Statement):
    """The program's entry block."""

    body: list[Statement] = field(default_factory=list)


@dataclass
class Program:
    """The whole parsed source."""

    statements: list[Statement] = field(default_factory=list)