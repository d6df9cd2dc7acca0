"""Turn source lines into a flat list of tokens."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from .utils import trim

KEYWORDS = frozenset(
    {
        "function",
        "start",
        "end",
        "if",
        "elif",
        "else",
        "say",
        "set",
        "add",
        "minus",
        "multiply",
        "divide",
    }
)

SYMBOLS = frozenset(":=()")

NEWLINE_VALUE = "\\n"

_WHITESPACE = frozenset(" \t\n\v\f\r")
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class TokenType(Enum):
    """Kinds of token the lexer produces."""

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
    """A single token with the 1-based line it came from."""

    type: TokenType
    value: str
    line: int = 0


class LexError(ValueError):
    """Raised when the source cannot be split into tokens."""


def _lex_line(line: str, lineno: int) -> Iterable[Token]:
    j = 0
    size = len(line)
    while j < size:
        ch = line[j]
        if ch in _WHITESPACE:
            j += 1
        elif ch == '"':
            end = line.find('"', j + 1)
            if end == -1:
                raise LexError(f"Unterminated string at line {lineno}")
            yield Token(TokenType.STRING_LITERAL, line[j + 1 : end], lineno)
            j = end + 1
        elif ch in _IDENT_START:
            start = j
            while j < size and line[j] in _IDENT_CHARS:
                j += 1
            word = line[start:j]
            kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
            yield Token(kind, word, lineno)
        elif ch in SYMBOLS:
            yield Token(TokenType.SYMBOL, ch, lineno)
            j += 1
        else:
            # Characters the language does not know are ignored.
            j += 1


def lex(lines: list[str]) -> list[Token]:
    """Tokenize *lines*; each non-blank, non-comment line ends with a NEWLINE token."""
    tokens: list[Token] = []
    for lineno, raw in enumerate(lines, start=1):
        line = trim(raw)
        if not line or line.startswith("#"):
            continue
        tokens.extend(_lex_line(line, lineno))
        tokens.append(Token(TokenType.NEWLINE, NEWLINE_VALUE, lineno))
    tokens.append(Token(TokenType.EOF, "", len(lines)))
    return tokens