"""Emit C++ source code for a parsed program."""

from __future__ import annotations

from typing import Iterator

from .lexer import TokenType
from .nodes import (
    FunctionCall,
    FunctionDef,
    Program,
    SayStatement,
    SetStatement,
    StartBlock,
    Statement,
)

PRELUDE = (
    "#include <iostream>\n#include <string>\n\n"
    "#ifdef _WIN32\n#include <windows.h>\n#endif\n\n"
)
MAIN_OPENING = "int main() {\n#ifdef _WIN32\nSetConsoleOutputCP(CP_UTF8);\n#endif\n\n"


def _indent(level: int) -> str:
    return " " * (level * 4)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _quoted(text: str) -> str:
    return f'"{_escape(text)}"'


def _emit(statement: Statement, level: int = 1) -> Iterator[str]:
    ind = _indent(level)

    if isinstance(statement, SayStatement):
        parts = [
            arg if is_var else _quoted(arg)
            for arg, is_var in zip(statement.args, statement.is_vars)
        ]
        parts.append("std::endl" if statement.end == "\\n" else _quoted(statement.end))
        yield f"{ind}std::cout << {' << '.join(parts)};\n"
    elif isinstance(statement, SetStatement):
        yield f"{ind}auto {statement.var} = 0;\n"
    elif isinstance(statement, FunctionDef):
        params = f"auto {statement.param}" if statement.param else ""
        yield f"void {statement.name}({params}) {{\n"
        for inner in statement.body:
            yield from _emit(inner, level + 1)
        yield "}\n"
    elif isinstance(statement, FunctionCall):
        arg = statement.arg
        if arg and statement.arg_type is TokenType.STRING_LITERAL:
            arg = _quoted(arg)
        yield f"{ind}{statement.name}({arg});\n"
    elif isinstance(statement, StartBlock):
        yield MAIN_OPENING
        for inner in statement.body:
            yield from _emit(inner, level + 1)
        yield f"{_indent(level + 1)}return 0;\n"
        yield "}\n"


def generate_cpp(program: Program) -> str:
    """Return C++ code: function definitions first, then the start blocks."""
    chunks = [PRELUDE]
    for kind in (FunctionDef, StartBlock):
        for statement in program.statements:
            if isinstance(statement, kind):
                chunks.extend(_emit(statement, 0))
                chunks.append("\n")
    return "".join(chunks)