"""Small text helpers shared by the compiler stages."""

from __future__ import annotations

# The characters the C locale treats as white space.
_WHITESPACE = " \t\n\v\f\r"


def trim(s: str) -> str:
    """Return *s* without leading and trailing ASCII white space."""
    return s.strip(_WHITESPACE)


def split_lines(text: str) -> list[str]:
    """Split *text* on newlines; a trailing newline does not add an empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines