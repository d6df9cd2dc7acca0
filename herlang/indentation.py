"""Indentation checks that produce warnings but never stop compilation."""

from __future__ import annotations

from .utils import split_lines, trim

_BLOCK_STARTS = ("function", "start:", "if", "elif", "else")


def _leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def check_indentation(source: str) -> list[str]:
    """Return the indentation warnings for *source*, each as one printable line."""
    warnings: list[str] = []
    stack: list[int] = []

    for lineno, line in enumerate(split_lines(source), start=1):
        trimmed = trim(line)
        if not trimmed or trimmed.startswith("#"):
            continue

        indent = _leading_spaces(line)

        if trimmed == "end":
            if not stack:
                warnings.append(
                    f"[Warning] Line {lineno}: 'end' without matching block start."
                )
            else:
                expected = stack.pop()
                if indent != expected:
                    warnings.append(
                        f"[Warning] Line {lineno}: 'end' indentation mismatch. "
                        f"Expected {expected} spaces but got {indent}."
                    )
        elif trimmed.startswith(_BLOCK_STARTS):
            stack.append(indent)
        elif stack and indent <= stack[-1]:
            warnings.append(
                f"[Warning] Line {lineno}: Inconsistent indentation. "
                f"Expected greater than {stack[-1]} spaces but got {indent}."
            )

    if stack:
        warnings.append(
            "[Warning] EOF: Some blocks not closed properly (missing 'end')."
        )
    return warnings