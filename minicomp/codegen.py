"""Render transformed s-expression data back to minicomp source text."""

import string
from typing import Any

_LETTERS = frozenset(string.ascii_letters)


class CodegenError(RuntimeError):
    pass


def _render(expr: Any) -> str:
    if isinstance(expr, list):
        return "(" + " ".join(_render(e) for e in expr) + ")"
    if isinstance(expr, bool):
        raise CodegenError(f"cannot render {expr!r}")
    if isinstance(expr, int) and expr >= 0:
        return str(expr)
    # only a letter run reads back as the same word
    if isinstance(expr, str) and expr and set(expr) <= _LETTERS:
        return expr
    raise CodegenError(f"cannot render {expr!r}")


def generate_code(tree: list[Any]) -> str:
    """Render a list of top-level s-expressions as a single line of source.

    Raises:
        CodegenError: on anything other than a non-negative int, a string of
            ASCII letters, or a list of those.
    """
    return " ".join(_render(expr) for expr in tree)
