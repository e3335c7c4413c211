"""Rebuild a parsed AST as nested-list s-expression data.

Numbers become ``int``, words stay ``str`` and each call becomes a list whose
first element is its head. The new tree is assembled entirely from traversal
handlers.
"""

import logging
import string
from typing import Any

from .traverse import traverse
from .types import AST, ASTNode, NodeKind

log = logging.getLogger(__name__)

# Sexpr type: int | str | list[Sexpr]
Sexpr = Any


class TransformError(RuntimeError):
    pass


def _number(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        # int() refuses digit strings above sys.get_int_max_str_digits()
        raise TransformError(
            f"cannot convert number literal to int ({len(text)} digits)"
        ) from None


def _head(text: str) -> Sexpr:
    # heads are a single number or word token, so the first char decides
    if text and text[0] in string.digits:
        return _number(text)
    return text


def transform(ast: AST) -> list[Sexpr]:
    """Convert ``ast`` into a list of top-level s-expressions.

    Raises:
        TransformError: a number literal has more digits than int() accepts.
    """
    out: list[Sexpr] = []
    # old parent node -> list its transformed children go into
    containers: dict[int, list[Sexpr]] = {id(ast.root): out}

    def on_number(node: ASTNode, parent: ASTNode) -> None:
        containers[id(parent)].append(_number(node.value))

    def on_word(node: ASTNode, parent: ASTNode) -> None:
        containers[id(parent)].append(node.value)

    def on_call(node: ASTNode, parent: ASTNode) -> None:
        expr = [_head(node.value)]
        containers[id(parent)].append(expr)
        containers[id(node)] = expr

    traverse(ast, {
        NodeKind.NUMBER_LITERAL: on_number,
        NodeKind.WORD_OPERATOR: on_word,
        NodeKind.CALL_EXPRESSION: on_call,
    })
    log.debug("transformed %d top-level expressions", len(out))
    return out
