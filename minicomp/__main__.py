"""CLI: python -m minicomp <expression | ->"""

import logging
import os
import sys

from .codegen import CodegenError, generate_code
from .parser import ParseError, parse
from .tokenizer import LexError
from .transform import TransformError, transform
from .traverse import TraversalError, traverse
from .types import ASTNode, NodeKind


def _log_level() -> int:
    name = os.getenv("LOGLEVEL", "").upper()
    level = getattr(logging, name, None) if name else None
    if isinstance(level, int):
        return level
    return logging.WARNING


def _print_node(node: ASTNode, parent: ASTNode) -> None:
    print(f"{node.kind.value} {node.value} (parent: {parent.kind.value})")


def main():
    logging.basicConfig(level=_log_level(), format="%(message)s", stream=sys.stderr)

    if len(sys.argv) < 2:
        print("Usage: python -m minicomp <expression | ->", file=sys.stderr)
        sys.exit(1)

    src = sys.argv[1]
    if src == "-":
        src = sys.stdin.read().strip()

    try:
        ast = parse(src)
        traverse(ast, {
            NodeKind.NUMBER_LITERAL: _print_node,
            NodeKind.WORD_OPERATOR: _print_node,
            NodeKind.CALL_EXPRESSION: _print_node,
        })
        print(generate_code(transform(ast)))
    except (LexError, ParseError, TraversalError, TransformError, CodegenError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
