"""Depth-first AST walker that dispatches per-kind handlers."""

import logging
from typing import Any, Mapping

from .types import AST, ASTNode, Handler, NodeKind

log = logging.getLogger(__name__)


class TraversalError(RuntimeError):
    pass


class UnknownNodeKind(TraversalError):
    def __init__(self, kind: Any):
        self.kind = kind
        super().__init__(f"unknown node kind: {kind!r}")


class _WalkState:
    __slots__ = ("handlers", "calls")

    def __init__(self, handlers: dict[NodeKind, Handler]):
        self.handlers = handlers
        self.calls = 0


def _kind_of(kind: Any) -> NodeKind:
    try:
        return NodeKind(kind)
    except (ValueError, TypeError):
        raise UnknownNodeKind(kind) from None


def traverse(ast: AST, handlers: Mapping[Any, Handler]) -> None:
    """Walk ``ast`` in pre-order, calling ``handlers[node.kind](node, parent)``.

    Top-level expressions are visited with the Root node as their parent; the
    Root itself is never dispatched. Children of a CallExpression are always
    visited, whether or not a CallExpression handler is registered. Kinds
    without a handler are skipped.

    Args:
        ast: Parsed program (from minicomp.parse / generate_ast)
        handlers: Mapping of NodeKind (or its string name) to a callable
            taking (node, parent)

    Raises:
        UnknownNodeKind: a handler key or a node kind is not a NodeKind.
    """
    st = _WalkState({_kind_of(k): fn for k, fn in handlers.items()})
    _walk_list(ast.expressions, ast.root, st)
    log.debug("traversal finished, %d handler calls", st.calls)


def _walk_list(nodes: list[ASTNode], parent: ASTNode, st: _WalkState) -> None:
    for node in nodes:
        _walk(node, parent, st)


def _walk(node: ASTNode, parent: ASTNode, st: _WalkState) -> None:
    kind = _kind_of(node.kind)

    fn = st.handlers.get(kind)
    if fn is not None:
        st.calls += 1
        fn(node, parent)

    if kind == NodeKind.CALL_EXPRESSION:
        _walk_list(node.children, node, st)
