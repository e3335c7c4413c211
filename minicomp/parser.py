"""Recursive-descent parser for minicomp token streams.

Parsing is driven by an index-continuation protocol: ``parse_node`` consumes
exactly one logical unit (a literal, or one fully parenthesised call) starting
at a token index and returns the node together with the index the next call
should resume from. ``generate_ast`` keeps calling it at top level until the
tokens run out, so a program is a sequence of sibling expressions rather than
a single root expression.
"""

import logging
from typing import Optional

from .tokenizer import tokenize
from .types import AST, ASTNode, NodeKind, Token, TokenKind

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

_LITERALS = {
    TokenKind.NUMBER: NodeKind.NUMBER_LITERAL,
    TokenKind.WORD: NodeKind.WORD_OPERATOR,
}


class ParseError(SyntaxError):
    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(message)


class UnexpectedToken(ParseError):
    def __init__(self, kind: TokenKind, position: int):
        self.kind = kind
        super().__init__(f"unexpected {kind.value} at token {position}", position)


class UnbalancedParens(ParseError):
    def __init__(self, position: int):
        super().__init__(f"unterminated ( opened at token {position}", position)


class NestingTooDeep(ParseError):
    def __init__(self, position: int, max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            f"nesting deeper than {max_depth} at token {position}", position
        )


def parse_node(
    tokens: list[Token], position: int, max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[ASTNode, Optional[int]]:
    """Parse one expression starting at ``position``.

    Returns:
        (node, next_position). When ``position`` is past the last token the
        node is a Terminator and next_position is None.

    Raises:
        UnexpectedToken: the token at ``position`` cannot start an expression,
            or a call's head is not a literal.
        UnbalancedParens: the tokens end inside a call.
        NestingTooDeep: calls are nested more than ``max_depth`` levels.
    """
    return _parse_node(tokens, position, 0, max_depth)


def _parse_node(
    tokens: list[Token], pos: int, depth: int, max_depth: int
) -> tuple[ASTNode, Optional[int]]:
    if pos >= len(tokens):
        return ASTNode(NodeKind.TERMINATOR), None

    tok = tokens[pos]
    if tok.kind in _LITERALS:
        return ASTNode(_LITERALS[tok.kind], tok.text), pos + 1
    if tok.kind != TokenKind.LEFT_PAREN:
        raise UnexpectedToken(tok.kind, pos)

    if depth >= max_depth:
        raise NestingTooDeep(pos, max_depth)

    head_pos = pos + 1
    if head_pos >= len(tokens):
        raise UnbalancedParens(pos)
    head = tokens[head_pos]
    if head.kind not in _LITERALS:
        raise UnexpectedToken(head.kind, head_pos)

    children: list[ASTNode] = []
    cur = head_pos + 1
    while True:
        if cur >= len(tokens):
            raise UnbalancedParens(pos)
        if tokens[cur].kind == TokenKind.RIGHT_PAREN:
            break
        child, cur = _parse_node(tokens, cur, depth + 1, max_depth)
        children.append(child)

    return ASTNode(NodeKind.CALL_EXPRESSION, head.text, children), cur + 1


def generate_ast(tokens: list[Token], max_depth: int = DEFAULT_MAX_DEPTH) -> AST:
    """Parse every top-level expression in ``tokens`` into an AST.

    The returned body starts with the Root node, followed by one node per
    top-level expression in source order.
    """
    ast = AST()
    node, pos = parse_node(tokens, 0, max_depth)
    while node.kind != NodeKind.TERMINATOR:
        ast.body.append(node)
        node, pos = parse_node(tokens, pos, max_depth)

    log.debug("parsed %d top-level expressions", len(ast.expressions))
    return ast


def parse(src: str, max_depth: int = DEFAULT_MAX_DEPTH) -> AST:
    """Tokenize and parse a minicomp source string."""
    return generate_ast(tokenize(src), max_depth)
