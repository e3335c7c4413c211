from .tokenizer import tokenize, LexError
from .parser import parse, parse_node, generate_ast, ParseError
from .traverse import traverse, TraversalError
from .transform import transform, TransformError
from .codegen import generate_code, CodegenError
from .types import AST, ASTNode, NodeKind, Token, TokenKind

__all__ = [
    "tokenize", "parse", "parse_node", "generate_ast", "traverse", "transform",
    "generate_code", "LexError", "ParseError", "TraversalError", "TransformError",
    "CodegenError",
    "AST", "ASTNode", "NodeKind", "Token", "TokenKind",
]
