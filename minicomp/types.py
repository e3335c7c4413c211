from dataclasses import dataclass, field
from enum import Enum
from typing import Callable


class TokenKind(str, Enum):
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    NUMBER = "number"
    WORD = "word"


class NodeKind(str, Enum):
    ROOT = "Root"
    NUMBER_LITERAL = "NumberLiteral"
    WORD_OPERATOR = "WordOperator"
    CALL_EXPRESSION = "CallExpression"
    TERMINATOR = "Terminator"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int = 0


@dataclass
class ASTNode:
    kind: NodeKind
    value: str = ""
    children: list["ASTNode"] = field(default_factory=list)


@dataclass
class AST:
    # body[0] is always the Root node
    body: list[ASTNode] = field(default_factory=lambda: [ASTNode(NodeKind.ROOT)])

    @property
    def root(self) -> ASTNode:
        return self.body[0]

    @property
    def expressions(self) -> list[ASTNode]:
        return self.body[1:]


Handler = Callable[[ASTNode, ASTNode], None]
