"""Character-level tokenizer: source string to a flat list of tokens."""

import logging
import string

from .types import Token, TokenKind

log = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)


class LexError(SyntaxError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"invalid character {char!r} at position {position}")


def _read_run(src: str, start: int, charset: frozenset) -> int:
    end = start
    while end < len(src) and src[end] in charset:
        end += 1
    return end


def tokenize(src: str) -> list[Token]:
    """Split source text into tokens.

    Spaces separate tokens and are dropped. Parentheses are single-character
    tokens; runs of ASCII digits and runs of ASCII letters each become one
    token.

    Raises:
        LexError: on any character outside space, parens, letters and digits.
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(src):
        ch = src[pos]
        if ch == " ":
            pos += 1
            continue
        if ch == "(":
            tokens.append(Token(TokenKind.LEFT_PAREN, ch, pos))
            pos += 1
            continue
        if ch == ")":
            tokens.append(Token(TokenKind.RIGHT_PAREN, ch, pos))
            pos += 1
            continue
        if ch in _DIGITS:
            end = _read_run(src, pos, _DIGITS)
            tokens.append(Token(TokenKind.NUMBER, src[pos:end], pos))
            pos = end
            continue
        if ch in _LETTERS:
            end = _read_run(src, pos, _LETTERS)
            tokens.append(Token(TokenKind.WORD, src[pos:end], pos))
            pos = end
            continue
        raise LexError(ch, pos)

    log.debug("tokenized %d characters into %d tokens", len(src), len(tokens))
    return tokens
