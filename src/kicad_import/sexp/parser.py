"""Recursive-descent parser from tokens to a generic S-expression tree.

The tree carries syntax only: an atom is a ``str`` (quoted or bare, the
distinction is gone by this point) and a list is a ``tuple`` of further
expressions. Tuples keep the tree immutable once built.

Usage::

    tree = parse('(kicad_pcb (version 20221018) (generator "pcbnew"))')
    tree[0]      # "kicad_pcb"
    tree[1]      # ("version", "20221018")
"""

from __future__ import annotations

from typing import Union

from ..exceptions import (
    MissingClosingParenthesisError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .tokenizer import Token, TokenKind, tokenize

SExpr = Union[str, tuple["SExpr", ...]]


def is_atom(expr: SExpr) -> bool:
    return isinstance(expr, str)


class _TokenStream:
    """Cursor over a token list."""

    __slots__ = ("_tokens", "_pos", "_length")

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0
        self._length = len(tokens)

    def peek(self) -> Token | None:
        if self._pos >= self._length:
            return None
        return self._tokens[self._pos]

    def advance(self) -> None:
        self._pos += 1


def parse_sexpr(tokens: list[Token]) -> SExpr:
    """Build one expression from the start of ``tokens``.

    Tokens after the first complete expression are ignored, so
    ``(a b))`` parses as ``("a", "b")``.

    Raises:
        UnexpectedEndOfInputError: No token where an expression must start.
        MissingClosingParenthesisError: A list is still open at end of input.
        UnexpectedTokenError: A ``)`` where an expression must start.
    """
    return _parse_expr(_TokenStream(tokens))


def _parse_expr(stream: _TokenStream) -> SExpr:
    token = stream.peek()
    if token is None:
        raise UnexpectedEndOfInputError()

    if token.kind is TokenKind.LPAREN:
        stream.advance()
        items: list[SExpr] = []
        while True:
            nxt = stream.peek()
            if nxt is None:
                raise MissingClosingParenthesisError(line=token.line, col=token.col)
            if nxt.kind is TokenKind.RPAREN:
                stream.advance()
                return tuple(items)
            items.append(_parse_expr(stream))

    if token.kind is TokenKind.STRING or token.kind is TokenKind.ATOM:
        stream.advance()
        return token.text

    raise UnexpectedTokenError(
        f"Unexpected token: {token.kind.value}",
        token_kind=token.kind.value,
        line=token.line,
        col=token.col,
    )


def parse(text: str) -> SExpr:
    """Tokenize and parse S-expression text into a tree."""
    return parse_sexpr(tokenize(text))
