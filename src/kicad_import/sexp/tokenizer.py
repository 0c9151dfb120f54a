"""Lexer for KiCad S-expression text.

Produces a flat list of tokens (parentheses, quoted strings, bare atoms)
with the line/column each one starts at. Tokenizing never fails: an
unterminated string simply runs to the end of the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


class TokenKind(Enum):
    """Lexical category of a token."""

    LPAREN = "lparen"
    RPAREN = "rparen"
    STRING = "string"
    ATOM = "atom"


@dataclass(frozen=True)
class Token:
    """A lexical token. ``line`` and ``col`` are 1-based."""

    kind: TokenKind
    text: str
    line: int
    col: int


def tokenize(text: str) -> list[Token]:
    """Split S-expression text into tokens.

    Args:
        text: Raw file contents.

    Returns:
        Tokens in input order. Whitespace is dropped; quoted strings have
        their quotes removed and ``\\n``, ``\\t``, ``\\r`` resolved (any other
        escaped character stands for itself).
    """
    tokens: list[Token] = []
    append = tokens.append
    length = len(text)
    pos = 0
    line = 1
    col = 1

    while pos < length:
        ch = text[pos]

        if ch.isspace():
            if ch == "\n":
                line += 1
                col = 1
            else:
                col += 1
            pos += 1
            continue

        if ch == "(":
            append(Token(TokenKind.LPAREN, "(", line, col))
            pos += 1
            col += 1
            continue

        if ch == ")":
            append(Token(TokenKind.RPAREN, ")", line, col))
            pos += 1
            col += 1
            continue

        if ch == '"':
            start_line = line
            start_col = col
            pos += 1
            col += 1
            chars: list[str] = []
            while pos < length:
                ch = text[pos]
                if ch == '"':
                    break
                if ch == "\\" and pos + 1 < length:
                    pos += 1
                    col += 1
                    ch = text[pos]
                    chars.append(_ESCAPES.get(ch, ch))
                else:
                    chars.append(ch)
                if ch == "\n":
                    line += 1
                    col = 1
                else:
                    col += 1
                pos += 1
            append(Token(TokenKind.STRING, "".join(chars), start_line, start_col))
            # closing quote (a no-op past the end of an unterminated string)
            pos += 1
            col += 1
            continue

        start = pos
        while pos < length:
            ch = text[pos]
            if ch.isspace() or ch == "(" or ch == ")":
                break
            pos += 1
        append(Token(TokenKind.ATOM, text[start:pos], line, col))
        col += pos - start

    return tokens
