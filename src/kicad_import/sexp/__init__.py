"""S-expression tokenizer, parser, and normalizer for KiCad file formats."""

from .normalize import ParsedSExpr, to_parsed_sexpr
from .parser import SExpr, parse, parse_sexpr
from .tokenizer import Token, TokenKind, tokenize

__all__ = [
    "ParsedSExpr",
    "SExpr",
    "Token",
    "TokenKind",
    "parse",
    "parse_sexpr",
    "to_parsed_sexpr",
    "tokenize",
]
