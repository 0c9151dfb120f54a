"""Parse KiCad .kicad_pcb board files into typed, immutable records."""

from .document import BoardDocument
from .exceptions import (
    InvalidFormatError,
    KicadImportError,
    KiCadSyntaxError,
    MissingClosingParenthesisError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .schema import KiCadParser, KiCadPCB, parse_kicad
from .validation import validate_board

__version__ = "0.1.0"

__all__ = [
    "BoardDocument",
    "InvalidFormatError",
    "KiCadPCB",
    "KiCadParser",
    "KiCadSyntaxError",
    "KicadImportError",
    "MissingClosingParenthesisError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "parse_kicad",
    "validate_board",
]
