"""Exception hierarchy for KiCad board import.

Only syntax-level problems are fatal: unbalanced parentheses, premature end
of input, or a root node that is not ``kicad_pcb``. Everything else the
builder encounters degrades to defaults and never raises.
"""

from __future__ import annotations

from typing import Any


class KicadImportError(Exception):
    """Base exception for all KiCad import errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a serializable dict."""
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


def _location(line: int | None, col: int | None) -> str:
    if line is None:
        return ""
    if col is None:
        return f" at line {line}"
    return f" at line {line}, column {col}"


class KiCadSyntaxError(KicadImportError):
    """Raised when the input cannot be read as a KiCad board at all."""

    error_code = "SYNTAX_ERROR"

    def __init__(
        self,
        message: str,
        line: int | None = None,
        col: int | None = None,
        error_code: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(
            message + _location(line, col),
            error_code or self.error_code,
            line=line,
            col=col,
            **kwargs,
        )


class UnexpectedEndOfInputError(KiCadSyntaxError):
    """Raised when tokens run out where an expression was required."""

    error_code = "UNEXPECTED_END_OF_INPUT"

    def __init__(self, message: str = "Unexpected end of input", **kwargs: Any):
        super().__init__(message, **kwargs)


class MissingClosingParenthesisError(KiCadSyntaxError):
    """Raised when an open list is never closed.

    ``line``/``col`` point at the unmatched ``(``.
    """

    error_code = "MISSING_CLOSING_PARENTHESIS"

    def __init__(self, message: str = "Missing closing parenthesis", **kwargs: Any):
        super().__init__(message, **kwargs)


class UnexpectedTokenError(KiCadSyntaxError):
    """Raised when a token cannot start an expression (e.g. a stray ``)``)."""

    error_code = "UNEXPECTED_TOKEN"

    def __init__(self, message: str, token_kind: str | None = None, **kwargs: Any):
        super().__init__(message, token_kind=token_kind, **kwargs)


class InvalidFormatError(KiCadSyntaxError):
    """Raised when the root node is not ``kicad_pcb``."""

    error_code = "INVALID_FORMAT"

    def __init__(self, message: str, root_name: str | None = None, **kwargs: Any):
        super().__init__(message, root_name=root_name, **kwargs)


class BoardLoadingError(KicadImportError):
    """Raised when a board file cannot be read from disk."""

    error_code = "BOARD_LOADING_ERROR"

    def __init__(self, message: str, board_path: str | None = None, **kwargs: Any):
        super().__init__(message, "BOARD_LOADING_ERROR", board_path=board_path, **kwargs)


class BoardNotLoadedError(KicadImportError):
    """Raised when board state is queried before a board was opened."""

    error_code = "BOARD_NOT_LOADED"

    def __init__(self, message: str = "No board loaded. Use open_board first.", **kwargs: Any):
        super().__init__(message, "BOARD_NOT_LOADED", **kwargs)


__all__ = [
    "KicadImportError",
    "KiCadSyntaxError",
    "UnexpectedEndOfInputError",
    "MissingClosingParenthesisError",
    "UnexpectedTokenError",
    "InvalidFormatError",
    "BoardLoadingError",
    "BoardNotLoadedError",
]
