"""Loaded-board state for the MCP server.

Holds the one board document the server is currently answering questions
about. All reads and writes go through a module-level lock. The parser
itself keeps no state; this module exists only for the server surface.
"""

from __future__ import annotations

import threading

from .document import BoardDocument
from .exceptions import BoardNotLoadedError
from .logging_config import create_logger
from .schema import BoardSummary, KiCadPCB

logger = create_logger(__name__)

_lock = threading.Lock()
_current_doc: BoardDocument | None = None
_current_summary: BoardSummary | None = None


def load_board(path: str) -> BoardSummary:
    """Load a board file and make it the current board."""
    global _current_doc, _current_summary
    # Parse outside the lock
    doc = BoardDocument.load(path)
    summary = doc.summary()
    with _lock:
        _current_doc = doc
        _current_summary = summary
    logger.info("Loaded board %s", doc.path)
    return summary


def get_document() -> BoardDocument:
    """Get the currently loaded document, or raise."""
    with _lock:
        if _current_doc is None:
            raise BoardNotLoadedError()
        return _current_doc


def get_board() -> KiCadPCB:
    return get_document().board


def get_summary() -> BoardSummary:
    """Get the current board summary, or raise."""
    with _lock:
        if _current_summary is None:
            raise BoardNotLoadedError()
        return _current_summary


def is_loaded() -> bool:
    with _lock:
        return _current_doc is not None


def get_board_path() -> str | None:
    with _lock:
        if _current_doc is None:
            return None
        return str(_current_doc.path)


def clear() -> None:
    """Forget the current board."""
    global _current_doc, _current_summary
    with _lock:
        _current_doc = None
        _current_summary = None
