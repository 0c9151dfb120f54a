"""Document wrapper for .kicad_pcb files on disk.

The parser itself works on strings only; this module owns the file read,
encoding handling, and attaching the path to errors.
"""

from __future__ import annotations

from pathlib import Path

from .constants import BOARD_EXTENSION
from .exceptions import BoardLoadingError, KiCadSyntaxError
from .logging_config import create_logger, log_source
from .schema import BoardSummary, KiCadPCB, parse_kicad, summarize

logger = create_logger(__name__)


class BoardDocument:
    """A loaded and parsed KiCad board file.

    Usage::

        doc = BoardDocument.load("board.kicad_pcb")
        doc.board.version      # 20241229
        doc.summary().title
    """

    __slots__ = ("path", "board")

    def __init__(self, path: Path, board: KiCadPCB) -> None:
        self.path = path
        self.board = board

    @classmethod
    def load(cls, path: str | Path) -> BoardDocument:
        """Read and parse a .kicad_pcb file.

        Raises:
            BoardLoadingError: The file is missing, has the wrong extension,
                cannot be read, or is not valid UTF-8.
            KiCadSyntaxError: The contents are not a well-formed board; the
                error's ``board_path`` names the file.
        """
        path = Path(path)
        if not path.exists():
            raise BoardLoadingError(f"File not found: {path}", board_path=str(path))
        if path.suffix != BOARD_EXTENSION:
            raise BoardLoadingError(
                f"Not a {BOARD_EXTENSION} file: {path}", board_path=str(path)
            )
        try:
            text = path.read_text(encoding="utf-8")
        except PermissionError as e:
            raise BoardLoadingError(
                f"Permission denied reading {path}: {e}", board_path=str(path)
            ) from e
        except UnicodeDecodeError as e:
            raise BoardLoadingError(
                f"Invalid encoding in {path}: {e}", board_path=str(path)
            ) from e
        except OSError as e:
            raise BoardLoadingError(f"Error reading {path}: {e}", board_path=str(path)) from e

        with log_source(str(path)):
            try:
                board = parse_kicad(text)
            except KiCadSyntaxError as e:
                e.board_path = str(path)
                logger.warning("Failed to parse %s: %s", path, e.message)
                raise

        return cls(path=path, board=board)

    @property
    def file_type(self) -> str:
        """Return the file type based on extension (e.g., 'kicad_pcb')."""
        return self.path.suffix.lstrip(".")

    def summary(self) -> BoardSummary:
        return summarize(self.board)

    def __repr__(self) -> str:
        return f"BoardDocument({self.path.name!r}, version={self.board.version!r})"
