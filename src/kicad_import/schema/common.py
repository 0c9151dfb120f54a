"""Common typed data models shared across board records."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from ..constants import DEFAULT_FONT_SIZE, DEFAULT_STROKE_TYPE
from ..sexp import ParsedSExpr


def _plain(value: Any) -> Any:
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, ParsedSExpr):
        return {
            "name": value.name,
            "values": list(value.values),
            "children": [_plain(c) for c in value.children],
        }
    if isinstance(value, (tuple, list)):
        return [_plain(v) for v in value]
    return value


class Record:
    """Mixin giving frozen dataclasses a JSON-ready ``to_dict``.

    Fields left at ``None`` were absent in the source file and are omitted.
    """

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            d[f.name] = _plain(value)
        return d


@dataclass(frozen=True)
class Point(Record):
    """2D point in board coordinates (mm)."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Position(Record):
    """2D position with optional rotation in degrees."""

    x: float = 0.0
    y: float = 0.0
    angle: float | None = None


@dataclass(frozen=True)
class Size(Record):
    """Width/height dimensions (mm)."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class XYZ(Record):
    """3D vector used by model offset/scale/rotate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Color(Record):
    """RGBA color; channels as written in the file."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass(frozen=True)
class Stroke(Record):
    """Line style of a graphic item."""

    width: float = 0.0
    type: str = DEFAULT_STROKE_TYPE  # "solid", "dash", "dot", "dash_dot", "default"
    color: Color | None = None


@dataclass(frozen=True)
class Font(Record):
    size: Size = field(default_factory=lambda: Size(DEFAULT_FONT_SIZE, DEFAULT_FONT_SIZE))
    thickness: float | None = None
    bold: bool | None = None
    italic: bool | None = None


@dataclass(frozen=True)
class TextEffects(Record):
    """Font and justification of a text item."""

    font: Font | None = None
    justify: tuple[str, ...] | None = None  # "left", "right", "top", "bottom", "mirror"
