"""Typed graphic items: board-level ``gr_*`` and footprint-level ``fp_*``.

Every record carries a literal ``type`` tag equal to its node name, so the
``Graphic`` and ``FootprintGraphic`` unions can be told apart by ``item.type``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from .common import Point, Position, Record, Stroke, TextEffects

Fill = Literal["none", "solid"]


@dataclass(frozen=True)
class GrLine(Record):
    type: Literal["gr_line"] = field(default="gr_line", init=False)
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    stroke: Stroke | None = None


@dataclass(frozen=True)
class GrArc(Record):
    """Three-point arc; ``mid`` is absent in files that predate KiCad 6."""

    type: Literal["gr_arc"] = field(default="gr_arc", init=False)
    start: Point = field(default_factory=Point)
    mid: Point | None = None
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    stroke: Stroke | None = None


@dataclass(frozen=True)
class GrCircle(Record):
    """Circle given by its center and a point on the circumference."""

    type: Literal["gr_circle"] = field(default="gr_circle", init=False)
    center: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class GrRect(Record):
    type: Literal["gr_rect"] = field(default="gr_rect", init=False)
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class GrPoly(Record):
    type: Literal["gr_poly"] = field(default="gr_poly", init=False)
    pts: tuple[Point, ...] = ()
    layer: str = ""
    width: float = 0.0
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class GrText(Record):
    type: Literal["gr_text"] = field(default="gr_text", init=False)
    text: str = ""
    at: Position = field(default_factory=Position)
    layer: str = ""
    effects: TextEffects | None = None


@dataclass(frozen=True)
class FpLine(Record):
    type: Literal["fp_line"] = field(default="fp_line", init=False)
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    stroke: Stroke | None = None


@dataclass(frozen=True)
class FpArc(Record):
    type: Literal["fp_arc"] = field(default="fp_arc", init=False)
    start: Point = field(default_factory=Point)
    mid: Point | None = None
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    stroke: Stroke | None = None


@dataclass(frozen=True)
class FpCircle(Record):
    type: Literal["fp_circle"] = field(default="fp_circle", init=False)
    center: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class FpRect(Record):
    type: Literal["fp_rect"] = field(default="fp_rect", init=False)
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    layer: str = ""
    width: float = 0.0
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class FpPoly(Record):
    type: Literal["fp_poly"] = field(default="fp_poly", init=False)
    pts: tuple[Point, ...] = ()
    layer: str = ""
    width: float = 0.0
    fill: Fill | None = None
    stroke: Stroke | None = None


@dataclass(frozen=True)
class FpText(Record):
    """Footprint text field (reference designator, value, or user text)."""

    type: Literal["fp_text"] = field(default="fp_text", init=False)
    text_type: str = "user"  # "reference", "value", "user"
    text: str = ""
    at: Position = field(default_factory=Position)
    layer: str = ""
    hide: bool | None = None
    effects: TextEffects | None = None
    tstamp: str | None = None


Graphic = Union[GrLine, GrArc, GrCircle, GrRect, GrPoly, GrText]
FootprintGraphic = Union[FpLine, FpArc, FpCircle, FpRect, FpPoly, FpText]

# Node name -> record class for the shape (non-text) graphics.
BOARD_SHAPES: dict[str, type] = {
    "gr_line": GrLine,
    "gr_arc": GrArc,
    "gr_circle": GrCircle,
    "gr_rect": GrRect,
    "gr_poly": GrPoly,
}

FOOTPRINT_SHAPES: dict[str, type] = {
    "fp_line": FpLine,
    "fp_arc": FpArc,
    "fp_circle": FpCircle,
    "fp_rect": FpRect,
    "fp_poly": FpPoly,
}
