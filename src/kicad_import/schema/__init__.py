"""Typed data models for KiCad board files and the builder that fills them."""

from .board import (
    Arc,
    General,
    KiCadPCB,
    Layer,
    Net,
    NetClass,
    Segment,
    Setup,
    TitleBlock,
    Via,
    Zone,
    ZoneFill,
    ZoneKeepout,
)
from .builder import KiCadParser, parse_kicad
from .common import XYZ, Color, Font, Point, Position, Size, Stroke, TextEffects
from .footprint import Drill, Footprint, Model3D, Pad, PadNet, Property
from .graphics import (
    FootprintGraphic,
    FpArc,
    FpCircle,
    FpLine,
    FpPoly,
    FpRect,
    FpText,
    GrArc,
    GrCircle,
    Graphic,
    GrLine,
    GrPoly,
    GrRect,
    GrText,
)
from .summary import BoardSummary, BoundingBox, extract_board_outline, summarize

__all__ = [
    "XYZ",
    "Arc",
    "BoardSummary",
    "BoundingBox",
    "Color",
    "Drill",
    "Font",
    "Footprint",
    "FootprintGraphic",
    "FpArc",
    "FpCircle",
    "FpLine",
    "FpPoly",
    "FpRect",
    "FpText",
    "General",
    "GrArc",
    "GrCircle",
    "GrLine",
    "GrPoly",
    "GrRect",
    "GrText",
    "Graphic",
    "KiCadPCB",
    "KiCadParser",
    "Layer",
    "Model3D",
    "Net",
    "NetClass",
    "Pad",
    "PadNet",
    "Point",
    "Position",
    "Property",
    "Segment",
    "Setup",
    "Size",
    "Stroke",
    "TextEffects",
    "TitleBlock",
    "Via",
    "Zone",
    "ZoneFill",
    "ZoneKeepout",
    "extract_board_outline",
    "parse_kicad",
    "summarize",
]
