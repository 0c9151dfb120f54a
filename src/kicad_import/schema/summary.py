"""High-level board summary derived from a parsed :class:`KiCadPCB`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..constants import DEFAULT_BOARD_THICKNESS
from .board import KiCadPCB, Net
from .common import Point, Position

EDGE_CUTS = "Edge.Cuts"
COPPER_LAYER_TYPES = frozenset({"signal", "power", "mixed", "jumper"})


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box (mm)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Position:
        return Position(
            x=(self.min_x + self.max_x) / 2,
            y=(self.min_y + self.max_y) / 2,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class BoardSummary:
    """High-level summary of a PCB board."""

    title: str
    version: int
    generator: str
    thickness: float
    layer_count: int
    copper_layers: list[str]
    net_count: int
    footprint_count: int
    segment_count: int
    via_count: int
    zone_count: int
    nets: list[Net] = field(default_factory=list)
    bounding_box: BoundingBox | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "title": self.title,
            "version": self.version,
            "generator": self.generator,
            "thickness": self.thickness,
            "layer_count": self.layer_count,
            "copper_layers": self.copper_layers,
            "net_count": self.net_count,
            "footprint_count": self.footprint_count,
            "segment_count": self.segment_count,
            "via_count": self.via_count,
            "zone_count": self.zone_count,
            "nets": [n.to_dict() for n in self.nets],
        }
        if self.bounding_box:
            d["bounding_box"] = self.bounding_box.to_dict()
        return d


def extract_board_outline(pcb: KiCadPCB) -> BoundingBox | None:
    """Compute the board bounding box from board graphics on Edge.Cuts.

    Uses start/mid/end/center points and polygon vertices, so arcs and
    circles are approximated by their defining points.
    """
    points: list[Point] = []
    for item in pcb.graphics:
        if item.layer != EDGE_CUTS:
            continue
        for attr in ("start", "mid", "end", "center"):
            pt = getattr(item, attr, None)
            if pt is not None:
                points.append(pt)
        points.extend(getattr(item, "pts", ()))

    if not points:
        return None

    return BoundingBox(
        min_x=min(p.x for p in points),
        min_y=min(p.y for p in points),
        max_x=max(p.x for p in points),
        max_y=max(p.y for p in points),
    )


def summarize(pcb: KiCadPCB) -> BoardSummary:
    """Build a :class:`BoardSummary` for a parsed board."""
    title = ""
    if pcb.title_block and pcb.title_block.title:
        title = pcb.title_block.title

    thickness = DEFAULT_BOARD_THICKNESS
    if pcb.general and pcb.general.thickness is not None:
        thickness = pcb.general.thickness

    return BoardSummary(
        title=title,
        version=pcb.version,
        generator=pcb.generator,
        thickness=thickness,
        layer_count=len(pcb.layers),
        copper_layers=[lyr.name for lyr in pcb.layers if lyr.type in COPPER_LAYER_TYPES],
        net_count=len(pcb.nets),
        footprint_count=len(pcb.footprints),
        segment_count=len(pcb.segments),
        via_count=len(pcb.vias),
        zone_count=len(pcb.zones),
        nets=list(pcb.nets),
        bounding_box=extract_board_outline(pcb),
    )
