"""Typed data models for KiCad PCB board files (.kicad_pcb)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..constants import DEFAULT_NET_CLASS, DEFAULT_VIA_LAYERS
from ..sexp import ParsedSExpr
from .common import Point, Record
from .footprint import Footprint
from .graphics import Graphic


@dataclass(frozen=True)
class Layer(Record):
    """A layer in the board stackup."""

    ordinal: int
    name: str
    type: str = "signal"  # "signal", "power", "mixed", "jumper", "user"
    user_name: str | None = None  # e.g. "F.Silkscreen" for "F.SilkS"


@dataclass(frozen=True)
class Net(Record):
    """A net (electrical connection) on the board."""

    id: int
    name: str


@dataclass(frozen=True)
class NetClass(Record):
    """Legacy (KiCad 5) net class with its design rules and member nets."""

    name: str = DEFAULT_NET_CLASS
    description: str | None = None
    clearance: float = 0.0
    trace_width: float = 0.0
    via_diameter: float = 0.0
    via_drill: float = 0.0
    micro_via_diameter: float | None = None
    micro_via_drill: float | None = None
    nets: tuple[str, ...] = ()


@dataclass(frozen=True)
class General(Record):
    thickness: float | None = None
    drawings_count: int | None = None
    tracks_count: int | None = None
    zones_count: int | None = None
    modules_count: int | None = None
    nets_count: int | None = None


@dataclass(frozen=True)
class TitleBlock(Record):
    title: str | None = None
    date: str | None = None
    rev: str | None = None
    company: str | None = None
    comment: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Setup(Record):
    """Board setup values that live in the .kicad_pcb file."""

    stackup_layers: int | None = None
    pad_to_mask_clearance: float | None = None
    solder_mask_min_width: float | None = None
    pad_to_paste_clearance: float | None = None
    pad_to_paste_clearance_ratio: float | None = None
    aux_axis_origin: Point | None = None
    grid_origin: Point | None = None


@dataclass(frozen=True)
class Segment(Record):
    """A straight track segment (copper trace)."""

    type: Literal["segment"] = field(default="segment", init=False)
    start: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    width: float = 0.0
    layer: str = ""
    net: int = 0
    locked: bool | None = None
    tstamp: str | None = None


@dataclass(frozen=True)
class Arc(Record):
    """A curved track through ``start``, ``mid`` and ``end``."""

    type: Literal["arc"] = field(default="arc", init=False)
    start: Point = field(default_factory=Point)
    mid: Point = field(default_factory=Point)
    end: Point = field(default_factory=Point)
    width: float = 0.0
    layer: str = ""
    net: int = 0
    locked: bool | None = None
    tstamp: str | None = None


@dataclass(frozen=True)
class Via(Record):
    """A via. ``via_type`` is unset for plain through vias."""

    type: Literal["via"] = field(default="via", init=False)
    via_type: str | None = None  # "blind", "micro"
    at: Point = field(default_factory=Point)
    size: float = 0.0
    drill: float = 0.0
    layers: tuple[str, str] = DEFAULT_VIA_LAYERS
    net: int = 0
    locked: bool | None = None
    free: bool | None = None
    tstamp: str | None = None


@dataclass(frozen=True)
class ZoneFill(Record):
    """Zone fill settings. ``yes`` records a ``(fill yes ...)`` node."""

    yes: bool | None = None
    mode: str | None = None  # "solid", "hatch"
    thermal_gap: float | None = None
    thermal_bridge_width: float | None = None
    smoothing_style: str | None = None  # "none", "chamfer", "fillet"
    smoothing_radius: float | None = None
    hatch_thickness: float | None = None
    hatch_gap: float | None = None
    hatch_orientation: float | None = None


@dataclass(frozen=True)
class ZoneKeepout(Record):
    """Rule-area restrictions, each "allowed" or "not_allowed"."""

    tracks: str | None = None
    vias: str | None = None
    pads: str | None = None
    copperpour: str | None = None
    footprints: str | None = None


@dataclass(frozen=True)
class Zone(Record):
    """A copper zone or rule area.

    ``polygon`` is the user-drawn outline; ``filled_polygons`` is the fill
    geometry computed by KiCad's zone filler, absent on unfilled zones.
    """

    net: int = 0
    net_name: str = ""
    polygon: tuple[Point, ...] = ()
    layer: str | None = None
    layers: tuple[str, ...] | None = None
    name: str | None = None
    priority: int | None = None
    locked: bool | None = None
    tstamp: str | None = None
    min_thickness: float | None = None
    connect_pads: str | None = None  # "yes", "no", "thru_hole_only"
    fill: ZoneFill | None = None
    keepout: ZoneKeepout | None = None
    filled_polygons: tuple[tuple[Point, ...], ...] | None = None


@dataclass(frozen=True)
class KiCadPCB(Record):
    """A complete parsed board. Sequences are in file order.

    Net ids referenced by pads, tracks, vias and zones are not checked
    against ``nets`` here; see :mod:`kicad_import.validation`.
    ``dimensions`` and ``targets`` are kept as raw nodes.
    """

    version: int = 0
    generator: str = ""
    generator_version: str | None = None
    general: General | None = None
    paper: str | None = None
    title_block: TitleBlock | None = None
    layers: tuple[Layer, ...] = ()
    setup: Setup | None = None
    nets: tuple[Net, ...] = ()
    net_classes: tuple[NetClass, ...] = ()
    footprints: tuple[Footprint, ...] = ()
    segments: tuple[Segment, ...] = ()
    arcs: tuple[Arc, ...] = ()
    vias: tuple[Via, ...] = ()
    zones: tuple[Zone, ...] = ()
    graphics: tuple[Graphic, ...] = ()
    dimensions: tuple[ParsedSExpr, ...] | None = None
    targets: tuple[ParsedSExpr, ...] | None = None

    def get_net(self, net_id: int) -> Net | None:
        for net in self.nets:
            if net.id == net_id:
                return net
        return None

    def get_layer(self, name: str) -> Layer | None:
        for layer in self.layers:
            if layer.name == name:
                return layer
        return None

    def find_footprint(self, reference: str) -> Footprint | None:
        """First footprint whose reference designator matches, or None."""
        for fp in self.footprints:
            if fp.reference == reference:
                return fp
        return None
