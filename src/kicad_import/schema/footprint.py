"""Typed data models for footprints placed on a board."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import DEFAULT_FOOTPRINT_LAYER
from .common import XYZ, Point, Position, Record, Size
from .graphics import FootprintGraphic, FpText


@dataclass(frozen=True)
class Drill(Record):
    """Pad drill. Oval drills set ``width``/``height``; ``diameter`` is the width."""

    diameter: float = 0.0
    width: float | None = None
    height: float | None = None
    offset: Point | None = None


@dataclass(frozen=True)
class PadNet(Record):
    """Net binding of a pad (id plus the name repeated in the pad node)."""

    id: int = 0
    name: str = ""


@dataclass(frozen=True)
class Pad(Record):
    """A pad on a footprint. ``number`` is text, e.g. ``"A1"``."""

    number: str = ""
    pad_type: str = "thru_hole"  # "thru_hole", "smd", "connect", "np_thru_hole"
    shape: str = "circle"  # "circle", "rect", "oval", "trapezoid", "roundrect", "custom"
    at: Position = field(default_factory=Position)
    size: Size = field(default_factory=Size)
    layers: tuple[str, ...] = ()  # may hold wildcards such as "*.Cu"
    drill: Drill | None = None
    roundrect_ratio: float | None = None
    net: PadNet | None = None
    pin_function: str | None = None
    pin_type: str | None = None
    die_pad: bool | None = None
    solder_mask_margin: float | None = None
    solder_paste_margin: float | None = None
    solder_paste_ratio: float | None = None
    clearance: float | None = None
    thermal_bridge_width: float | None = None
    thermal_gap: float | None = None
    tstamp: str | None = None


@dataclass(frozen=True)
class Model3D(Record):
    """3D model reference attached to a footprint."""

    path: str = ""
    offset: XYZ | None = None
    scale: XYZ | None = None
    rotate: XYZ | None = None
    hide: bool | None = None


@dataclass(frozen=True)
class Property(Record):
    """A ``(property "Name" "Value" ...)`` field (KiCad 7+)."""

    name: str = ""
    value: str = ""
    at: Position | None = None
    layer: str | None = None
    hide: bool | None = None


@dataclass(frozen=True)
class Footprint(Record):
    """A component footprint placed on the board.

    ``name`` and ``library`` come from splitting ``"Library:Name"`` on the
    first colon; a name without a colon leaves ``library`` unset.
    """

    name: str = ""
    library: str | None = None
    layer: str = DEFAULT_FOOTPRINT_LAYER
    at: Position = field(default_factory=Position)
    descr: str | None = None
    tags: tuple[str, ...] | None = None
    path: str | None = None
    attr: tuple[str, ...] | None = None
    properties: tuple[Property, ...] = ()
    pads: tuple[Pad, ...] = ()
    graphics: tuple[FootprintGraphic, ...] = ()
    model: Model3D | None = None
    locked: bool | None = None
    placed: bool | None = None
    tstamp: str | None = None

    @property
    def lib_id(self) -> str:
        """The ``Library:Name`` identifier as written in the file."""
        return f"{self.library}:{self.name}" if self.library is not None else self.name

    def get_property(self, name: str) -> str | None:
        for prop in self.properties:
            if prop.name == name:
                return prop.value
        return None

    def _text_field(self, text_type: str) -> str | None:
        for item in self.graphics:
            if isinstance(item, FpText) and item.text_type == text_type:
                return item.text
        return None

    @property
    def reference(self) -> str | None:
        """Reference designator from a property (KiCad 7+) or ``fp_text reference``."""
        ref = self.get_property("Reference")
        return ref if ref is not None else self._text_field("reference")

    @property
    def value(self) -> str | None:
        val = self.get_property("Value")
        return val if val is not None else self._text_field("value")
