"""Build a typed :class:`KiCadPCB` from KiCad board text.

Pipeline: text -> tokens -> generic tree -> named nodes -> typed records.
Each ``parse_*`` method walks one node's children in file order and
dispatches on the child name. Unknown names are ignored, so files written
by newer KiCad versions or third-party tools still load. Only malformed
syntax and a non-``kicad_pcb`` root raise.

Numeric atoms are read leniently: a missing token reads as 0, a float
token is read up to its longest numeric prefix (``NaN`` when there is
none), and an integer token is read up to its leading digits (0 when
there are none).
"""

from __future__ import annotations

import math
import re
from dataclasses import fields
from functools import cache
from typing import Any

from ..constants import (
    DEFAULT_FOOTPRINT_LAYER,
    DEFAULT_NET_CLASS,
    DEFAULT_VIA_LAYERS,
    LEGACY_FOOTPRINT_NODE,
    ROOT_NODE_NAME,
)
from ..exceptions import InvalidFormatError
from ..logging_config import create_logger
from ..sexp import ParsedSExpr, parse_sexpr, to_parsed_sexpr, tokenize
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
from .common import XYZ, Color, Font, Point, Position, Size, Stroke, TextEffects
from .footprint import Drill, Footprint, Model3D, Pad, PadNet, Property
from .graphics import (
    BOARD_SHAPES,
    FOOTPRINT_SHAPES,
    FootprintGraphic,
    FpText,
    Graphic,
    GrText,
)

logger = create_logger(__name__)

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _float(val: str | None, default: float = 0.0) -> float:
    if val is None:
        return default
    # float() would also take "inf", "nan" and "1_5"
    match = _FLOAT_PREFIX.match(val)
    return float(match.group()) if match else math.nan


def _int_or_none(val: str | None) -> int | None:
    if val is None:
        return None
    match = _INT_PREFIX.match(val)
    return int(match.group()) if match else None


def _int(val: str | None, default: int = 0) -> int:
    parsed = _int_or_none(val)
    return default if parsed is None else parsed


def _text(node: ParsedSExpr) -> str | None:
    """First value, or None when missing or empty."""
    return node.first_value or None


def _flag(node: ParsedSExpr) -> bool:
    """Read ``(locked)``, ``(locked yes)`` or ``(locked no)`` style flags."""
    return node.first_value != "no"


def _point(node: ParsedSExpr) -> Point:
    return Point(_float(node.value(0)), _float(node.value(1)))


def _position(node: ParsedSExpr) -> Position:
    angle = node.value(2)
    return Position(
        _float(node.value(0)),
        _float(node.value(1)),
        _float(angle) if angle is not None else None,
    )


def _size(node: ParsedSExpr) -> Size:
    return Size(_float(node.value(0)), _float(node.value(1)))


def _xyz(node: ParsedSExpr) -> XYZ:
    """Read ``(offset (xyz 1 2 3))`` or the positional ``(offset 1 2 3)``."""
    source = node.get("xyz") or node
    return XYZ(_float(source.value(0)), _float(source.value(1)), _float(source.value(2)))


def _points(pts: ParsedSExpr | None) -> tuple[Point, ...]:
    """Points of a ``(pts (xy ..) ...)`` node; other entries are skipped."""
    if pts is None:
        return ()
    return tuple(_point(xy) for xy in pts.find_all("xy"))


def _fill(val: str | None) -> str | None:
    # KiCad 9 writes yes/no where older versions wrote solid/none
    if val == "yes":
        return "solid"
    if val == "no":
        return "none"
    return val


@cache
def _init_fields(cls: type) -> frozenset[str]:
    return frozenset(f.name for f in fields(cls) if f.init)


def _ignore(parent: ParsedSExpr, child: ParsedSExpr) -> None:
    logger.debug("Ignoring (%s) in (%s)", child.name, parent.name)


# Child node name -> record field, for children that hold one float/int.
_GENERAL_FIELDS = {
    "drawings": "drawings_count",
    "tracks": "tracks_count",
    "zones": "zones_count",
    "modules": "modules_count",
    "nets": "nets_count",
}

_SETUP_FLOAT_FIELDS = {
    "pad_to_mask_clearance": "pad_to_mask_clearance",
    "solder_mask_min_width": "solder_mask_min_width",
    "pad_to_paste_clearance": "pad_to_paste_clearance",
    "pad_to_paste_clearance_ratio": "pad_to_paste_clearance_ratio",
}

_NET_CLASS_FLOAT_FIELDS = {
    "clearance": "clearance",
    "trace_width": "trace_width",
    "via_dia": "via_diameter",
    "via_drill": "via_drill",
    "uvia_dia": "micro_via_diameter",
    "uvia_drill": "micro_via_drill",
}

_PAD_FLOAT_FIELDS = {
    "roundrect_rratio": "roundrect_ratio",
    "solder_mask_margin": "solder_mask_margin",
    "solder_paste_margin": "solder_paste_margin",
    "solder_paste_margin_ratio": "solder_paste_ratio",
    "clearance": "clearance",
    "thermal_bridge_width": "thermal_bridge_width",
    "thermal_gap": "thermal_gap",
}

_ZONE_FILL_FLOAT_FIELDS = {
    "thermal_gap": "thermal_gap",
    "thermal_bridge_width": "thermal_bridge_width",
    "radius": "smoothing_radius",
    "hatch_thickness": "hatch_thickness",
    "hatch_gap": "hatch_gap",
    "hatch_orientation": "hatch_orientation",
}

_KEEPOUT_RULES = ("tracks", "vias", "pads", "copperpour", "footprints")

# KiCad 7 renamed tstamp to uuid; both land in ``tstamp``.
_TSTAMP_NODES = ("tstamp", "uuid")


class KiCadParser:
    """Parser for .kicad_pcb text.

    Holds no state between calls; one instance may parse any number of
    boards, from any number of threads.

    Usage::

        board = KiCadParser().parse(text)
        board.version        # 20221018
        board.footprints[0].pads[0].drill
    """

    def parse(self, content: str) -> KiCadPCB:
        """Parse a whole board file.

        Raises:
            KiCadSyntaxError: Unbalanced parentheses or premature end of input.
            InvalidFormatError: The root node is not ``kicad_pcb``.
        """
        tokens = tokenize(content)
        root = to_parsed_sexpr(parse_sexpr(tokens))
        if root.name != ROOT_NODE_NAME:
            raise InvalidFormatError(
                f"Invalid KiCad PCB file: missing {ROOT_NODE_NAME} root",
                root_name=root.name,
                line=tokens[0].line,
                col=tokens[0].col,
            )

        board = self.build_pcb(root)
        logger.info(
            "Parsed board version %d: %d layers, %d nets, %d footprints, "
            "%d segments, %d vias, %d zones",
            board.version,
            len(board.layers),
            len(board.nets),
            len(board.footprints),
            len(board.segments),
            len(board.vias),
            len(board.zones),
        )
        return board

    # ── Board ───────────────────────────────────────────────────────

    def build_pcb(self, root: ParsedSExpr) -> KiCadPCB:
        """Build the board record from a normalized ``kicad_pcb`` node."""
        kw: dict[str, Any] = {}
        layers: list[Layer] = []
        nets: list[Net] = []
        net_classes: list[NetClass] = []
        footprints: list[Footprint] = []
        segments: list[Segment] = []
        arcs: list[Arc] = []
        vias: list[Via] = []
        zones: list[Zone] = []
        graphics: list[Graphic] = []
        dimensions: list[ParsedSExpr] = []
        targets: list[ParsedSExpr] = []

        for child in root.children:
            name = child.name
            if name == "version":
                kw["version"] = _int(child.value(0, "0"))
            elif name == "generator":
                kw["generator"] = child.value(0, "")
            elif name == "generator_version":
                if _text(child):
                    kw["generator_version"] = _text(child)
            elif name == "general":
                kw["general"] = self.parse_general(child)
            elif name == "paper":
                if _text(child):
                    kw["paper"] = _text(child)
            elif name == "title_block":
                kw["title_block"] = self.parse_title_block(child)
            elif name == "layers":
                layers.extend(self.parse_layers(child))
            elif name == "setup":
                kw["setup"] = self.parse_setup(child)
            elif name == "net":
                nets.append(self.parse_net(child))
            elif name == "net_class":
                net_classes.append(self.parse_net_class(child))
            elif name == "footprint" or name == LEGACY_FOOTPRINT_NODE:
                footprints.append(self.parse_footprint(child))
            elif name == "segment":
                segments.append(self.parse_segment(child))
            elif name == "arc":
                arcs.append(self.parse_arc(child))
            elif name == "via":
                vias.append(self.parse_via(child))
            elif name == "zone":
                zones.append(self.parse_zone(child))
            elif name in BOARD_SHAPES or name == "gr_text":
                graphics.append(self.parse_graphic(child))
            elif name == "dimension":
                dimensions.append(child)
            elif name == "target":
                targets.append(child)
            else:
                _ignore(root, child)

        return KiCadPCB(
            layers=tuple(layers),
            nets=tuple(nets),
            net_classes=tuple(net_classes),
            footprints=tuple(footprints),
            segments=tuple(segments),
            arcs=tuple(arcs),
            vias=tuple(vias),
            zones=tuple(zones),
            graphics=tuple(graphics),
            dimensions=tuple(dimensions) if dimensions else None,
            targets=tuple(targets) if targets else None,
            **kw,
        )

    def parse_general(self, node: ParsedSExpr) -> General:
        kw: dict[str, Any] = {}
        for child in node.children:
            if child.name == "thickness":
                kw["thickness"] = _float(child.value(0, "0"))
            elif child.name in _GENERAL_FIELDS:
                kw[_GENERAL_FIELDS[child.name]] = _int(child.value(0, "0"))
            else:
                _ignore(node, child)
        return General(**kw)

    def parse_title_block(self, node: ParsedSExpr) -> TitleBlock:
        kw: dict[str, Any] = {}
        comments: list[str] = []
        for child in node.children:
            if child.name in ("title", "date", "rev", "company"):
                if _text(child):
                    kw[child.name] = _text(child)
            elif child.name == "comment":
                # (comment 1 "text")
                comments.append(child.value(1) or child.value(0) or "")
            else:
                _ignore(node, child)
        if comments:
            kw["comment"] = tuple(comments)
        return TitleBlock(**kw)

    def parse_layers(self, node: ParsedSExpr) -> list[Layer]:
        """Read ``(layers (0 "F.Cu" signal) ...)``; each child's name is its ordinal."""
        layers: list[Layer] = []
        for child in node.children:
            ordinal = _int_or_none(child.name)
            if ordinal is None:
                _ignore(node, child)
                continue
            layers.append(
                Layer(
                    ordinal=ordinal,
                    name=child.value(0, ""),
                    type=child.value(1, "signal"),
                    user_name=child.value(2) or None,
                )
            )
        return layers

    def parse_setup(self, node: ParsedSExpr) -> Setup:
        kw: dict[str, Any] = {}
        for child in node.children:
            name = child.name
            if name == "stackup_layers":
                kw["stackup_layers"] = _int(child.value(0, "0"))
            elif name in _SETUP_FLOAT_FIELDS:
                kw[_SETUP_FLOAT_FIELDS[name]] = _float(child.value(0, "0"))
            elif name == "aux_axis_origin":
                kw["aux_axis_origin"] = _point(child)
            elif name == "grid_origin":
                kw["grid_origin"] = _point(child)
            else:
                _ignore(node, child)
        return Setup(**kw)

    # ── Nets ────────────────────────────────────────────────────────

    def parse_net(self, node: ParsedSExpr) -> Net:
        return Net(id=_int(node.value(0, "0")), name=node.value(1, ""))

    def parse_net_class(self, node: ParsedSExpr) -> NetClass:
        kw: dict[str, Any] = {"name": node.value(0, DEFAULT_NET_CLASS)}
        # (net_class Default "This is the default net class." ...)
        if node.value(1):
            kw["description"] = node.value(1)
        nets: list[str] = []
        for child in node.children:
            if child.name in _NET_CLASS_FLOAT_FIELDS:
                kw[_NET_CLASS_FLOAT_FIELDS[child.name]] = _float(child.value(0, "0"))
            elif child.name == "add_net":
                nets.append(child.value(0, ""))
            else:
                _ignore(node, child)
        return NetClass(nets=tuple(nets), **kw)

    # ── Footprints ──────────────────────────────────────────────────

    def parse_footprint(self, node: ParsedSExpr) -> Footprint:
        """Read a ``footprint`` (or legacy ``module``) node."""
        library, sep, name = node.value(0, "").partition(":")
        kw: dict[str, Any] = {"name": name} if sep else {"name": library}
        if sep and library:
            kw["library"] = library

        # Legacy files put these flags right after the name
        if node.has_flag("locked"):
            kw["locked"] = True
        if node.has_flag("placed"):
            kw["placed"] = True

        properties: list[Property] = []
        pads: list[Pad] = []
        graphics: list[FootprintGraphic] = []

        for child in node.children:
            name = child.name
            if name == "layer":
                kw["layer"] = child.value(0, DEFAULT_FOOTPRINT_LAYER)
            elif name == "at":
                kw["at"] = _position(child)
            elif name == "descr":
                if _text(child):
                    kw["descr"] = _text(child)
            elif name == "tags":
                if _text(child):
                    kw["tags"] = tuple(child.values[0].split())
            elif name == "path":
                if _text(child):
                    kw["path"] = _text(child)
            elif name == "attr":
                if child.values:
                    kw["attr"] = child.values
            elif name in ("locked", "placed"):
                kw[name] = _flag(child)
            elif name in _TSTAMP_NODES:
                if _text(child):
                    kw["tstamp"] = _text(child)
            elif name == "property":
                properties.append(self.parse_property(child))
            elif name == "pad":
                pads.append(self.parse_pad(child))
            elif name in FOOTPRINT_SHAPES or name == "fp_text":
                graphics.append(self.parse_fp_graphic(child))
            elif name == "model":
                kw["model"] = self.parse_model(child)
            else:
                _ignore(node, child)

        return Footprint(
            properties=tuple(properties),
            pads=tuple(pads),
            graphics=tuple(graphics),
            **kw,
        )

    def parse_property(self, node: ParsedSExpr) -> Property:
        kw: dict[str, Any] = {"name": node.value(0, ""), "value": node.value(1, "")}
        if "hide" in node.values[2:]:
            kw["hide"] = True
        for child in node.children:
            if child.name == "at":
                kw["at"] = _position(child)
            elif child.name == "layer":
                kw["layer"] = child.value(0, "")
            elif child.name == "hide":
                kw["hide"] = _flag(child)
            else:
                _ignore(node, child)
        return Property(**kw)

    def parse_pad(self, node: ParsedSExpr) -> Pad:
        """Read ``(pad "1" smd roundrect (at ..) (size ..) (layers ..) ...)``."""
        kw: dict[str, Any] = {
            "number": node.value(0, ""),
            "pad_type": node.value(1, "thru_hole"),
            "shape": node.value(2, "circle"),
        }
        for child in node.children:
            name = child.name
            if name == "at":
                kw["at"] = _position(child)
            elif name == "size":
                kw["size"] = _size(child)
            elif name == "drill":
                drill = self.parse_drill(child)
                if drill is not None:
                    kw["drill"] = drill
            elif name == "layers":
                kw["layers"] = child.values
            elif name in _PAD_FLOAT_FIELDS:
                kw[_PAD_FLOAT_FIELDS[name]] = _float(child.value(0, "0"))
            elif name == "net":
                kw["net"] = PadNet(id=_int(child.value(0, "0")), name=child.value(1, ""))
            elif name == "pinfunction":
                if _text(child):
                    kw["pin_function"] = _text(child)
            elif name == "pintype":
                if _text(child):
                    kw["pin_type"] = _text(child)
            elif name == "die_pad":
                kw["die_pad"] = True
            elif name in _TSTAMP_NODES:
                if _text(child):
                    kw["tstamp"] = _text(child)
            else:
                _ignore(node, child)
        return Pad(**kw)

    def parse_drill(self, node: ParsedSExpr) -> Drill | None:
        """Read ``(drill 0.8)``, ``(drill oval 1.2 0.8)`` and an optional ``(offset x y)``.

        Returns None for a drill node with no values.
        """
        if not node.values:
            return None

        kw: dict[str, Any] = {}
        if node.values[0] == "oval" and len(node.values) >= 2:
            width = _float(node.values[1])
            kw["diameter"] = width
            kw["width"] = width
            # A single oval dimension means a round hole of that size
            kw["height"] = _float(node.values[2]) if len(node.values) >= 3 else width
        else:
            kw["diameter"] = _float(node.values[0])

        offset = node.get("offset")
        if offset is not None:
            kw["offset"] = _point(offset)
        return Drill(**kw)

    def parse_model(self, node: ParsedSExpr) -> Model3D:
        kw: dict[str, Any] = {"path": node.value(0, "")}
        if "hide" in node.values[1:]:
            kw["hide"] = True
        for child in node.children:
            if child.name in ("offset", "scale", "rotate"):
                kw[child.name] = _xyz(child)
            elif child.name == "hide":
                kw["hide"] = _flag(child)
            else:
                _ignore(node, child)
        return Model3D(**kw)

    # ── Tracks and vias ─────────────────────────────────────────────

    def _parse_track(self, node: ParsedSExpr, cls: type) -> Any:
        kw: dict[str, Any] = {}
        for child in node.children:
            name = child.name
            if name in ("start", "mid", "end"):
                kw[name] = _point(child)
            elif name == "width":
                kw["width"] = _float(child.value(0, "0"))
            elif name == "layer":
                kw["layer"] = child.value(0, "")
            elif name == "net":
                kw["net"] = _int(child.value(0, "0"))
            elif name == "locked":
                kw["locked"] = _flag(child)
            elif name in _TSTAMP_NODES:
                if _text(child):
                    kw["tstamp"] = _text(child)
            else:
                _ignore(node, child)
        if node.has_flag("locked"):
            kw["locked"] = True
        accepted = _init_fields(cls)
        return cls(**{k: v for k, v in kw.items() if k in accepted})

    def parse_segment(self, node: ParsedSExpr) -> Segment:
        return self._parse_track(node, Segment)

    def parse_arc(self, node: ParsedSExpr) -> Arc:
        return self._parse_track(node, Arc)

    def parse_via(self, node: ParsedSExpr) -> Via:
        kw: dict[str, Any] = {}
        # (via blind (at ..) ...) / (via micro ...) / (via locked ...)
        for via_type in ("blind", "micro"):
            if node.has_flag(via_type):
                kw["via_type"] = via_type
        if node.has_flag("locked"):
            kw["locked"] = True

        for child in node.children:
            name = child.name
            if name == "at":
                kw["at"] = _point(child)
            elif name == "size":
                kw["size"] = _float(child.value(0, "0"))
            elif name == "drill":
                kw["drill"] = _float(child.value(0, "0"))
            elif name == "layers":
                kw["layers"] = (
                    child.value(0, DEFAULT_VIA_LAYERS[0]),
                    child.value(1, DEFAULT_VIA_LAYERS[1]),
                )
            elif name == "net":
                kw["net"] = _int(child.value(0, "0"))
            elif name in ("locked", "free"):
                kw[name] = _flag(child)
            elif name in ("blind", "micro"):
                kw["via_type"] = name
            elif name in _TSTAMP_NODES:
                if _text(child):
                    kw["tstamp"] = _text(child)
            else:
                _ignore(node, child)
        return Via(**kw)

    # ── Zones ───────────────────────────────────────────────────────

    def parse_zone(self, node: ParsedSExpr) -> Zone:
        kw: dict[str, Any] = {}
        filled: list[tuple[Point, ...]] = []
        for child in node.children:
            name = child.name
            if name == "net":
                kw["net"] = _int(child.value(0, "0"))
            elif name == "net_name":
                kw["net_name"] = child.value(0, "")
            elif name in ("layer", "name", "connect_pads"):
                if _text(child):
                    kw[name] = _text(child)
            elif name == "layers":
                if child.values:
                    kw["layers"] = child.values
            elif name == "priority":
                kw["priority"] = _int(child.value(0, "0"))
            elif name == "locked":
                kw["locked"] = _flag(child)
            elif name in _TSTAMP_NODES:
                if _text(child):
                    kw["tstamp"] = _text(child)
            elif name == "min_thickness":
                kw["min_thickness"] = _float(child.value(0, "0"))
            elif name == "polygon":
                kw["polygon"] = _points(child.get("pts"))
            elif name == "filled_polygon":
                filled.append(_points(child.get("pts")))
            elif name == "fill":
                kw["fill"] = self.parse_zone_fill(child)
            elif name == "keepout":
                kw["keepout"] = self.parse_zone_keepout(child)
            else:
                _ignore(node, child)
        if filled:
            kw["filled_polygons"] = tuple(filled)
        return Zone(**kw)

    def parse_zone_fill(self, node: ParsedSExpr) -> ZoneFill:
        kw: dict[str, Any] = {}
        if node.value(0) == "yes":
            kw["yes"] = True
        for child in node.children:
            name = child.name
            if name == "mode":
                kw["mode"] = child.value(0)
            elif name == "smoothing":
                kw["smoothing_style"] = child.value(0)
            elif name in _ZONE_FILL_FLOAT_FIELDS:
                kw[_ZONE_FILL_FLOAT_FIELDS[name]] = _float(child.value(0, "0"))
            else:
                _ignore(node, child)
        return ZoneFill(**kw)

    def parse_zone_keepout(self, node: ParsedSExpr) -> ZoneKeepout:
        kw: dict[str, Any] = {}
        for child in node.children:
            if child.name in _KEEPOUT_RULES:
                kw[child.name] = child.value(0)
            else:
                _ignore(node, child)
        return ZoneKeepout(**kw)

    # ── Graphics ────────────────────────────────────────────────────

    def parse_graphic(self, node: ParsedSExpr) -> Graphic:
        """Read a board-level ``gr_*`` item."""
        if node.name == "gr_text":
            return self.parse_gr_text(node)
        return self._parse_shape(node, BOARD_SHAPES[node.name])

    def parse_fp_graphic(self, node: ParsedSExpr) -> FootprintGraphic:
        """Read a footprint-level ``fp_*`` item."""
        if node.name == "fp_text":
            return self.parse_fp_text(node)
        return self._parse_shape(node, FOOTPRINT_SHAPES[node.name])

    def _parse_shape(self, node: ParsedSExpr, cls: type) -> Any:
        kw: dict[str, Any] = {}
        for child in node.children:
            name = child.name
            if name in ("start", "mid", "end", "center"):
                kw[name] = _point(child)
            elif name == "pts":
                kw["pts"] = _points(child)
            elif name == "layer":
                kw["layer"] = child.value(0, "")
            elif name == "width":
                kw["width"] = _float(child.value(0, "0"))
            elif name == "fill":
                kw["fill"] = _fill(child.value(0))
            elif name == "stroke":
                kw["stroke"] = self.parse_stroke(child)
            else:
                _ignore(node, child)
        # e.g. lines have no fill, circles no start
        accepted = _init_fields(cls)
        return cls(**{k: v for k, v in kw.items() if k in accepted})

    def parse_gr_text(self, node: ParsedSExpr) -> GrText:
        kw: dict[str, Any] = {"text": node.value(0, "")}
        for child in node.children:
            if child.name == "at":
                kw["at"] = _position(child)
            elif child.name == "layer":
                kw["layer"] = child.value(0, "")
            elif child.name == "effects":
                kw["effects"] = self.parse_text_effects(child)
            else:
                _ignore(node, child)
        return GrText(**kw)

    def parse_fp_text(self, node: ParsedSExpr) -> FpText:
        """Read ``(fp_text reference "R1" (at ..) (layer ..) [hide] (effects ..))``."""
        kw: dict[str, Any] = {
            "text_type": node.value(0, "user"),
            "text": node.value(1, ""),
        }
        if "hide" in node.values[2:]:
            kw["hide"] = True
        for child in node.children:
            name = child.name
            if name == "at":
                kw["at"] = _position(child)
            elif name == "layer":
                kw["layer"] = child.value(0, "")
            elif name == "hide":
                kw["hide"] = _flag(child)
            elif name == "effects":
                kw["effects"] = self.parse_text_effects(child)
            elif name in _TSTAMP_NODES:
                if _text(child):
                    kw["tstamp"] = _text(child)
            else:
                _ignore(node, child)
        return FpText(**kw)

    def parse_stroke(self, node: ParsedSExpr) -> Stroke:
        kw: dict[str, Any] = {}
        for child in node.children:
            if child.name == "width":
                kw["width"] = _float(child.value(0, "0"))
            elif child.name == "type":
                kw["type"] = child.value(0)
            elif child.name == "color":
                kw["color"] = Color(
                    r=_float(child.value(0, "0")),
                    g=_float(child.value(1, "0")),
                    b=_float(child.value(2, "0")),
                    a=_float(child.value(3, "1")),
                )
            else:
                _ignore(node, child)
        # (type) with no value keeps the default
        if kw.get("type") is None:
            kw.pop("type", None)
        return Stroke(**kw)

    def parse_text_effects(self, node: ParsedSExpr) -> TextEffects:
        kw: dict[str, Any] = {}
        for child in node.children:
            if child.name == "font":
                kw["font"] = self._parse_font(child)
            elif child.name == "justify":
                if child.values:
                    kw["justify"] = child.values
            else:
                _ignore(node, child)
        return TextEffects(**kw)

    def _parse_font(self, node: ParsedSExpr) -> Font:
        kw: dict[str, Any] = {}
        # KiCad 6/7 write bold/italic as bare atoms, KiCad 8 as (bold yes)
        for style in ("bold", "italic"):
            if node.has_flag(style):
                kw[style] = True
        for child in node.children:
            name = child.name
            if name == "size":
                kw["size"] = _size(child)
            elif name == "thickness":
                kw["thickness"] = _float(child.value(0, "0"))
            elif name in ("bold", "italic"):
                if _flag(child):
                    kw[name] = True
            else:
                _ignore(node, child)
        return Font(**kw)


def parse_kicad(content: str) -> KiCadPCB:
    """Parse .kicad_pcb text into a :class:`KiCadPCB`."""
    return KiCadParser().parse(content)
