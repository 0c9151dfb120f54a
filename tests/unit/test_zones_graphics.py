"""Tests for zones and board graphics."""

from __future__ import annotations

from kicad_import.schema import (
    Color,
    GrArc,
    GrCircle,
    GrLine,
    GrPoly,
    GrRect,
    GrText,
    KiCadPCB,
    Point,
    Size,
    Stroke,
    ZoneKeepout,
    parse_kicad,
)


def _board(body: str) -> KiCadPCB:
    return parse_kicad(f"(kicad_pcb (version 20221018) {body})")


class TestZones:
    def test_zone_basics(self) -> None:
        zone = _board(
            '(zone (net 1) (net_name "GND") (layer "F.Cu") (uuid "z-1") (name "pour") '
            "(priority 2) (connect_pads yes (clearance 0.5)) (min_thickness 0.25) "
            "(polygon (pts (xy 0 0) (xy 10 0) (xy 10 10))))"
        ).zones[0]
        assert zone.net == 1
        assert zone.net_name == "GND"
        assert zone.layer == "F.Cu"
        assert zone.tstamp == "z-1"
        assert zone.name == "pour"
        assert zone.priority == 2
        assert zone.connect_pads == "yes"
        assert zone.min_thickness == 0.25
        assert zone.polygon == (Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0))
        assert zone.filled_polygons is None

    def test_multi_layer_zone(self) -> None:
        zone = _board('(zone (net 0) (layers "F.Cu" "B.Cu"))').zones[0]
        assert zone.layer is None
        assert zone.layers == ("F.Cu", "B.Cu")

    def test_zone_fill(self) -> None:
        zone = _board(
            "(zone (fill yes (mode hatch) (thermal_gap 0.5) (thermal_bridge_width 0.4) "
            "(smoothing fillet) (radius 1) (hatch_thickness 1) (hatch_gap 1.5) "
            "(hatch_orientation 45)))"
        ).zones[0]
        fill = zone.fill
        assert fill is not None
        assert fill.yes is True
        assert fill.mode == "hatch"
        assert fill.thermal_gap == 0.5
        assert fill.thermal_bridge_width == 0.4
        assert fill.smoothing_style == "fillet"
        assert fill.smoothing_radius == 1.0
        assert fill.hatch_gap == 1.5
        assert fill.hatch_orientation == 45.0

    def test_unfilled_zone_fill(self) -> None:
        zone = _board("(zone (fill (thermal_gap 0.5)))").zones[0]
        assert zone.fill is not None
        assert zone.fill.yes is None

    def test_filled_polygons(self) -> None:
        zone = _board(
            '(zone (filled_polygon (layer "F.Cu") (pts (xy 0 0) (xy 1 0) (xy 1 1))) '
            '(filled_polygon (layer "F.Cu") (pts (xy 5 5) (xy 6 5) (xy 6 6))))'
        ).zones[0]
        assert zone.filled_polygons is not None
        assert len(zone.filled_polygons) == 2
        assert zone.filled_polygons[1][0] == Point(5.0, 5.0)

    def test_keepout(self) -> None:
        zone = _board(
            "(zone (keepout (tracks not_allowed) (vias not_allowed) (pads allowed) "
            "(copperpour not_allowed) (footprints allowed)))"
        ).zones[0]
        assert zone.keepout == ZoneKeepout(
            tracks="not_allowed",
            vias="not_allowed",
            pads="allowed",
            copperpour="not_allowed",
            footprints="allowed",
        )

    def test_non_xy_points_skipped(self) -> None:
        zone = _board("(zone (polygon (pts (xy 0 0) (arc (start 1 1)) (xy 2 2))))").zones[0]
        assert zone.polygon == (Point(0.0, 0.0), Point(2.0, 2.0))


class TestBoardGraphics:
    def test_line_with_stroke(self) -> None:
        item = _board(
            '(gr_line (start 0 0) (end 10 0) (stroke (width 0.1) (type dash)) (layer "Edge.Cuts"))'
        ).graphics[0]
        assert isinstance(item, GrLine)
        assert item.type == "gr_line"
        assert item.end == Point(10.0, 0.0)
        assert item.layer == "Edge.Cuts"
        assert item.stroke == Stroke(width=0.1, type="dash")

    def test_legacy_width(self) -> None:
        item = _board("(gr_line (start 0 0) (end 1 1) (layer Edge.Cuts) (width 0.15))").graphics[0]
        assert item.width == 0.15
        assert item.stroke is None

    def test_stroke_defaults(self) -> None:
        item = _board("(gr_line (stroke (width 0.2) (type)))").graphics[0]
        assert item.stroke == Stroke(width=0.2, type="default")

    def test_stroke_color(self) -> None:
        item = _board("(gr_line (stroke (width 0.2) (color 255 0 0 0.5)))").graphics[0]
        assert item.stroke is not None
        assert item.stroke.color == Color(255.0, 0.0, 0.0, 0.5)

    def test_arc(self) -> None:
        item = _board("(gr_arc (start 0 0) (mid 1 1) (end 2 0) (layer F.SilkS))").graphics[0]
        assert isinstance(item, GrArc)
        assert item.mid == Point(1.0, 1.0)

    def test_legacy_arc_without_mid(self) -> None:
        item = _board("(gr_arc (start 0 0) (end 2 0) (angle 90))").graphics[0]
        assert isinstance(item, GrArc)
        assert item.mid is None
        assert "mid" not in item.to_dict()

    def test_circle_fill_yes(self) -> None:
        item = _board("(gr_circle (center 5 5) (end 6 5) (fill yes))").graphics[0]
        assert isinstance(item, GrCircle)
        assert item.center == Point(5.0, 5.0)
        assert item.fill == "solid"

    def test_rect_fill_no(self) -> None:
        item = _board("(gr_rect (start 0 0) (end 1 1) (fill no))").graphics[0]
        assert isinstance(item, GrRect)
        assert item.fill == "none"

    def test_fill_legacy_keyword(self) -> None:
        item = _board("(gr_rect (fill solid))").graphics[0]
        assert item.fill == "solid"

    def test_line_ignores_fill(self) -> None:
        item = _board("(gr_line (start 0 0) (end 1 1) (fill yes))").graphics[0]
        assert not hasattr(item, "fill")

    def test_poly(self) -> None:
        item = _board("(gr_poly (pts (xy 0 0) (xy 1 0) (xy 1 1)) (layer F.Cu))").graphics[0]
        assert isinstance(item, GrPoly)
        assert len(item.pts) == 3

    def test_text_effects(self) -> None:
        item = _board(
            '(gr_text "REV A" (at 10 20 90) (layer "F.SilkS") '
            "(effects (font (size 1.5 1.2) (thickness 0.3) bold italic) (justify left mirror)))"
        ).graphics[0]
        assert isinstance(item, GrText)
        assert item.text == "REV A"
        assert item.at.angle == 90.0
        assert item.effects is not None
        font = item.effects.font
        assert font is not None
        assert font.size == Size(1.5, 1.2)
        assert font.thickness == 0.3
        assert font.bold is True
        assert font.italic is True
        assert item.effects.justify == ("left", "mirror")

    def test_font_flag_children(self) -> None:
        item = _board('(gr_text "x" (effects (font (bold yes) (italic no))))').graphics[0]
        assert item.effects is not None
        font = item.effects.font
        assert font is not None
        assert font.bold is True
        assert font.italic is None
        assert font.size == Size(1.0, 1.0)

    def test_mixed_order_preserved(self) -> None:
        board = _board('(gr_line) (gr_text "a") (gr_circle) (gr_rect)')
        assert [g.type for g in board.graphics] == ["gr_line", "gr_text", "gr_circle", "gr_rect"]
