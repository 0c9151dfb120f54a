"""Tests for loaded-board state and the board tool handlers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from kicad_import import state
from kicad_import.constants import MAX_RESPONSE_CHARS
from kicad_import.exceptions import BoardNotLoadedError, KiCadSyntaxError
from kicad_import.tools import TOOL_REGISTRY, get_categories, register_tool
from kicad_import.tools.registry import json_safe, truncate_list

FIXTURE_PATH = Path(__file__).parent.parent / "fixtures" / "minimal_board.kicad_pcb"


@pytest.fixture(autouse=True)
def _clean_state():
    state.clear()
    yield
    state.clear()


def _call(name: str, **kwargs):
    return TOOL_REGISTRY[name].handler(**kwargs)


class TestState:
    def test_nothing_loaded(self) -> None:
        assert not state.is_loaded()
        assert state.get_board_path() is None
        with pytest.raises(BoardNotLoadedError):
            state.get_board()
        with pytest.raises(BoardNotLoadedError):
            state.get_summary()

    def test_load_and_clear(self) -> None:
        summary = state.load_board(str(FIXTURE_PATH))
        assert summary.footprint_count == 3
        assert state.is_loaded()
        assert state.get_board_path() == str(FIXTURE_PATH)
        assert state.get_document().board is state.get_board()
        state.clear()
        assert not state.is_loaded()

    def test_failed_load_keeps_previous_board(self, tmp_path: Path) -> None:
        state.load_board(str(FIXTURE_PATH))
        broken = tmp_path / "broken.kicad_pcb"
        broken.write_text("(kicad_pcb", encoding="utf-8")
        with pytest.raises(KiCadSyntaxError):
            state.load_board(str(broken))
        assert state.get_board_path() == str(FIXTURE_PATH)


class TestRegistry:
    def test_tools_registered(self) -> None:
        assert {
            "open_board",
            "get_board_info",
            "list_footprints",
            "find_footprint",
            "list_nets",
            "validate_board",
        } <= set(TOOL_REGISTRY)

    def test_categories(self) -> None:
        categories = get_categories()
        assert "validate_board" in [t.name for t in categories["analysis"]]
        assert "open_board" in [t.name for t in categories["board"]]


class TestOpenBoard:
    def test_open_fixture(self) -> None:
        result = _call("open_board", board_path=str(FIXTURE_PATH))
        assert result["status"] == "ok"
        assert "minimal_board" in result["message"]
        assert result["summary"]["footprint_count"] == 3

    def test_open_missing_returns_error(self, tmp_path: Path) -> None:
        result = _call("open_board", board_path=str(tmp_path / "nope.kicad_pcb"))
        assert result["error"] is True
        assert result["error_code"] == "BOARD_LOADING_ERROR"
        assert not state.is_loaded()

    def test_open_malformed_returns_location(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.kicad_pcb"
        path.write_text("(kicad_pcb (version 1)))\n)", encoding="utf-8")
        # trailing tokens after the root are ignored
        assert _call("open_board", board_path=str(path))["status"] == "ok"

        path.write_text(")", encoding="utf-8")
        result = _call("open_board", board_path=str(path))
        assert result["error_code"] == "UNEXPECTED_TOKEN"
        assert result["board_path"] == str(path)
        assert (result["line"], result["col"]) == (1, 1)


class TestQueries:
    @pytest.fixture(autouse=True)
    def _load(self) -> None:
        state.load_board(str(FIXTURE_PATH))

    def test_board_info(self) -> None:
        info = _call("get_board_info")
        assert info["title"] == "minimal_board"
        assert info["net_count"] == 3
        assert info["copper_layers"] == ["F.Cu", "B.Cu"]

    def test_list_footprints(self) -> None:
        result = _call("list_footprints")
        assert result["count"] == 3
        assert result["has_more"] is False
        assert [fp["reference"] for fp in result["footprints"]] == ["C1", "J1", "H1"]
        assert result["footprints"][0]["lib_id"] == "Capacitor_SMD:C_0805_2012Metric"
        assert result["footprints"][0]["at"] == {"x": 14.0, "y": 5.5, "angle": 90.0}

    def test_list_footprints_paginated(self) -> None:
        result = _call("list_footprints", limit=2, offset=1)
        assert result["returned"] == 2
        assert result["has_more"] is False
        assert [fp["reference"] for fp in result["footprints"]] == ["J1", "H1"]

        first = _call("list_footprints", limit=1)
        assert first["has_more"] is True

    def test_find_footprint(self) -> None:
        found = _call("find_footprint", reference="J1")
        assert found["found"] is True
        assert found["footprint"]["name"] == "PinHeader_1x02_P2.54mm_Vertical"
        assert len(found["footprint"]["pads"]) == 2

    def test_find_missing_footprint(self) -> None:
        assert _call("find_footprint", reference="Z99")["found"] is False

    def test_list_nets(self) -> None:
        result = _call("list_nets")
        assert result["count"] == 3
        assert result["nets"][2] == {"id": 2, "name": "GND"}

    def test_validate(self) -> None:
        assert _call("validate_board")["valid"] is True


class TestResponseShaping:
    def test_small_result_untouched(self) -> None:
        result = {"count": 2, "items": [1, 2]}
        assert truncate_list(result, "items") == {"count": 2, "items": [1, 2]}

    def test_large_result_truncated(self) -> None:
        items = [{"name": f"NET{i}", "pad": "x" * 100} for i in range(2000)]
        result = truncate_list({"count": len(items), "items": items}, "items")
        assert result["truncated"] is True
        assert 0 < result["returned"] < 2000
        assert len(result["items"]) == result["returned"]
        assert len(json.dumps(result)) <= MAX_RESPONSE_CHARS

    def test_json_safe_drops_non_finite(self) -> None:
        data = {"at": {"x": float("nan"), "y": 1.0}, "sizes": (float("inf"), 2)}
        assert json_safe(data) == {"at": {"x": None, "y": 1.0}, "sizes": [None, 2]}

    def test_unparseable_coordinate_is_strict_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad_at.kicad_pcb"
        path.write_text('(kicad_pcb (footprint "X" (at abc 1)))', encoding="utf-8")
        state.load_board(str(path))
        listed = _call("list_footprints")
        assert listed["footprints"][0]["at"] == {"x": None, "y": 1.0}
        json.dumps(listed, allow_nan=False)

    def test_duplicate_registration_rejected(self) -> None:
        spec = TOOL_REGISTRY["list_nets"]
        with pytest.raises(ValueError, match="already registered"):
            register_tool(spec.name, spec.description, spec.parameters, spec.handler)

    def test_list_tools(self) -> None:
        catalog = _call("list_tools")
        assert set(catalog) == {"board", "analysis", "meta"}
        open_board = next(t for t in catalog["board"] if t["name"] == "open_board")
        assert "board_path" in open_board["parameters"]
