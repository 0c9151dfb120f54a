"""Integration tests for the MCP server end-to-end flow."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest
from fastmcp import Client

from kicad_import import state
from kicad_import.server import create_server

FIXTURE_PATH = Path(__file__).parent.parent / "fixtures" / "minimal_board.kicad_pcb"


@pytest.fixture(autouse=True)
def _clean_state():
    state.clear()
    yield
    state.clear()


async def _read(uri: str) -> dict:
    async with Client(create_server()) as client:
        contents = await client.read_resource(uri)
    return json.loads(contents[0].text)


class TestServerCreation:
    def test_create_server(self) -> None:
        server = create_server()
        assert server is not None
        assert server.name == "kicad-import"

    def test_tools_exposed(self) -> None:
        async def _names() -> set[str]:
            async with Client(create_server()) as client:
                return {tool.name for tool in await client.list_tools()}

        names = asyncio.run(_names())
        assert {"open_board", "get_board_info", "find_footprint", "validate_board"} <= names


class TestEndToEnd:
    """Test the full flow: open board -> query info -> find footprints."""

    def test_open_and_query(self) -> None:
        from kicad_import.tools import TOOL_REGISTRY

        result = TOOL_REGISTRY["open_board"].handler(board_path=str(FIXTURE_PATH))
        assert result["status"] == "ok"
        assert "minimal_board" in result["message"]

        info = TOOL_REGISTRY["get_board_info"].handler()
        assert info["footprint_count"] == 3
        assert info["net_count"] == 3

        footprints = TOOL_REGISTRY["list_footprints"].handler()
        assert footprints["count"] == 3

        found = TOOL_REGISTRY["find_footprint"].handler(reference="C1")
        assert found["found"] is True

        not_found = TOOL_REGISTRY["find_footprint"].handler(reference="Z99")
        assert not_found["found"] is False


class TestResources:
    def test_summary_without_board(self) -> None:
        data = asyncio.run(_read("kicad://board/summary"))
        assert "error" in data

    def test_summary(self) -> None:
        state.load_board(str(FIXTURE_PATH))
        data = asyncio.run(_read("kicad://board/summary"))
        assert data["title"] == "minimal_board"
        assert data["footprint_count"] == 3

    def test_footprints(self) -> None:
        state.load_board(str(FIXTURE_PATH))
        data = asyncio.run(_read("kicad://board/footprints"))
        assert data["count"] == 3
        assert data["footprints"][1]["reference"] == "J1"

    def test_nets(self) -> None:
        state.load_board(str(FIXTURE_PATH))
        data = asyncio.run(_read("kicad://board/nets"))
        assert [n["name"] for n in data["nets"]] == ["", "VCC", "GND"]

    def test_footprint_template(self) -> None:
        state.load_board(str(FIXTURE_PATH))
        data = asyncio.run(_read("kicad://footprint/H1"))
        assert data["name"] == "MountingHole_3.2mm"
        missing = asyncio.run(_read("kicad://footprint/Z99"))
        assert "error" in missing

    def test_unparseable_number_stays_valid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad_at.kicad_pcb"
        path.write_text(
            '(kicad_pcb (footprint "Lib:X" (at abc 1) (property "Reference" "U1")))',
            encoding="utf-8",
        )
        state.load_board(str(path))

        async def _raw() -> str:
            async with Client(create_server()) as client:
                contents = await client.read_resource("kicad://footprint/U1")
            return contents[0].text

        text = asyncio.run(_raw())
        assert "NaN" not in text
        data = json.loads(text)
        assert data["at"] == {"x": None, "y": 1.0}
