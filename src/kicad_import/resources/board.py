"""MCP resources: read-only board state exposed to LLMs.

Resources provide structured data that LLMs can read without executing tools.
"""

from __future__ import annotations

import json
from typing import Any

from fastmcp import FastMCP

from ..tools.registry import json_safe

_NOT_LOADED = json.dumps({"error": "No board loaded. Use open_board first."})


def _dumps(data: Any) -> str:
    return json.dumps(json_safe(data), indent=2, allow_nan=False)


def register_board_resources(mcp: FastMCP) -> None:
    """Register board-related MCP resources."""

    @mcp.resource("kicad://board/summary")
    def board_summary() -> str:
        """Summary of the currently loaded PCB board."""
        from .. import state

        if not state.is_loaded():
            return _NOT_LOADED
        return _dumps(state.get_summary().to_dict())

    @mcp.resource("kicad://board/footprints")
    def board_footprints() -> str:
        """All footprints on the board with reference, value, library id and layer."""
        from .. import state

        if not state.is_loaded():
            return _NOT_LOADED
        footprints = state.get_board().footprints
        return _dumps(
            {
                "count": len(footprints),
                "footprints": [
                    {
                        "reference": fp.reference,
                        "value": fp.value,
                        "lib_id": fp.lib_id,
                        "layer": fp.layer,
                    }
                    for fp in footprints
                ],
            }
        )

    @mcp.resource("kicad://board/nets")
    def board_nets() -> str:
        """List of all nets on the board."""
        from .. import state

        if not state.is_loaded():
            return _NOT_LOADED
        nets = state.get_board().nets
        return _dumps({"count": len(nets), "nets": [n.to_dict() for n in nets]})

    @mcp.resource("kicad://footprint/{reference}")
    def footprint_detail(reference: str) -> str:
        """Full parsed record of one footprint by reference designator."""
        from .. import state

        if not state.is_loaded():
            return _NOT_LOADED
        fp = state.get_board().find_footprint(reference)
        if fp is None:
            return json.dumps({"error": f"No footprint with reference '{reference}'"})
        return _dumps(fp.to_dict())
