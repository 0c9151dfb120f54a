"""Board tools: open a .kicad_pcb file and query the parsed result."""

from __future__ import annotations

import json
from typing import Any

from ..constants import MAX_RESPONSE_CHARS
from ..exceptions import KicadImportError
from .registry import get_categories, json_safe, register_tool, truncate_list


def _open_board_handler(board_path: str) -> dict[str, Any]:
    """Open and parse a KiCad PCB board file.

    Args:
        board_path: Path to a .kicad_pcb file.
    """
    from .. import state

    try:
        summary = state.load_board(board_path)
    except KicadImportError as e:
        return e.to_dict()
    return {
        "status": "ok",
        "message": f"Loaded board: {summary.title or board_path}",
        "summary": json_safe(summary.to_dict()),
    }


def _get_board_info_handler() -> dict[str, Any]:
    """Get summary information about the currently loaded board."""
    from .. import state

    return json_safe(state.get_summary().to_dict())


def _list_footprints_handler(limit: int = 100, offset: int = 0) -> dict[str, Any]:
    """List footprints on the board with pagination.

    Args:
        limit: Maximum number of footprints to return. Default: 100.
        offset: Number of footprints to skip. Default: 0.
    """
    from .. import state

    footprints = state.get_board().footprints
    total = len(footprints)
    page = footprints[offset : offset + limit]
    result = {
        "count": total,
        "returned": len(page),
        "offset": offset,
        "has_more": offset + limit < total,
        "footprints": [
            {
                "reference": fp.reference,
                "value": fp.value,
                "lib_id": fp.lib_id,
                "layer": fp.layer,
                "at": fp.at.to_dict(),
                "pad_count": len(fp.pads),
            }
            for fp in page
        ],
    }
    return truncate_list(json_safe(result), "footprints")


def _find_footprint_handler(reference: str) -> dict[str, Any]:
    """Find a footprint by its reference designator (e.g., 'R1', 'U1').

    Args:
        reference: The reference designator to search for.
    """
    from .. import state

    fp = state.get_board().find_footprint(reference)
    if fp is None:
        return {"found": False, "message": f"No footprint with reference '{reference}'"}
    data = json_safe(fp.to_dict())
    if len(json.dumps(data)) > MAX_RESPONSE_CHARS:
        # graphics go first, pads stay
        data.pop("graphics", None)
        data["truncated"] = True
    return {"found": True, "footprint": data}


def _list_nets_handler() -> dict[str, Any]:
    """List all nets declared on the board."""
    from .. import state

    nets = state.get_board().nets
    result = {"count": len(nets), "nets": [n.to_dict() for n in nets]}
    return truncate_list(json_safe(result), "nets")


def _validate_board_handler() -> dict[str, Any]:
    """Check the loaded board for undeclared nets, unparseable numbers and duplicates."""
    from .. import state
    from ..validation import validate_board

    return validate_board(state.get_board()).to_dict()


def _list_tools_handler() -> dict[str, Any]:
    """List every available tool grouped by category."""
    return {
        category: [tool.describe() for tool in tools]
        for category, tools in get_categories().items()
    }


register_tool(
    name="open_board",
    description="Open and parse a KiCad PCB board file (.kicad_pcb).",
    parameters={"board_path": {"type": "string", "description": "Path to .kicad_pcb file"}},
    handler=_open_board_handler,
    category="board",
)

register_tool(
    name="get_board_info",
    description="Get summary information about the loaded board (layers, nets, counts, outline).",
    parameters={},
    handler=_get_board_info_handler,
    category="board",
)

register_tool(
    name="list_footprints",
    description="List footprints on the board with reference, value, and placement (paginated).",
    parameters={
        "limit": {"type": "integer", "description": "Max footprints to return. Default: 100."},
        "offset": {"type": "integer", "description": "Number of footprints to skip. Default: 0."},
    },
    handler=_list_footprints_handler,
    category="board",
)

register_tool(
    name="find_footprint",
    description="Find a footprint by its reference designator (e.g., 'R1', 'U1', 'C3').",
    parameters={
        "reference": {"type": "string", "description": "Reference designator (e.g., 'R1')"},
    },
    handler=_find_footprint_handler,
    category="board",
)

register_tool(
    name="list_nets",
    description="List all nets declared on the loaded board.",
    parameters={},
    handler=_list_nets_handler,
    category="board",
)

register_tool(
    name="validate_board",
    description="Check the loaded board for undeclared nets, unparseable numbers and duplicates.",
    parameters={},
    handler=_validate_board_handler,
    category="analysis",
)

register_tool(
    name="list_tools",
    description="List every available tool grouped by category, with its parameters.",
    parameters={},
    handler=_list_tools_handler,
    category="meta",
)
