"""Tool registry and response shaping shared by every board tool.

Tool modules call :func:`register_tool` at import time; the server walks
``TOOL_REGISTRY`` to expose each handler over MCP.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..constants import MAX_RESPONSE_CHARS

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class ToolSpec:
    """A board tool: its MCP-facing name and docs plus the Python handler."""

    name: str
    description: str
    parameters: dict[str, Any]
    handler: Callable[..., Any]
    category: str = "board"

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }


TOOL_REGISTRY: dict[str, ToolSpec] = {}


def register_tool(
    name: str,
    description: str,
    parameters: dict[str, Any],
    handler: Callable[..., Any],
    *,
    category: str = "board",
) -> None:
    """Add a tool to the registry. Registering a name twice is an error."""
    if name in TOOL_REGISTRY:
        raise ValueError(f"Tool already registered: {name}")
    TOOL_REGISTRY[name] = ToolSpec(
        name=name,
        description=description,
        parameters=parameters,
        handler=handler,
        category=category,
    )


def get_categories() -> dict[str, list[ToolSpec]]:
    """Tools grouped by category, in registration order."""
    categories: dict[str, list[ToolSpec]] = {}
    for tool in TOOL_REGISTRY.values():
        categories.setdefault(tool.category, []).append(tool)
    return categories


def json_safe(value: Any) -> Any:
    """Replace NaN and infinities with None so the result is strict JSON.

    Unparseable numbers in a board come through as NaN, which
    ``json.dumps`` would write as a bare ``NaN`` token.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


def truncate_list(result: dict[str, Any], key: str) -> dict[str, Any]:
    """Drop trailing items from ``result[key]`` until the JSON fits.

    Sets ``truncated`` and ``returned`` when anything was dropped. Large
    boards hit this through footprint and net listings.
    """
    items = result[key]
    if len(json.dumps(result)) <= MAX_RESPONSE_CHARS:
        return result

    result["truncated"] = True
    lo, hi = 0, len(items)
    while lo < hi:
        mid = (lo + hi + 1) // 2
        result[key] = items[:mid]
        result["returned"] = mid
        if len(json.dumps(result)) <= MAX_RESPONSE_CHARS:
            lo = mid
        else:
            hi = mid - 1
    result[key] = items[:lo]
    result["returned"] = lo
    return result
