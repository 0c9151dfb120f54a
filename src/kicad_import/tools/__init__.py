"""KiCad import tools exposed through the MCP server."""

# Import modules to trigger tool registration via register_tool() calls
from . import board  # noqa: F401
from .registry import TOOL_REGISTRY, get_categories, register_tool

__all__ = [
    "TOOL_REGISTRY",
    "get_categories",
    "register_tool",
]
