"""Read-only MCP resources over the loaded board."""

from .board import register_board_resources

__all__ = ["register_board_resources"]
