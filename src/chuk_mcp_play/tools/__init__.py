"""
MCP tool implementations.

Tools are organized by domain:
- play - Interpret, validate and render notation
- tunes - Tune library discovery and rendering
"""

from chuk_mcp_play.tools.play import register_play_tools
from chuk_mcp_play.tools.tunes import register_tune_tools

__all__ = [
    "register_play_tools",
    "register_tune_tools",
]
