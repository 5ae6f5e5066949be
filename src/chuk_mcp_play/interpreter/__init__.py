"""
The PLAY interpreter - one pass from text to events.

Notation -> (Cursor + token rules + InterpreterState) -> Tone/Silence -> sink
"""

from chuk_mcp_play.interpreter.events import PlayEvent, Silence, Tone, total_duration_ms
from chuk_mcp_play.interpreter.player import PlayInterpreter, collect_events, interpret
from chuk_mcp_play.interpreter.state import InterpreterState

__all__ = [
    "InterpreterState",
    "PlayEvent",
    "PlayInterpreter",
    "Silence",
    "Tone",
    "collect_events",
    "interpret",
    "total_duration_ms",
]
