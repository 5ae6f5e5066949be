"""
chuk-mcp-play - a PLAY music macro language interpreter.

    from chuk_mcp_play import RecordingSink, interpret

    sink = RecordingSink()
    interpret("T120 O3 MN L4 C", sink)
    sink.events  # [Tone(frequency_hz=262, duration_ms=438)]
"""

from chuk_mcp_play.core.errors import (
    InvalidDottedCount,
    NoteLengthOutOfRange,
    NoteNumberOutOfRange,
    OctaveOutOfRange,
    PlayError,
    TempoOutOfRange,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
)
from chuk_mcp_play.interpreter import (
    InterpreterState,
    PlayInterpreter,
    Silence,
    Tone,
    collect_events,
    interpret,
)
from chuk_mcp_play.sinks import MidiSink, NullSink, PlaySink, RealtimeSink, RecordingSink

__version__ = "0.1.0"

__all__ = [
    # Interpreter
    "InterpreterState",
    "PlayInterpreter",
    "collect_events",
    "interpret",
    # Events
    "Silence",
    "Tone",
    # Sinks
    "MidiSink",
    "NullSink",
    "PlaySink",
    "RealtimeSink",
    "RecordingSink",
    # Errors
    "PlayError",
    "UnexpectedEndOfInput",
    "UnexpectedCharacter",
    "OctaveOutOfRange",
    "NoteLengthOutOfRange",
    "NoteNumberOutOfRange",
    "TempoOutOfRange",
    "InvalidDottedCount",
]
