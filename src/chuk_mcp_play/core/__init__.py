"""
Core PLAY primitives - the scanning and arithmetic layer.

- Cursor: case-normalizing access to the notation text
- NoteLetter / Accidental: letters, sharps and flats to pitch indices
- pitch_to_frequency: equal-temperament tuning (index 49 = 440 Hz)
- duration_ms: tempo, note length, dots and articulation to milliseconds
- PlayError and subclasses: the error taxonomy
"""

from chuk_mcp_play.core.cursor import Cursor
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
from chuk_mcp_play.core.pitch import (
    Accidental,
    NoteLetter,
    frequency_to_midi,
    is_audible,
    pitch_to_frequency,
    pitch_to_midi,
)
from chuk_mcp_play.core.rhythm import dot_multiplier, duration_ms, round_half_away

__all__ = [
    # Cursor
    "Cursor",
    # Errors
    "PlayError",
    "UnexpectedEndOfInput",
    "UnexpectedCharacter",
    "OctaveOutOfRange",
    "NoteLengthOutOfRange",
    "NoteNumberOutOfRange",
    "TempoOutOfRange",
    "InvalidDottedCount",
    # Pitch
    "Accidental",
    "NoteLetter",
    "frequency_to_midi",
    "is_audible",
    "pitch_to_frequency",
    "pitch_to_midi",
    # Rhythm
    "dot_multiplier",
    "duration_ms",
    "round_half_away",
]
