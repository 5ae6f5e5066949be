"""
Output sinks - where interpreted events go.

- NullSink: discards everything (default)
- RecordingSink: keeps Tone/Silence values for inspection
- RealtimeSink: plays through a device callback and sleeps out each event
- MidiSink: writes events to a MIDI file
"""

from chuk_mcp_play.sinks.base import NullSink, PlaySink
from chuk_mcp_play.sinks.midi import MidiEvent, MidiSink, events_to_midi
from chuk_mcp_play.sinks.realtime import RealtimeSink
from chuk_mcp_play.sinks.recording import RecordingSink

__all__ = [
    "MidiEvent",
    "MidiSink",
    "NullSink",
    "PlaySink",
    "RealtimeSink",
    "RecordingSink",
    "events_to_midi",
]
