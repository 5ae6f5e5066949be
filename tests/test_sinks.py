"""
Sink tests - what happens to events after the interpreter.

Covers the null, recording, realtime and MIDI sinks.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_play import interpret
from chuk_mcp_play.interpreter import Silence, Tone
from chuk_mcp_play.sinks import (
    MidiEvent,
    MidiSink,
    NullSink,
    PlaySink,
    RealtimeSink,
    RecordingSink,
    events_to_midi,
)
from chuk_mcp_play.sinks.midi import TICKS_PER_BEAT, ms_to_ticks


class TestProtocol:
    """All sinks satisfy PlaySink."""

    @pytest.mark.parametrize("sink", [NullSink(), RecordingSink(), RealtimeSink(sleep=lambda s: None), MidiSink()])
    def test_is_play_sink(self, sink) -> None:
        assert isinstance(sink, PlaySink)


class TestNullSink:
    def test_accepts_everything(self) -> None:
        sink = NullSink()
        sink.sound(440, 500)
        sink.wait(500)


class TestRecordingSink:
    """Tests for RecordingSink."""

    def test_records_in_order(self, sink: RecordingSink) -> None:
        interpret("C P4 D", sink)
        assert [type(e) for e in sink.events] == [Tone, Silence, Tone]

    def test_total_duration(self, sink: RecordingSink) -> None:
        interpret("ML C P4 C8", sink)
        assert sink.total_duration_ms == 1250

    def test_clear(self, sink: RecordingSink) -> None:
        interpret("C", sink)
        sink.clear()
        assert len(sink) == 0

    def test_event_validation(self) -> None:
        with pytest.raises(ValueError, match="Frequency must be positive"):
            Tone(frequency_hz=0, duration_ms=10)
        with pytest.raises(ValueError, match="Duration must be >= 0"):
            Silence(duration_ms=-1)

    def test_to_dict(self) -> None:
        assert Tone(frequency_hz=440, duration_ms=500).to_dict() == {
            "type": "tone",
            "frequency_hz": 440,
            "duration_ms": 500,
        }
        assert Silence(duration_ms=250).to_dict() == {"type": "silence", "duration_ms": 250}


class TestRealtimeSink:
    """Tests for RealtimeSink with an injected clock."""

    def test_sleeps_for_each_event(self) -> None:
        sleeps: list[float] = []
        sink = RealtimeSink(sleep=sleeps.append)
        interpret("ML C P8", sink)
        assert sleeps == [0.5, 0.25]

    def test_device_receives_tones(self) -> None:
        calls: list[tuple[int, int]] = []
        sleeps: list[float] = []
        sink = RealtimeSink(device=lambda f, d: calls.append((f, d)), sleep=sleeps.append)
        interpret("O4 ML A P4", sink)
        assert calls == [(440, 500)]
        assert sleeps == [0.5, 0.5]

    def test_blocking_device_is_not_waited_twice(self) -> None:
        calls: list[tuple[int, int]] = []
        sleeps: list[float] = []
        sink = RealtimeSink(
            device=lambda f, d: calls.append((f, d)),
            sleep=sleeps.append,
            device_blocks=True,
        )
        interpret("ML C P4", sink)
        assert len(calls) == 1
        assert sleeps == [0.5]


class TestMidiEvent:
    """Tests for MidiEvent validation."""

    def test_valid_event(self) -> None:
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480)
        assert event.velocity == 100
        assert event.channel == 0

    def test_pitch_range(self) -> None:
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480)

    def test_negative_start(self) -> None:
        with pytest.raises(ValueError, match="Start ticks must be >= 0"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480)


class TestEventsToMidi:
    """Tests for events_to_midi."""

    def test_empty(self) -> None:
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_note_pairs(self) -> None:
        mid = events_to_midi([MidiEvent(pitch=60, start_ticks=0, duration_ticks=480)])
        notes = [msg for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert [(m.type, m.note, m.time) for m in notes] == [
            ("note_on", 60, 0),
            ("note_off", 60, 480),
        ]

    def test_note_off_before_note_on(self) -> None:
        """Back-to-back notes release before the next starts."""
        mid = events_to_midi(
            [
                MidiEvent(pitch=62, start_ticks=480, duration_ticks=480),
                MidiEvent(pitch=60, start_ticks=0, duration_ticks=480),
            ]
        )
        notes = [msg for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert [(m.type, m.note) for m in notes] == [
            ("note_on", 60),
            ("note_off", 60),
            ("note_on", 62),
            ("note_off", 62),
        ]


class TestMidiSink:
    """Tests for MidiSink."""

    def test_ms_to_ticks(self) -> None:
        """500 ms is one beat at the 120 BPM file tempo."""
        assert ms_to_ticks(500) == 480
        assert ms_to_ticks(250) == 240

    def test_middle_c(self) -> None:
        sink = MidiSink()
        interpret("T120 O3 ML L4 C", sink)
        assert sink.notes == [MidiEvent(pitch=60, start_ticks=0, duration_ticks=480)]

    def test_pause_advances_clock(self) -> None:
        sink = MidiSink()
        interpret("ML C P4 D", sink)
        assert [n.start_ticks for n in sink.notes] == [0, 960]
        assert [n.pitch for n in sink.notes] == [60, 62]
        assert sink.clock_ticks == 1440

    def test_concert_a(self) -> None:
        sink = MidiSink()
        interpret("N44", sink)
        assert sink.notes[0].pitch == 69

    def test_save_and_reload(self, temp_midi_path: Path) -> None:
        sink = MidiSink()
        interpret("T200 O3 MN L4 E E L2 E", sink)
        sink.save(temp_midi_path)

        assert temp_midi_path.exists()
        loaded = MidiFile(str(temp_midi_path))
        note_ons = [msg for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert len(note_ons) == 3
        assert all(msg.note == 64 for msg in note_ons)
