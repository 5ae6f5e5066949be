"""
MIDI sink - renders a PLAY string to a MIDI file instead of a speaker.

Events are laid end to end on a tick timeline, exactly as a realtime
sink would sound them, then written with mido. Same input -> same file.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_play.core.pitch import frequency_to_midi
from chuk_mcp_play.core.rhythm import round_half_away

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

# The file tempo only fixes the tick <-> millisecond ratio;
# PLAY tempo changes are already baked into event durations.
FILE_TEMPO_BPM = 120

DEFAULT_VELOCITY = 100


@dataclass(frozen=True)
class MidiEvent:
    """
    A single note on the MIDI timeline.

    All times are in ticks, absolute from the start of the track.
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int = DEFAULT_VELOCITY
    channel: int = 0

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def ms_to_ticks(
    duration_ms: float,
    tempo_bpm: int = FILE_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> int:
    """Convert milliseconds to ticks at a given file tempo."""
    return round_half_away(duration_ms * ticks_per_beat * tempo_bpm / 60_000)


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = FILE_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Write MidiEvents to a single-track MidiFile.

    Args:
        events: Notes in any order
        tempo_bpm: File tempo
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    timeline: list[tuple[int, Message]] = []
    for event in events:
        timeline.append(
            (event.start_ticks, Message("note_on", channel=event.channel, note=event.pitch, velocity=event.velocity))
        )
        timeline.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0),
            )
        )

    # note_off sorts ahead of note_on at the same tick
    timeline.sort(key=lambda item: (item[0], item[1].type != "note_off"))

    clock = 0
    for tick, msg in timeline:
        track.append(msg.copy(time=tick - clock))
        clock = tick

    track.append(MetaMessage("end_of_track", time=0))
    return mid


class MidiSink:
    """
    Collects interpreter events as MIDI notes.

    Nothing blocks: a pause just moves the clock forward.
    """

    def __init__(
        self,
        ticks_per_beat: int = TICKS_PER_BEAT,
        velocity: int = DEFAULT_VELOCITY,
        channel: int = 0,
    ):
        self.ticks_per_beat = ticks_per_beat
        self.velocity = velocity
        self.channel = channel
        self.notes: list[MidiEvent] = []
        self.clock_ticks = 0

    def sound(self, frequency_hz: int, duration_ms: int) -> None:
        ticks = ms_to_ticks(duration_ms, ticks_per_beat=self.ticks_per_beat)
        self.notes.append(
            MidiEvent(
                pitch=frequency_to_midi(frequency_hz),
                start_ticks=self.clock_ticks,
                duration_ticks=ticks,
                velocity=self.velocity,
                channel=self.channel,
            )
        )
        self.clock_ticks += ticks

    def wait(self, duration_ms: int) -> None:
        self.clock_ticks += ms_to_ticks(duration_ms, ticks_per_beat=self.ticks_per_beat)

    def to_midi(self) -> MidiFile:
        return events_to_midi(self.notes, ticks_per_beat=self.ticks_per_beat)

    def save(self, path: Path | str) -> Path:
        """Write the collected notes to a .mid file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_midi().save(str(path))
        return path
