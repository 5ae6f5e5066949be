"""
Recording sink - keeps every event instead of rendering it.

Returns immediately, so tests and tools can inspect timing without
waiting for it.
"""

from __future__ import annotations

from chuk_mcp_play.interpreter.events import PlayEvent, Silence, Tone, total_duration_ms


class RecordingSink:
    """Collects Tone and Silence events in emission order."""

    def __init__(self) -> None:
        self.events: list[PlayEvent] = []

    def sound(self, frequency_hz: int, duration_ms: int) -> None:
        self.events.append(Tone(frequency_hz=frequency_hz, duration_ms=duration_ms))

    def wait(self, duration_ms: int) -> None:
        self.events.append(Silence(duration_ms=duration_ms))

    @property
    def tones(self) -> list[Tone]:
        return [e for e in self.events if isinstance(e, Tone)]

    @property
    def silences(self) -> list[Silence]:
        return [e for e in self.events if isinstance(e, Silence)]

    @property
    def total_duration_ms(self) -> int:
        return total_duration_ms(self.events)

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
