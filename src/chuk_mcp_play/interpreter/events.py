"""
Events - the externally observable output of the interpreter.

A Tone has a frequency and a duration; a Silence only a duration.
Events are produced one at a time and handed straight to the sink.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Tone:
    """A pitched tone."""

    frequency_hz: int
    duration_ms: int

    def __post_init__(self) -> None:
        if self.frequency_hz <= 0:
            raise ValueError(f"Frequency must be positive, got {self.frequency_hz}")
        if self.duration_ms < 0:
            raise ValueError(f"Duration must be >= 0, got {self.duration_ms}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "tone", "frequency_hz": self.frequency_hz, "duration_ms": self.duration_ms}


@dataclass(frozen=True)
class Silence:
    """A pause."""

    duration_ms: int

    def __post_init__(self) -> None:
        if self.duration_ms < 0:
            raise ValueError(f"Duration must be >= 0, got {self.duration_ms}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": "silence", "duration_ms": self.duration_ms}


PlayEvent = Tone | Silence


def total_duration_ms(events: list[PlayEvent]) -> int:
    """Sum of event durations."""
    return sum(event.duration_ms for event in events)
