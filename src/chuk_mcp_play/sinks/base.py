"""
Output sink interface.

The interpreter computes frequencies and durations; a sink decides what
to do with them. One call per event, strictly in order.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PlaySink(Protocol):
    """Receives events from the interpreter."""

    def sound(self, frequency_hz: int, duration_ms: int) -> None:
        """Play a tone. May block for the tone's duration."""
        ...

    def wait(self, duration_ms: int) -> None:
        """Stay silent. May block for the pause's duration."""
        ...


class NullSink:
    """Discards every event. Used when no device is available."""

    def sound(self, frequency_hz: int, duration_ms: int) -> None:
        pass

    def wait(self, duration_ms: int) -> None:
        pass
