"""
Interpreter state - everything a directive can change.

One state per interpret call. Directives mutate it in place; notes and
pauses may override the note length for a single event.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from chuk_mcp_play.constants import (
    DEFAULT_NOTE_LENGTH,
    DEFAULT_OCTAVE,
    DEFAULT_TEMPO,
    Articulation,
)


@dataclass
class InterpreterState:
    """
    Mutable interpreter state.

    Range checks happen in the token rules before a value is stored here,
    so the state itself never holds an out-of-range value.
    """

    octave: int = DEFAULT_OCTAVE
    tempo: int = DEFAULT_TEMPO
    note_length: int = DEFAULT_NOTE_LENGTH
    articulation: Articulation = Articulation.NORMAL

    @contextmanager
    def note_length_override(self, length: int | None) -> Iterator[None]:
        """
        Apply a note length for the duration of one event.

        The previous default is restored afterwards, even if the event fails.
        """
        previous = self.note_length
        if length is not None:
            self.note_length = length
        try:
            yield
        finally:
            self.note_length = previous
