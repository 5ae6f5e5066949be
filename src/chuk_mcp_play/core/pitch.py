"""
Pitch primitives - note letters, accidentals and the pitch index.

The pitch index counts semitones upward with octaves starting at A, so that
O3 C is index 40 and O4 A (concert A, 440 Hz) is index 49. This matches
piano key numbering: MIDI note = index + 20.
"""

from __future__ import annotations

import math
from enum import Enum, IntEnum

from chuk_mcp_play.constants import (
    CONCERT_A_HZ,
    CONCERT_A_PITCH,
    LOWEST_AUDIBLE_PITCH,
)
from chuk_mcp_play.core.rhythm import round_half_away

# MIDI note number of pitch index 0
MIDI_OFFSET = 20


class NoteLetter(IntEnum):
    """
    The seven note letters and their semitone offset within an octave.

    The octave is A-based: A is 1 semitone above the octave floor, C is 4.
    """

    A = 1
    B = 3
    C = 4
    D = 6
    E = 8
    F = 9
    G = 11

    @property
    def has_sharp(self) -> bool:
        """B and E have no sharp slot (B-C and E-F are a semitone apart)."""
        return self not in (NoteLetter.B, NoteLetter.E)

    @property
    def has_flat(self) -> bool:
        """C and F have no flat slot."""
        return self not in (NoteLetter.C, NoteLetter.F)

    def pitch(self, octave: int, accidental: Accidental | None = None) -> int:
        """
        Resolve this letter to an absolute pitch index.

        A sharp on B/E or a flat on C/F is accepted but leaves the pitch alone.
        """
        value = octave * 12 + self.value
        if accidental is Accidental.SHARP and self.has_sharp:
            value += 1
        elif accidental is Accidental.FLAT and self.has_flat:
            value -= 1
        return value

    @classmethod
    def parse(cls, char: str) -> NoteLetter:
        """Parse a note letter ('a'-'g', case-insensitive)."""
        try:
            return cls[char.upper()]
        except KeyError:
            raise ValueError(f"Unknown note letter: {char}") from None


class Accidental(str, Enum):
    """Accidental markers that may follow a note letter."""

    SHARP = "#"
    FLAT = "-"

    @classmethod
    def from_char(cls, char: str | None) -> Accidental | None:
        """Map '+', '#' or '-' to an accidental; anything else is None."""
        if char in ("+", "#"):
            return cls.SHARP
        if char == "-":
            return cls.FLAT
        return None


def is_audible(pitch: int) -> bool:
    """Indices 0-5 (including the pause sentinel) are silences."""
    return pitch >= LOWEST_AUDIBLE_PITCH


def pitch_to_frequency(pitch: int) -> int:
    """
    Equal-temperament frequency in hertz, rounded half away from zero.

    Index 49 is 440 Hz; each 12 indices doubles the frequency.
    """
    return round_half_away(CONCERT_A_HZ * 2.0 ** ((pitch - CONCERT_A_PITCH) / 12.0))


def pitch_to_midi(pitch: int) -> int:
    """Convert a pitch index to a MIDI note number (49 -> 69)."""
    return pitch + MIDI_OFFSET


def frequency_to_midi(frequency_hz: float) -> int:
    """
    Nearest MIDI note for a frequency.

    Inverts pitch_to_frequency for every audible index: adjacent indices
    are always more than 1 Hz apart, so the rounded frequency is unambiguous.
    """
    if frequency_hz <= 0:
        raise ValueError(f"Frequency must be positive, got {frequency_hz}")
    return round_half_away(69 + 12 * math.log2(frequency_hz / CONCERT_A_HZ))
