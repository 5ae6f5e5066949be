"""
Rhythm primitives - dotted durations and note-length to milliseconds.

Durations are computed in floating point and rounded exactly once,
half away from zero, at the very end.
"""

from __future__ import annotations

import math

from chuk_mcp_play.constants import MAX_DOTS

# Dot count -> duration multiplier
DOT_MULTIPLIERS: tuple[float, ...] = (1.0, 1.5, 1.75)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (437.5 -> 438)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def dot_multiplier(dots: int) -> float:
    """
    Duration multiplier for a dotted note.

    Args:
        dots: Number of dots (0-2)

    Returns:
        1.0, 1.5 or 1.75
    """
    if not 0 <= dots <= MAX_DOTS:
        raise ValueError(f"Dot count must be 0-{MAX_DOTS}, got {dots}")
    return DOT_MULTIPLIERS[dots]


def quarter_note_ms(tempo: int) -> float:
    """Milliseconds per quarter note at the given tempo."""
    return (60.0 / tempo) * 1000.0


def duration_ms(
    tempo: int,
    note_length: int,
    multiplier: float = 1.0,
    articulation: float = 1.0,
) -> int:
    """
    Duration of a note or pause in milliseconds.

    Args:
        tempo: Quarter notes per minute
        note_length: Denominator of a whole note (4 = quarter)
        multiplier: Dotted-duration multiplier
        articulation: Articulation modifier (0.75 / 0.875 / 1.0)

    Returns:
        Rounded milliseconds

    Example:
        duration_ms(120, 4, 1.0, 0.875) == 438
    """
    value = quarter_note_ms(tempo)
    value *= 4.0 / note_length
    value *= multiplier
    value *= articulation
    return round_half_away(value)
