"""
Constants and enums for the PLAY interpreter.

No magic numbers - defaults and valid ranges live here so the token rules
and the error messages agree.
"""

from enum import Enum

# Interpreter defaults
DEFAULT_OCTAVE = 3
DEFAULT_TEMPO = 120  # quarter notes per minute
DEFAULT_NOTE_LENGTH = 4  # 4 = quarter note

# Valid ranges (inclusive)
OCTAVE_RANGE: tuple[int, int] = (0, 6)
TEMPO_RANGE: tuple[int, int] = (32, 255)
NOTE_LENGTH_RANGE: tuple[int, int] = (1, 64)
NOTE_NUMBER_RANGE: tuple[int, int] = (0, 84)
MAX_DOTS = 2

# Pitch index space
PAUSE = 0  # Pause sentinel
NOTE_NUMBER_OFFSET = 5  # N0 maps to pitch index 5
LOWEST_AUDIBLE_PITCH = 6  # Indices below this are silences
CONCERT_A_PITCH = 49  # Pitch index of A4
CONCERT_A_HZ = 440.0

# Characters skipped between tokens
WHITESPACE = frozenset("\t\n\v\f\r ")


class Articulation(float, Enum):
    """
    Articulation modifiers (fraction of the nominal duration that sounds).

    Selected with ML / MN / MS.
    """

    STACCATO = 0.75
    NORMAL = 0.875
    LEGATO = 1.0


class PlaybackMode(str, Enum):
    """Execution modes selected with MB / MF. Accepted, never acted on."""

    BACKGROUND = "B"
    FOREGROUND = "F"


ARTICULATION_CODES: dict[str, Articulation] = {
    "L": Articulation.LEGATO,
    "N": Articulation.NORMAL,
    "S": Articulation.STACCATO,
}


class ErrorMessages:
    """Standardized error messages."""

    END_OF_INPUT = "Unexpected end of stream."
    UNEXPECTED_CHARACTER = "Unexpected character."
    OCTAVE_RANGE = "Octave must be between 0 and 6 (inclusive)."
    OCTAVE_BELOW = "Octave cannot go below 0."
    OCTAVE_ABOVE = "Octave cannot go above 6."
    NOTE_LENGTH_RANGE = "Note length must be between 1 and 64 (inclusive)."
    NOTE_NUMBER_RANGE = "Note must be between 0 and 84 (inclusive)."
    TEMPO_RANGE = "Tempo must be between 32 and 255 (inclusive)."
    DOTTED_COUNT = "The dotted count must be between 0 and 2 (inclusive)."
    TUNE_NOT_FOUND = "Tune '{name}' not found."
