"""
Error taxonomy for the PLAY interpreter.

Every error carries the index of the offending character (and the character
itself when there is one). Errors are fatal: the first one aborts the
interpretation and nothing further is emitted.
"""

from __future__ import annotations

from typing import Any, ClassVar

from chuk_mcp_play.constants import ErrorMessages


class PlayError(ValueError):
    """
    Base class for notation errors.

    Subclasses ValueError so callers validating input can catch either.
    """

    kind: ClassVar[str] = "play_error"
    default_message: ClassVar[str] = "Invalid notation."

    def __init__(
        self,
        index: int,
        character: str | None = None,
        message: str | None = None,
    ) -> None:
        self.index = index
        self.character = character
        self.message = message or self.default_message
        super().__init__(f"Invalid token at {index}: '{character or ''}'. {self.message}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON tool responses."""
        return {
            "kind": self.kind,
            "index": self.index,
            "character": self.character,
            "message": self.message,
        }


class UnexpectedEndOfInput(PlayError):
    """The cursor was asked to read past the end of the text."""

    kind = "unexpected_end_of_input"
    default_message = ErrorMessages.END_OF_INPUT


class UnexpectedCharacter(PlayError):
    """A character did not start any token (or was not a valid M mode)."""

    kind = "unexpected_character"
    default_message = ErrorMessages.UNEXPECTED_CHARACTER


class OctaveOutOfRange(PlayError):
    kind = "octave_out_of_range"
    default_message = ErrorMessages.OCTAVE_RANGE


class NoteLengthOutOfRange(PlayError):
    kind = "note_length_out_of_range"
    default_message = ErrorMessages.NOTE_LENGTH_RANGE


class NoteNumberOutOfRange(PlayError):
    kind = "note_number_out_of_range"
    default_message = ErrorMessages.NOTE_NUMBER_RANGE


class TempoOutOfRange(PlayError):
    """Tempo outside 32-255, or missing its mandatory second digit."""

    kind = "tempo_out_of_range"
    default_message = ErrorMessages.TEMPO_RANGE


class InvalidDottedCount(PlayError):
    kind = "invalid_dotted_count"
    default_message = ErrorMessages.DOTTED_COUNT
