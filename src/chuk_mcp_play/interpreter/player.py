"""
PLAY interpreter - scans and plays notation in a single pass.

There is no token list: each iteration lands on a leading character,
the matching rule consumes the rest of its token (looking ahead for
accidentals, digits and dots), and notes are emitted to the sink as
soon as they are resolved.

Notation summary:
    O<d>          set octave (0-6)
    < >           octave down / up
    A-G[+#-][len][.]   note with optional accidental, length and dots
    N<nn>[.]      explicit note number (0-84), 0 is a rest
    P<len>[.]     pause
    L<len>        default note length (1-64)
    T<nnn>        tempo in quarter notes per minute (32-255)
    MB MF         background / foreground (accepted, ignored)
    ML MN MS      legato / normal / staccato
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chuk_mcp_play.constants import (
    ARTICULATION_CODES,
    MAX_DOTS,
    NOTE_LENGTH_RANGE,
    NOTE_NUMBER_OFFSET,
    NOTE_NUMBER_RANGE,
    OCTAVE_RANGE,
    PAUSE,
    TEMPO_RANGE,
    WHITESPACE,
    ErrorMessages,
    PlaybackMode,
)
from chuk_mcp_play.core.cursor import Cursor
from chuk_mcp_play.core.errors import (
    InvalidDottedCount,
    NoteLengthOutOfRange,
    NoteNumberOutOfRange,
    OctaveOutOfRange,
    TempoOutOfRange,
    UnexpectedCharacter,
)
from chuk_mcp_play.core.pitch import Accidental, NoteLetter, is_audible, pitch_to_frequency
from chuk_mcp_play.core.rhythm import dot_multiplier, duration_ms
from chuk_mcp_play.interpreter.events import PlayEvent
from chuk_mcp_play.interpreter.state import InterpreterState
from chuk_mcp_play.sinks.base import NullSink, PlaySink

logger = logging.getLogger(__name__)

Rule = Callable[[Cursor, InterpreterState], None]


def _digit(ch: str | None) -> int | None:
    """Value of an ASCII digit, None for anything else."""
    if ch is not None and "0" <= ch <= "9":
        return ord(ch) - ord("0")
    return None


class PlayInterpreter:
    """
    Interprets PLAY notation and sends each event to a sink.

    The interpreter itself holds no per-call state: every call to play()
    gets a fresh InterpreterState and Cursor, so one interpreter can be
    reused for any number of strings.

    Example:
        sink = RecordingSink()
        PlayInterpreter(sink).play("T120 O3 L4 C D E")
        sink.tones[0].frequency_hz  # 262
    """

    def __init__(self, sink: PlaySink | None = None):
        """
        Initialize the interpreter.

        Args:
            sink: Output sink; events are discarded when omitted
        """
        self.sink: PlaySink = sink if sink is not None else NullSink()
        self._rules: dict[str, Rule] = {
            "O": self._set_octave,
            "<": self._octave_down,
            ">": self._octave_up,
            "N": self._play_note_number,
            "P": self._pause,
            "L": self._set_note_length,
            "T": self._set_tempo,
            "M": self._set_mode,
        }
        for letter in NoteLetter:
            self._rules[letter.name] = self._play_note
        for ch in WHITESPACE:
            self._rules[ch] = self._skip

    def play(self, text: str) -> None:
        """
        Interpret and play a notation string.

        Args:
            text: PLAY notation

        Raises:
            PlayError: On the first malformed token; nothing after it is played
        """
        cursor = Cursor(text)
        state = InterpreterState()

        while not cursor.at_end():
            ch = cursor.current()
            rule = self._rules.get(ch)
            if rule is None:
                raise UnexpectedCharacter(cursor.index, ch)
            rule(cursor, state)
            cursor.advance()

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def _skip(self, cursor: Cursor, state: InterpreterState) -> None:
        pass

    def _set_octave(self, cursor: Cursor, state: InterpreterState) -> None:
        ch = cursor.advance_and_read()
        value = _digit(ch)
        if value is None or not OCTAVE_RANGE[0] <= value <= OCTAVE_RANGE[1]:
            raise OctaveOutOfRange(cursor.index, ch)
        state.octave = value
        logger.debug(f"Octave set to {value}")

    def _octave_down(self, cursor: Cursor, state: InterpreterState) -> None:
        if state.octave - 1 < OCTAVE_RANGE[0]:
            raise OctaveOutOfRange(cursor.index, "<", ErrorMessages.OCTAVE_BELOW)
        state.octave -= 1

    def _octave_up(self, cursor: Cursor, state: InterpreterState) -> None:
        if state.octave + 1 > OCTAVE_RANGE[1]:
            raise OctaveOutOfRange(cursor.index, ">", ErrorMessages.OCTAVE_ABOVE)
        state.octave += 1

    def _set_note_length(self, cursor: Cursor, state: InterpreterState) -> None:
        state.note_length = self._parse_note_length(cursor)
        logger.debug(f"Note length set to {state.note_length}")

    def _set_tempo(self, cursor: Cursor, state: InterpreterState) -> None:
        ch = cursor.advance_and_read()
        first = _digit(ch)
        second = _digit(cursor.peek_next())
        # Two digits are mandatory, and the first cannot be 0
        if first is None or first < 1 or second is None:
            raise TempoOutOfRange(cursor.index, ch)
        cursor.advance()
        value = first * 10 + second

        third = _digit(cursor.peek_next())
        if third is not None:
            cursor.advance()
            value = value * 10 + third

        if not TEMPO_RANGE[0] <= value <= TEMPO_RANGE[1]:
            raise TempoOutOfRange(cursor.index, cursor.current())
        state.tempo = value
        logger.debug(f"Tempo set to {value}")

    def _set_mode(self, cursor: Cursor, state: InterpreterState) -> None:
        ch = cursor.advance_and_read()
        if ch in (PlaybackMode.BACKGROUND.value, PlaybackMode.FOREGROUND.value):
            logger.debug(f"Ignoring unsupported playback mode M{ch}")
        elif ch in ARTICULATION_CODES:
            state.articulation = ARTICULATION_CODES[ch]
            logger.debug(f"Articulation set to {state.articulation.name.lower()}")
        else:
            raise UnexpectedCharacter(cursor.index, ch)

    # ------------------------------------------------------------------
    # Notes and pauses
    # ------------------------------------------------------------------

    def _play_note(self, cursor: Cursor, state: InterpreterState) -> None:
        letter = NoteLetter[cursor.current()]

        accidental = Accidental.from_char(cursor.peek_next())
        if accidental is not None:
            cursor.advance()
        pitch = letter.pitch(state.octave, accidental)

        length = self._parse_note_length(cursor) if cursor.peek_is_digit() else None
        with state.note_length_override(length):
            multiplier = self._parse_dots(cursor)
            self._emit(pitch, multiplier, state)

    def _play_note_number(self, cursor: Cursor, state: InterpreterState) -> None:
        pitch = self._parse_note_number(cursor) + NOTE_NUMBER_OFFSET
        multiplier = self._parse_dots(cursor)
        self._emit(pitch, multiplier, state)

    def _pause(self, cursor: Cursor, state: InterpreterState) -> None:
        length = self._parse_note_length(cursor)
        with state.note_length_override(length):
            multiplier = self._parse_dots(cursor)
            self._emit(PAUSE, multiplier, state)

    def _emit(self, pitch: int, multiplier: float, state: InterpreterState) -> None:
        """Turn a resolved pitch into a tone or a silence."""
        duration = duration_ms(
            state.tempo,
            state.note_length,
            multiplier,
            state.articulation.value,
        )
        if is_audible(pitch):
            frequency = pitch_to_frequency(pitch)
            logger.debug(f"Tone {frequency} Hz for {duration} ms (pitch {pitch})")
            self.sink.sound(frequency, duration)
        else:
            logger.debug(f"Silence for {duration} ms")
            self.sink.wait(duration)

    # ------------------------------------------------------------------
    # Shared sub-rules
    # ------------------------------------------------------------------

    def _parse_note_length(self, cursor: Cursor) -> int:
        ch = cursor.advance_and_read()
        value = _digit(ch)
        if value is None or value < 1:
            raise NoteLengthOutOfRange(cursor.index, ch)

        second = _digit(cursor.peek_next())
        if second is not None:
            cursor.advance()
            value = value * 10 + second

        if not NOTE_LENGTH_RANGE[0] <= value <= NOTE_LENGTH_RANGE[1]:
            raise NoteLengthOutOfRange(cursor.index, cursor.current())
        return value

    def _parse_note_number(self, cursor: Cursor) -> int:
        ch = cursor.advance_and_read()
        value = _digit(ch)
        if value is None:
            raise NoteNumberOutOfRange(cursor.index, ch)

        second = _digit(cursor.peek_next())
        if second is not None:
            cursor.advance()
            value = value * 10 + second

        if not NOTE_NUMBER_RANGE[0] <= value <= NOTE_NUMBER_RANGE[1]:
            raise NoteNumberOutOfRange(cursor.index, cursor.current())
        return value

    def _parse_dots(self, cursor: Cursor) -> float:
        dots = 0
        while cursor.peek_next() == ".":
            cursor.advance()
            dots += 1
            if dots > MAX_DOTS:
                raise InvalidDottedCount(cursor.index, ".")
        return dot_multiplier(dots)


def interpret(text: str, sink: PlaySink | None = None) -> None:
    """
    Interpret a PLAY string, sending events to the sink.

    Args:
        text: PLAY notation
        sink: Output sink (NullSink when omitted)

    Raises:
        PlayError: On the first malformed token
    """
    PlayInterpreter(sink).play(text)


def collect_events(text: str) -> list[PlayEvent]:
    """Interpret a PLAY string and return its events without playing them."""
    # Deferred: the recording sink imports this package's events
    from chuk_mcp_play.sinks.recording import RecordingSink

    sink = RecordingSink()
    PlayInterpreter(sink).play(text)
    return sink.events
