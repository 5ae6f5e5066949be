#!/usr/bin/env python3
"""
Example: Render the bundled tunes to MIDI files.

Interprets each tune in the library through a MidiSink and prints its
event summary.

Usage:
    python examples/render_tunes.py
    # Creates: examples/output/<tune>.mid
"""

from pathlib import Path

from chuk_mcp_play import MidiSink, PlayError, RecordingSink, interpret
from chuk_mcp_play.tunes import TuneLoader


def main() -> None:
    """Render every library tune, then show an error report."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    loader = TuneLoader()
    for meta in loader.list_tunes():
        tune = loader.get_tune(meta.name)

        recorder = RecordingSink()
        interpret(tune.notation, recorder)

        midi = MidiSink()
        interpret(tune.notation, midi)
        path = midi.save(output_dir / f"{tune.name}.mid")

        print(f"{meta.title}:")
        print(f"  Tones: {len(recorder.tones)}, silences: {len(recorder.silences)}")
        print(f"  Length: {recorder.total_duration_ms / 1000:.1f}s")
        print(f"  Created: {path}")

    # Errors carry the position of the offending character
    try:
        interpret("T120 O3 L4 C D O9 E")
    except PlayError as e:
        print(f"\nError example: {e}")
        print(f"  {e.to_dict()}")


if __name__ == "__main__":
    main()
