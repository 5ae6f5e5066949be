"""
Play tools - MCP tools for interpreting PLAY notation.

Tools for turning notation into events, checking it, and rendering it
to MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_play.core.errors import PlayError
from chuk_mcp_play.interpreter import PlayInterpreter, collect_events, total_duration_ms
from chuk_mcp_play.interpreter.events import Tone
from chuk_mcp_play.sinks import MidiSink

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def render_midi(notation: str, path: Path) -> MidiSink:
    """
    Interpret notation into a MIDI file.

    Raises:
        PlayError: If the notation is malformed (no file is written)
    """
    sink = MidiSink()
    PlayInterpreter(sink).play(notation)
    sink.save(path)
    return sink


def play_error_response(error: PlayError) -> str:
    """JSON error response carrying the notation error's position."""
    return json.dumps({"status": "error", "message": str(error), "error": error.to_dict()})


def register_play_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register interpretation tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for rendered MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def play_interpret(notation: str) -> str:
        """
        Interpret PLAY notation into tone and silence events.

        Nothing is sounded; the events are returned so the caller can
        inspect pitches and timing.

        Args:
            notation: PLAY string (e.g. "T120 O3 L4 C D E")

        Returns:
            JSON string with the event list and total duration

        Example:
            play_interpret(notation="T120 O3 MN L4 C")
        """
        try:
            events = collect_events(notation)
            tones = sum(1 for e in events if isinstance(e, Tone))
            return json.dumps(
                {
                    "status": "success",
                    "events": [e.to_dict() for e in events],
                    "tone_count": tones,
                    "silence_count": len(events) - tones,
                    "total_duration_ms": total_duration_ms(events),
                }
            )
        except PlayError as e:
            return play_error_response(e)
        except Exception as e:
            logger.exception("Failed to interpret notation")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_interpret"] = play_interpret

    @mcp.tool  # type: ignore[arg-type]
    async def play_validate(notation: str) -> str:
        """
        Check PLAY notation without rendering it.

        Args:
            notation: PLAY string

        Returns:
            JSON string with valid flag and, if invalid, the error position

        Example:
            play_validate(notation="O9 C")
        """
        try:
            PlayInterpreter().play(notation)
            return json.dumps({"status": "success", "valid": True})
        except PlayError as e:
            return json.dumps(
                {
                    "status": "success",
                    "valid": False,
                    "message": str(e),
                    "error": e.to_dict(),
                }
            )
        except Exception as e:
            logger.exception("Failed to validate notation")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_validate"] = play_validate

    @mcp.tool  # type: ignore[arg-type]
    async def play_render_midi(notation: str, output_name: str) -> str:
        """
        Render PLAY notation to a MIDI file.

        Args:
            notation: PLAY string
            output_name: Output filename (without .mid extension)

        Returns:
            JSON string with the file path and note count

        Example:
            play_render_midi(notation="T200 O3 L4 E E L2 E", output_name="bells")
        """
        try:
            output_path = output_dir / f"{output_name}.mid"
            sink = render_midi(notation, output_path)
            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "note_count": len(sink.notes),
                    "message": f"Rendered {len(sink.notes)} notes to {output_path.name}",
                }
            )
        except PlayError as e:
            return play_error_response(e)
        except Exception as e:
            logger.exception("Failed to render MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_render_midi"] = play_render_midi

    return tools
