"""
Tune tools - MCP tools for the tune library.

Tools for listing, describing, saving and rendering stored tunes.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from chuk_mcp_play.constants import ErrorMessages
from chuk_mcp_play.core.errors import PlayError
from chuk_mcp_play.interpreter import PlayInterpreter
from chuk_mcp_play.models.tune import Tune
from chuk_mcp_play.tools.play import play_error_response, render_midi
from chuk_mcp_play.tunes import TuneLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_tune_tools(
    mcp: ChukMCPServer,
    loader: TuneLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register tune library tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: The tune loader
        output_dir: Directory for rendered MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def not_found(name: str) -> str:
        return json.dumps({"status": "error", "message": ErrorMessages.TUNE_NOT_FOUND.format(name=name)})

    @mcp.tool  # type: ignore[arg-type]
    async def play_list_tunes() -> str:
        """
        List available tunes.

        Returns:
            JSON string with tune names, titles and descriptions

        Example:
            play_list_tunes()
        """
        try:
            tunes = loader.list_tunes()
            return json.dumps(
                {
                    "status": "success",
                    "tunes": [t.model_dump() for t in tunes],
                    "count": len(tunes),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_list_tunes"] = play_list_tunes

    @mcp.tool  # type: ignore[arg-type]
    async def play_describe_tune(name: str) -> str:
        """
        Get a tune, including its notation.

        Args:
            name: Tune name (e.g. "jingle_bells")

        Returns:
            JSON string with the full tune

        Example:
            play_describe_tune(name="ode_to_joy")
        """
        try:
            tune = loader.get_tune(name)
            if tune is None:
                return not_found(name)
            return json.dumps({"status": "success", "tune": tune.model_dump()})
        except Exception as e:
            logger.exception("Failed to describe tune")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_describe_tune"] = play_describe_tune

    @mcp.tool  # type: ignore[arg-type]
    async def play_save_tune(
        name: str,
        notation: str,
        title: str = "",
        description: str = "",
    ) -> str:
        """
        Save notation as a project tune.

        The notation is checked first; malformed notation is not saved.

        Args:
            name: Tune name (used as the file name)
            notation: PLAY string
            title: Optional title
            description: Optional description

        Returns:
            JSON string with the saved path

        Example:
            play_save_tune(name="riff", notation="T140 O3 L8 C E G > C")
        """
        try:
            tune = Tune(name=name, title=title, description=description, notation=notation)
            PlayInterpreter().play(tune.notation)
            path = loader.save_tune(tune)
            return json.dumps({"status": "success", "path": str(path)})
        except PlayError as e:
            return play_error_response(e)
        except ValidationError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to save tune")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_save_tune"] = play_save_tune

    @mcp.tool  # type: ignore[arg-type]
    async def play_render_tune(name: str, output_name: str | None = None) -> str:
        """
        Render a stored tune to a MIDI file.

        Args:
            name: Tune name
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and note count

        Example:
            play_render_tune(name="jingle_bells")
        """
        try:
            tune = loader.get_tune(name)
            if tune is None:
                return not_found(name)

            output_path = output_dir / f"{output_name or name}.mid"
            sink = render_midi(tune.notation, output_path)
            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "note_count": len(sink.notes),
                }
            )
        except PlayError as e:
            return play_error_response(e)
        except Exception as e:
            logger.exception("Failed to render tune")
            return json.dumps({"status": "error", "message": str(e)})

    tools["play_render_tune"] = play_render_tune

    return tools
