#!/usr/bin/env python3
"""
Async PLAY MCP Server using chuk-mcp-server

This server exposes the PLAY music macro language interpreter as MCP
tools. Notation like "T120 O3 L4 C D E" is interpreted in a single pass
into tones and pauses.

The server provides tools for:
- Interpreting notation into timed tone/silence events
- Validating notation with error positions
- Rendering notation to MIDI files
- Browsing, saving and rendering a tune library
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_play.tools import register_play_tools, register_tune_tools
from chuk_mcp_play.tunes import TuneLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-play")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TUNES_DIR = BASE_PATH / "tunes"
OUTPUT_DIR = BASE_PATH / "output"
LIBRARY_PATH = Path(__file__).parent / "tunes" / "library"

tune_loader = TuneLoader(
    library_path=LIBRARY_PATH,
    project_path=TUNES_DIR,
)

# Register all tools
play_tools = register_play_tools(mcp, OUTPUT_DIR)
tune_tools = register_tune_tools(mcp, tune_loader, OUTPUT_DIR)

# Export tool functions for direct access
play_interpret = play_tools["play_interpret"]
play_validate = play_tools["play_validate"]
play_render_midi = play_tools["play_render_midi"]

play_list_tunes = tune_tools["play_list_tunes"]
play_describe_tune = tune_tools["play_describe_tune"]
play_save_tune = tune_tools["play_save_tune"]
play_render_tune = tune_tools["play_render_tune"]

logger.info("CHUK PLAY MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Tunes dir: {TUNES_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
