"""
Tune library - named PLAY strings stored as YAML.

Bundled tunes ship in library/; a project can add or override tunes
in its own tunes directory.
"""

from chuk_mcp_play.tunes.loader import TuneLoader

__all__ = [
    "TuneLoader",
]
