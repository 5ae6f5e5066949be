"""
Pydantic models for stored tunes.
"""

from chuk_mcp_play.models.tune import Tune, TuneMetadata

__all__ = [
    "Tune",
    "TuneMetadata",
]
