"""
Tune model - a named piece of PLAY notation.

Tunes live in YAML files, in the bundled library or in a project's
tunes directory, and can be interpreted or rendered by name.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Tune(BaseModel):
    """A stored PLAY string with descriptive metadata."""

    name: str = Field(..., min_length=1, description="Tune identifier (file stem)")
    title: str = Field("", description="Human-readable title")
    description: str = Field("", description="What the tune is or exercises")
    composer: str | None = Field(None, description="Composer or source")
    notation: str = Field(..., description="PLAY notation")

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Notation must not be empty")
        return v


class TuneMetadata(BaseModel):
    """Lightweight tune info for listings."""

    name: str
    title: str
    description: str
    composer: str | None = None

    @classmethod
    def from_tune(cls, tune: Tune) -> TuneMetadata:
        return cls(
            name=tune.name,
            title=tune.title or tune.name,
            description=tune.description,
            composer=tune.composer,
        )
