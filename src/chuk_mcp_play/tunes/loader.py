"""
Tune loader - discovers and loads PLAY tunes.

Tunes can come from:
1. Built-in library (shipped with package)
2. Project tunes (user's project/tunes directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_play.models.tune import Tune, TuneMetadata

logger = logging.getLogger(__name__)


class TuneLoader:
    """
    Discovers and loads tunes from YAML files.

    Project tunes override library tunes with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tune loader.

        Args:
            library_path: Path to built-in tune library
            project_path: Path to project tunes directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Tune] = {}

    def list_tunes(self) -> list[TuneMetadata]:
        """List all available tunes, sorted by name."""
        tunes: dict[str, TuneMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in directory.glob("*.yaml"):
                tune = self._load_tune_file(path)
                if tune:
                    tunes[tune.name] = TuneMetadata.from_tune(tune)

        return sorted(tunes.values(), key=lambda m: m.name)

    def get_tune(self, name: str) -> Tune | None:
        """
        Get a tune by name.

        Args:
            name: Tune name

        Returns:
            Tune if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                tune = self._load_tune_file(path)
                if tune:
                    self._cache[name] = tune
                    return tune

        return None

    def save_tune(self, tune: Tune) -> Path:
        """
        Write a tune to the project directory.

        Args:
            tune: Tune to save

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{tune.name}.yaml"
        with open(path, "w") as f:
            yaml.safe_dump(tune.model_dump(exclude_none=True), f, sort_keys=False)

        self._cache.pop(tune.name, None)
        return path

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library tune to the project for editing.

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Tune already exists in project: {name}")

        dest_file.write_text(library_file.read_text())
        self._cache.pop(name, None)
        return dest_file

    def _load_tune_file(self, path: Path) -> Tune | None:
        """Load a tune from a YAML file; unreadable files are skipped."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_tune(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, AttributeError, TypeError):
            logger.warning(f"Skipping unreadable tune file: {path}")
            return None

    def _parse_tune(self, data: dict[str, Any], default_name: str) -> Tune:
        return Tune(
            name=data.get("name", default_name),
            title=data.get("title", ""),
            description=data.get("description", ""),
            composer=data.get("composer"),
            notation=data.get("notation", ""),
        )

    def clear_cache(self) -> None:
        """Clear the tune cache."""
        self._cache.clear()
