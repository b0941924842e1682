"""
Tonal key loader - discovers and loads functional nuclei tables.

Tables can come from:
1. Built-in library (shipped with package)
2. Project tables (user's tonal_keys directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_harmony.constants import SuccessMessages
from chuk_mcp_harmony.core.errors import TonalKeyNotFound
from chuk_mcp_harmony.models.tonal_key import TonalKey

logger = logging.getLogger(__name__)


class TonalKeyLoader:
    """
    Discovers and loads tonal key tables.

    Tables are loaded from YAML files in the library and project directories.
    Project tables override library tables with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Path to the built-in table library
            project_path: Path to the project tables directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TonalKey] = {}

    def list_tonal_keys(self) -> list[TonalKey]:
        """
        List all available tables.

        Project tables take precedence over library tables of the same name.
        """
        tables: dict[str, TonalKey] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                table = self._load_file(path)
                tables[table.name] = table

        return list(tables.values())

    def get_tonal_key(self, name: str) -> TonalKey:
        """
        Get a table by name.

        Raises:
            TonalKeyNotFound: no library or project file with that name
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                table = self._load_file(path)
                self._cache[name] = table
                return table

        raise TonalKeyNotFound(name)

    def clear_cache(self) -> None:
        """Clear the table cache."""
        self._cache.clear()

    def _load_file(self, path: Path) -> TonalKey:
        """Load a table from a YAML file; malformed files raise."""
        try:
            with open(path) as f:
                data: dict[str, Any] = yaml.safe_load(f) or {}
            data.setdefault("name", path.stem)
            table = TonalKey.model_validate(data)
        except Exception:
            logger.exception(f"Failed to load tonal key table from {path}")
            raise

        logger.debug(SuccessMessages.TONAL_KEY_LOADED.format(name=table.name, path=path))
        return table
