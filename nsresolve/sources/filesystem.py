"""Local filesystem access for prefix-rooted sources."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Lists directory entries with pathlib; never raises on bad paths.

    Hidden entries (leading '.') and dunder entries (`__init__.py`,
    `__pycache__`) are skipped. Names are returned sorted.
    """

    def list_subdirectories(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in self._entries(path) if _is_dir(entry))

    def list_files(self, path: Path, extension: str) -> list[str]:
        return sorted(
            entry.name
            for entry in self._entries(path)
            if entry.name.endswith(extension) and _is_file(entry)
        )

    def _entries(self, path: Path) -> list[Path]:
        try:
            return [entry for entry in path.iterdir() if not entry.name.startswith((".", "__"))]
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return []


def _is_dir(entry: Path) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def _is_file(entry: Path) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False
