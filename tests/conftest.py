"""Shared fixtures: fake filesystem, counting source and a clean registry."""

from __future__ import annotations

import tempfile
from collections import defaultdict
from pathlib import Path

import pytest

from nsresolve.core.registry import SourceRegistry, set_default_registry
from nsresolve.sources.static import StaticSource


class FakeFileSystem:
    """In-memory directory tree built from path strings.

    A path ending in '/' declares an (empty) directory, anything else a file.
    """

    def __init__(self, paths: list[str]) -> None:
        self.subdirs: dict[Path, list[str]] = defaultdict(list)
        self.files: dict[Path, list[str]] = defaultdict(list)
        self.calls = 0

        for raw in paths:
            parts = Path(raw).parts
            for i in range(1, len(parts) - 1):
                self._add(self.subdirs, Path(*parts[:i]), parts[i])
            if raw.endswith("/"):
                self._add(self.subdirs, Path(*parts[:-1]), parts[-1])
            else:
                self._add(self.files, Path(*parts[:-1]), parts[-1])

    @staticmethod
    def _add(table: dict[Path, list[str]], parent: Path, name: str) -> None:
        if name not in table[parent]:
            table[parent].append(name)

    def list_subdirectories(self, path: Path) -> list[str]:
        self.calls += 1
        return sorted(self.subdirs.get(Path(path), []))

    def list_files(self, path: Path, extension: str) -> list[str]:
        self.calls += 1
        return sorted(n for n in self.files.get(Path(path), []) if n.endswith(extension))


class CountingSource(StaticSource):
    """StaticSource that counts how often the resolver reads it."""

    def __init__(self, name: str = "", authoritative: bool = False) -> None:
        super().__init__(name, authoritative)
        self.reads = 0

    def explicit_map(self):  # type: ignore[no-untyped-def]
        self.reads += 1
        return super().explicit_map()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def registry() -> SourceRegistry:
    """A fresh registry reading '.php' symbol files."""
    registry = SourceRegistry()
    registry.settings.extension = ".php"
    return registry


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Keep the process default registry from leaking between tests."""
    yield
    set_default_registry(None)


@pytest.fixture
def make_fs():
    return FakeFileSystem


@pytest.fixture
def counting_source():
    return CountingSource
