"""Protocols for symbol sources and the filesystem they point at."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from nsresolve.core.names import NamespaceName


class Source(Protocol):
    """Protocol for symbol sources consumed by the resolver."""

    def explicit_map(self) -> Mapping[str, Path | None]:
        """Qualified symbol name -> location."""
        ...

    def is_authoritative(self) -> bool:
        """True if the explicit map is a closed world (no prefix scanning)."""
        ...

    def prefix_roots(self) -> Mapping[NamespaceName, Sequence[Path]]:
        """Namespace prefix -> directories holding that prefix's symbols."""
        ...

    def legacy_prefix_roots(self) -> Mapping[NamespaceName, Sequence[Path]]:
        """Like prefix_roots, with every namespace segment as a directory level."""
        ...


class FileSystem(Protocol):
    """Directory listing used by the path walker.

    Both methods return an empty list for missing or unreadable paths.
    """

    def list_subdirectories(self, path: Path) -> list[str]:
        ...

    def list_files(self, path: Path, extension: str) -> list[str]:
        ...
