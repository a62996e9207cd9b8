"""In-memory source, filled the way a package loader is configured."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from nsresolve.core.names import NamespaceName, normalize


class StaticSource:
    """Source backed by a class map and prefix -> directory declarations."""

    def __init__(self, name: str = "", authoritative: bool = False) -> None:
        self.name = name
        self._class_map: dict[str, Path | None] = {}
        self._prefixes: dict[NamespaceName, list[Path]] = {}
        self._legacy_prefixes: dict[NamespaceName, list[Path]] = {}
        self._authoritative = authoritative

    def add_class_map(self, class_map: Mapping[str, str | Path | None]) -> StaticSource:
        """Declare symbols by qualified name. Later duplicates are ignored."""
        for qualified_name, location in class_map.items():
            key = str(normalize(qualified_name))
            if key and key not in self._class_map:
                self._class_map[key] = Path(location) if location is not None else None
        return self

    def add_prefix(self, prefix: str, paths: str | Path | Iterable[str | Path]) -> StaticSource:
        """Map a namespace prefix to one or more root directories."""
        _extend(self._prefixes, prefix, paths)
        return self

    def add_legacy_prefix(
        self, prefix: str, paths: str | Path | Iterable[str | Path]
    ) -> StaticSource:
        """Map a prefix to base directories using the one-segment-per-level layout."""
        _extend(self._legacy_prefixes, prefix, paths)
        return self

    def set_authoritative(self, authoritative: bool = True) -> StaticSource:
        self._authoritative = authoritative
        return self

    def explicit_map(self) -> Mapping[str, Path | None]:
        return self._class_map

    def is_authoritative(self) -> bool:
        return self._authoritative

    def prefix_roots(self) -> Mapping[NamespaceName, Sequence[Path]]:
        return self._prefixes

    def legacy_prefix_roots(self) -> Mapping[NamespaceName, Sequence[Path]]:
        return self._legacy_prefixes

    def __repr__(self) -> str:
        return (
            f"StaticSource(name={self.name!r}, classes={len(self._class_map)}, "
            f"prefixes={len(self._prefixes)}, legacy_prefixes={len(self._legacy_prefixes)}, "
            f"authoritative={self._authoritative})"
        )


def _extend(
    table: dict[NamespaceName, list[Path]],
    prefix: str,
    paths: str | Path | Iterable[str | Path],
) -> None:
    if isinstance(paths, (str, Path)):
        paths = [paths]
    roots = table.setdefault(normalize(prefix), [])
    for path in paths:
        root = Path(path)
        if root not in roots:
            roots.append(root)
