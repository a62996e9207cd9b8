"""Directory descent for prefix-rooted sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from nsresolve.core.names import (
    NamespaceName,
    is_ancestor_or_self,
    qualify,
    relative_segments,
)
from nsresolve.sources.base import FileSystem
from nsresolve.sources.filesystem import LocalFileSystem
from nsresolve.sources.models import Discovery

logger = logging.getLogger(__name__)

PrefixRoots = Mapping[NamespaceName, Sequence[Path]]


def normalize_file_name(raw: str) -> str:
    """Convert a file or directory name to a symbol segment.

    Everything from the first '.' on is dropped, '-' and '_' split words,
    each word gets an upper-case first letter and the words are joined:
    ``user-profile_view.py`` -> ``UserProfileView``. Letters after the first
    keep their case (``http_API`` -> ``HttpAPI``).
    """
    stem = raw.split(".", 1)[0]
    words = stem.replace("_", " ").replace("-", " ").split(" ")
    return "".join(word[:1].upper() + word[1:] for word in words)


class PathWalker:
    """Resolves prefix -> directory declarations against a target namespace."""

    def __init__(self, filesystem: FileSystem | None = None, extension: str = ".py") -> None:
        self._fs = filesystem if filesystem is not None else LocalFileSystem()
        self._extension = extension

    @staticmethod
    def shared_prefixes(target: NamespaceName, roots: PrefixRoots) -> list[NamespaceName]:
        """Declared prefixes that are ancestors of, or equal to, ``target``."""
        return [prefix for prefix in roots if is_ancestor_or_self(prefix, target)]

    @staticmethod
    def ancestor_prefixes(
        target: NamespaceName, shared: Sequence[NamespaceName]
    ) -> list[NamespaceName]:
        """Strict ancestors among ``shared``; these need directory descent."""
        return [prefix for prefix in shared if len(prefix) < len(target)]

    @staticmethod
    def descendant_prefixes(target: NamespaceName, roots: PrefixRoots) -> list[NamespaceName]:
        """Declared prefixes strictly below ``target``."""
        return [prefix for prefix in roots if relative_segments(target, prefix)]

    def descend(self, root: Path, missing: Sequence[str]) -> list[Path]:
        """Directories under ``root`` whose names spell out ``missing``, in order.

        One segment is consumed per directory level. Several directories can
        normalize to the same segment, so more than one leaf may match.
        """
        if not missing:
            return [root]

        head, rest = missing[0], missing[1:]
        leaves: list[Path] = []
        for dirname in self._fs.list_subdirectories(root):
            if normalize_file_name(dirname) == head:
                leaves.extend(self.descend(root / dirname, rest))
        return leaves

    def list_child_symbols(self, path: Path) -> list[tuple[str, Path]]:
        """(segment, file) for each symbol file directly inside ``path``."""
        children = []
        for filename in self._fs.list_files(path, self._extension):
            segment = normalize_file_name(filename)
            if segment:
                children.append((segment, path / filename))
        return children

    def list_child_namespaces(self, path: Path) -> list[str]:
        """Segment for each subdirectory directly inside ``path``."""
        children = []
        for dirname in self._fs.list_subdirectories(path):
            segment = normalize_file_name(dirname)
            if segment:
                children.append(segment)
        return children

    def walk(self, target: NamespaceName, roots: PrefixRoots, legacy: bool = False) -> Discovery:
        """Discover symbols and namespaces of ``target`` under ``roots``.

        Regular roots hold the prefix itself, so only the segments after the
        prefix are directory levels. Legacy roots are base directories under
        which every segment of ``target`` is a directory level.
        """
        discovery = Discovery()
        shared = self.shared_prefixes(target, roots)
        ancestors = set(self.ancestor_prefixes(target, shared))

        for prefix in shared:
            if legacy:
                # PSR-0 layout: the root holds the full name, one directory per segment.
                missing = target.segments
            elif prefix in ancestors:
                missing = target.segments[len(prefix) :]
            else:
                missing = ()
            for root in roots[prefix]:
                leaves = self.descend(root, missing)
                if not leaves:
                    logger.debug("No directory for %s under %s", target, root)
                for leaf in leaves:
                    discovery.extend(self._scan(target, leaf))

        # Deeper declared prefixes imply the child namespaces leading to them.
        for prefix in self.descendant_prefixes(target, roots):
            discovery.namespaces.append(str(prefix))

        return discovery

    def _scan(self, target: NamespaceName, directory: Path) -> Discovery:
        return Discovery(
            symbols=[
                (qualify(target, segment), file)
                for segment, file in self.list_child_symbols(directory)
            ],
            namespaces=[
                qualify(target, segment) for segment in self.list_child_namespaces(directory)
            ],
        )
