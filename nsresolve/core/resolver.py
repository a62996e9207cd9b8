"""Merge engine: fills a namespace's maps from its sources."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from nsresolve.core.models import EntryState, Resolved, Unresolved
from nsresolve.core.names import NamespaceName, classify_namespace, classify_symbol
from nsresolve.core.registry import SourceRegistry
from nsresolve.sources.base import FileSystem, Source
from nsresolve.sources.declared import DeclaredSymbols, runtime_declared_symbols
from nsresolve.sources.models import Discovery
from nsresolve.sources.walker import PathWalker

logger = logging.getLogger(__name__)


@dataclass
class NamespaceState:
    """Merged maps of one namespace and the snapshot they were built from."""

    name: NamespaceName
    classes: dict[str, EntryState] = field(default_factory=dict)
    namespaces: dict[str, EntryState] = field(default_factory=dict)
    prepared: bool = False
    snapshot: int | None = None
    merges: int = 0


class MergeEngine:
    """Coordinates sources, the path walker and first-writer-wins merging."""

    def __init__(
        self,
        registry: SourceRegistry,
        filesystem: FileSystem | None = None,
        declared: DeclaredSymbols | None = None,
    ) -> None:
        self.registry = registry
        self.filesystem = filesystem
        self._declared = declared if declared is not None else runtime_declared_symbols

    def prepare(
        self, state: NamespaceState, custom_sources: Sequence[Source] | None = None
    ) -> bool:
        """Merge ``state`` again if needed. Returns True if a merge happened.

        Namespaces on the global list merge again whenever the registry
        snapshot moved. Namespaces with custom sources merge once, until
        ``state.prepared`` is reset.
        """
        if custom_sources is None:
            sources, snapshot = self.registry.current_sources()
            if state.snapshot != snapshot:
                state.prepared = False
        else:
            sources, snapshot = tuple(custom_sources), self.registry.snapshot

        if state.prepared:
            return False

        self.merge(state, sources)
        state.snapshot = snapshot
        state.prepared = True
        return True

    def merge(self, state: NamespaceState, sources: Iterable[Source]) -> None:
        """Rebuild ``state`` maps from ``sources``, in order."""
        previous = state.namespaces
        state.classes = {}
        state.namespaces = {}

        settings = self.registry.settings
        walker = PathWalker(self.filesystem, settings.extension)
        count = 0

        for source in sources:
            count += 1
            self._merge_symbols(state, source.explicit_map().items())

            if source.is_authoritative():
                continue

            self._merge_discovery(state, walker.walk(state.name, source.prefix_roots()))
            if settings.legacy_prefixes:
                legacy_roots = _legacy_prefix_roots(source)
                if legacy_roots:
                    self._merge_discovery(state, walker.walk(state.name, legacy_roots, legacy=True))

        if settings.load_declared_symbols:
            self._merge_symbols(state, ((name, None) for name in self.declared_symbols()))

        # Child namespace objects track their own staleness; keep them.
        for short, entry in previous.items():
            if isinstance(entry, Resolved) and short in state.namespaces:
                state.namespaces[short] = entry

        state.merges += 1
        logger.debug(
            "Merged %s from %d sources: %d classes, %d namespaces",
            state.name or "<root>",
            count,
            len(state.classes),
            len(state.namespaces),
        )

    def declared_symbols(self) -> list[str]:
        return list(self._declared())

    def _merge_symbols(
        self, state: NamespaceState, symbols: Iterable[tuple[str, Path | None]]
    ) -> None:
        for qualified_name, location in symbols:
            class_name, namespace_name = classify_symbol(state.name, qualified_name)
            if class_name is not None:
                state.classes.setdefault(class_name, Unresolved(location))
            elif namespace_name is not None:
                state.namespaces.setdefault(namespace_name, Unresolved())

    def _merge_discovery(self, state: NamespaceState, discovery: Discovery) -> None:
        self._merge_symbols(state, discovery.symbols)
        for namespace in discovery.namespaces:
            child = classify_namespace(state.name, namespace)
            if child is not None:
                state.namespaces.setdefault(child, Unresolved())


def _legacy_prefix_roots(source: Source) -> Mapping[NamespaceName, Sequence[Path]]:
    legacy = getattr(source, "legacy_prefix_roots", None)
    return legacy() if legacy is not None else {}
