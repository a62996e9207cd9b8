"""Ordered registry of symbol sources with staleness tracking."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from nsresolve.core.models import ResolverSettings
from nsresolve.sources.base import Source

logger = logging.getLogger(__name__)

SourceDiscovery = Callable[[], Iterable[Source]]


class SourceRegistry:
    """Process-wide list of sources plus the settings every merge reads.

    The snapshot is an integer that changes whenever the effective source
    list changes. Namespaces remember the snapshot they merged against and
    merge again once it moves.
    """

    def __init__(self, settings: ResolverSettings | None = None) -> None:
        self.settings = settings if settings is not None else ResolverSettings()
        self._registered: list[Source] = []
        self._discoveries: list[SourceDiscovery] = []
        self._sources: tuple[Source, ...] | None = None
        self._snapshot = 0

    def init(
        self, sources: Iterable[Source] = (), settings: ResolverSettings | None = None
    ) -> SourceRegistry:
        """Reset the registry and register ``sources`` in order."""
        self.reset()
        if settings is not None:
            self.settings = settings
        for source in sources:
            self.register(source)
        return self

    def reset(self) -> None:
        """Forget every source and discovery hook."""
        self._registered.clear()
        self._discoveries.clear()
        self.invalidate()

    def register(self, source: Source) -> None:
        """Append a source; it takes effect on the next query."""
        self._registered.append(source)
        self._sources = None

    def add_discovery(self, discover: SourceDiscovery) -> None:
        """Add a hook enumerating sources maintained elsewhere.

        Hooks run when the list is rebuilt: after a registration, on
        ``force_refresh`` or after ``invalidate()``.
        """
        self._discoveries.append(discover)
        self._sources = None

    def current_sources(self, force_refresh: bool = False) -> tuple[tuple[Source, ...], int]:
        """Return the effective source list and its snapshot token."""
        if self._sources is not None and not force_refresh:
            return self._sources, self._snapshot

        sources = tuple(self._derive())
        if sources != self._sources:
            self._sources = sources
            self._snapshot += 1
            logger.debug(
                "Source list changed: %d sources (snapshot %d)", len(sources), self._snapshot
            )
        return sources, self._snapshot

    @property
    def snapshot(self) -> int:
        return self._snapshot

    def invalidate(self) -> None:
        """Drop the cached list and move the snapshot, forcing a full re-scan."""
        self._sources = None
        self._snapshot += 1

    def load_declared_symbols(self, load: bool = True) -> None:
        """Merge symbols already declared by the runtime into every namespace."""
        self.settings.load_declared_symbols = load
        self.invalidate()

    def is_loading_declared_symbols(self) -> bool:
        return self.settings.load_declared_symbols

    def load_legacy_prefixes(self, load: bool = True) -> None:
        """Also resolve legacy prefix roots of non-authoritative sources."""
        self.settings.legacy_prefixes = load
        self.invalidate()

    def is_loading_legacy_prefixes(self) -> bool:
        return self.settings.legacy_prefixes

    def _derive(self) -> list[Source]:
        sources = list(self._registered)
        for discover in self._discoveries:
            for source in discover():
                if not any(source is known for known in sources):
                    sources.append(source)
        return sources

    def __repr__(self) -> str:
        return (
            f"SourceRegistry(registered={len(self._registered)}, "
            f"discoveries={len(self._discoveries)}, snapshot={self._snapshot})"
        )


_default_registry: SourceRegistry | None = None


def get_default_registry() -> SourceRegistry:
    """Registry used by namespaces created without one."""
    global _default_registry
    if _default_registry is None:
        _default_registry = SourceRegistry()
    return _default_registry


def set_default_registry(registry: SourceRegistry | None) -> None:
    """Replace the default registry; None restores a fresh one on next use."""
    global _default_registry
    _default_registry = registry
