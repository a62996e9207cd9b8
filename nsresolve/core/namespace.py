"""Reflect a namespace by its full name.

A ResolvedNamespace lists every class and child namespace a name owns,
whichever registered source declares them:

    registry = SourceRegistry()
    registry.register(StaticSource().add_prefix("App", "src"))

    app = ResolvedNamespace("App", registry)
    app.class_names()      # {"Config": "App.Config"}
    app.namespace_names()  # {"Models": "App.Models"}
    app.get_namespace("Models").get_class("User")

Nothing is read at construction time. Maps are merged on the first query
and again whenever the registry's source list changes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from nsresolve.core.exceptions import NameRequiredError, UnknownNamespaceError, UnknownSymbolError
from nsresolve.core.models import Resolved, Unresolved, default_materializer
from nsresolve.core.names import NamespaceName, normalize, qualify
from nsresolve.core.registry import SourceRegistry, get_default_registry
from nsresolve.core.resolver import MergeEngine, NamespaceState
from nsresolve.sources.base import FileSystem, Source
from nsresolve.sources.declared import DeclaredSymbols

Materializer = Callable[[str, Path | None], Any]


class ResolvedNamespace:
    """Classes and child namespaces owned by one namespace name."""

    def __init__(
        self,
        name: str | NamespaceName,
        registry: SourceRegistry | None = None,
        *,
        sources: Iterable[Source] | None = None,
        filesystem: FileSystem | None = None,
        declared: DeclaredSymbols | None = None,
        materializer: Materializer | None = None,
    ) -> None:
        if not isinstance(name, (str, NamespaceName)):
            raise NameRequiredError(f"A namespace name is required, got {name!r}")

        self._name = normalize(name)
        self._registry = registry if registry is not None else get_default_registry()
        self._engine = MergeEngine(self._registry, filesystem, declared)
        self._materialize = materializer if materializer is not None else default_materializer
        self._custom_sources = list(sources) if sources is not None else None
        self._state = NamespaceState(self._name)
        self._parent: ResolvedNamespace | None = None

    @property
    def name(self) -> str:
        return str(self._name)

    @property
    def short_name(self) -> str:
        return self._name.short_name

    @property
    def parent_name(self) -> str:
        return str(self._name.parent)

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    @property
    def has_custom_sources(self) -> bool:
        return self._custom_sources is not None

    @property
    def merge_count(self) -> int:
        """Number of merges this instance has run."""
        return self._state.merges

    def parent(self) -> ResolvedNamespace | None:
        """Parent namespace, or None for the root namespace."""
        if self._name.is_root:
            return None
        if self._parent is None:
            self._parent = self._spawn(self._name.parent)
        return self._parent

    def sources(self) -> list[Source]:
        """Sources this instance merges from."""
        if self._custom_sources is not None:
            return list(self._custom_sources)
        return list(self._registry.current_sources()[0])

    def set_sources(self, sources: Iterable[Source] | None) -> ResolvedNamespace:
        """Use a fixed source list instead of the registry's.

        A fixed list ignores later registrations until ``reload()``.
        Passing None goes back to the registry.
        """
        self._custom_sources = list(sources) if sources is not None else None
        self._forget_children()
        return self

    def reload(self) -> None:
        """Forget merged maps here and force a registry re-scan."""
        self._forget_children()
        self._registry.invalidate()

    def prepare(self) -> bool:
        """Merge now if stale. Queries call this themselves."""
        return self._engine.prepare(self._state, self._custom_sources)

    def class_names(self) -> dict[str, str]:
        """Short name -> qualified name of every owned class."""
        self.prepare()
        return {short: qualify(self._name, short) for short in self._state.classes}

    def classes(self) -> dict[str, Any]:
        """Short name -> handle of every owned class."""
        self.prepare()
        return {short: self._resolve_class(short) for short in list(self._state.classes)}

    def has_class(self, name: str) -> bool:
        self.prepare()
        return name in self._state.classes

    def get_class(self, name: str) -> Any:
        """Handle of an owned class.

        Raises:
            UnknownSymbolError: ``name`` is not owned by this namespace.
        """
        self.prepare()
        if name not in self._state.classes:
            raise UnknownSymbolError(f"Class '{name}' not found in namespace '{self}'")
        return self._resolve_class(name)

    def declared_class_names(self) -> list[str]:
        """Qualified names of owned classes the runtime has already declared."""
        owned = self.class_names().values()
        declared = set(self._engine.declared_symbols())
        return [qualified for qualified in owned if qualified in declared]

    def namespace_names(self) -> dict[str, str]:
        """Short name -> qualified name of every child namespace."""
        self.prepare()
        return {short: qualify(self._name, short) for short in self._state.namespaces}

    def namespaces(self) -> dict[str, ResolvedNamespace]:
        self.prepare()
        return {short: self._resolve_namespace(short) for short in list(self._state.namespaces)}

    def has_namespace(self, name: str) -> bool:
        self.prepare()
        return name in self._state.namespaces

    def get_namespace(self, name: str) -> ResolvedNamespace:
        """Child namespace by short name.

        Raises:
            UnknownNamespaceError: ``name`` is not a child of this namespace.
        """
        self.prepare()
        if name not in self._state.namespaces:
            raise UnknownNamespaceError(f"Namespace '{name}' not found in namespace '{self}'")
        return self._resolve_namespace(name)

    def _resolve_class(self, short: str) -> Any:
        entry = self._state.classes[short]
        if isinstance(entry, Resolved):
            return entry.value
        handle = self._materialize(qualify(self._name, short), entry.location)
        self._state.classes[short] = Resolved(handle)
        return handle

    def _resolve_namespace(self, short: str) -> ResolvedNamespace:
        entry = self._state.namespaces[short]
        if isinstance(entry, Resolved):
            return entry.value
        child = self._spawn(self._name.child(short))
        self._state.namespaces[short] = Resolved(child)
        return child

    def _forget_children(self) -> None:
        # Children are rebuilt so they pick up the current source list.
        self._state.prepared = False
        self._state.namespaces = {short: Unresolved() for short in self._state.namespaces}

    def _spawn(self, name: NamespaceName) -> ResolvedNamespace:
        return ResolvedNamespace(
            name,
            self._registry,
            sources=self._custom_sources,
            filesystem=self._engine.filesystem,
            declared=self._engine.declared_symbols,
            materializer=self._materialize,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResolvedNamespace):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return str(self._name)

    def __repr__(self) -> str:
        return f"ResolvedNamespace({str(self._name)!r})"
