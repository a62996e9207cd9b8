"""
nsresolve: namespace reflection from declared sources.

nsresolve answers "what does this namespace contain?" without importing
or parsing anything. It merges what sources declare:
- explicit class maps (qualified name -> file)
- prefix -> directory roots, scanned by file and directory naming
- optionally, the classes the running interpreter already declared

Usage:
    from nsresolve import ResolvedNamespace, SourceRegistry, StaticSource

    registry = SourceRegistry()
    registry.register(StaticSource().add_prefix("App", "src"))

    app = ResolvedNamespace("App", registry)
    print(app.class_names(), app.namespace_names())
"""

from nsresolve.core import (
    ConfigError,
    NameRequiredError,
    NamespaceName,
    NsResolveError,
    ResolvedNamespace,
    ResolverSettings,
    SourceRegistry,
    SymbolHandle,
    UnknownNamespaceError,
    UnknownSymbolError,
    get_default_registry,
    set_default_registry,
)
from nsresolve.sources import LocalFileSystem, PathWalker, StaticSource

__version__ = "0.1.0"

__all__ = [
    "ResolvedNamespace",
    "NamespaceName",
    "SourceRegistry",
    "ResolverSettings",
    "SymbolHandle",
    "StaticSource",
    "PathWalker",
    "LocalFileSystem",
    "get_default_registry",
    "set_default_registry",
    "NsResolveError",
    "NameRequiredError",
    "UnknownSymbolError",
    "UnknownNamespaceError",
    "ConfigError",
]
