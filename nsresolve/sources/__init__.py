"""
Sources: Where namespace contents come from.

Components:
    - Source: Protocol every registered source implements
    - StaticSource: In-memory class map and prefix roots
    - FileSystem / LocalFileSystem: Directory listing contract and default
    - PathWalker: Descends prefix roots and turns file names into segments
    - runtime_declared_symbols: Classes already defined by loaded modules

Adding a new source:
    1. Implement explicit_map(), is_authoritative() and prefix_roots()
    2. Optionally implement legacy_prefix_roots()
    3. Register it on a SourceRegistry
"""

from nsresolve.sources.base import FileSystem, Source
from nsresolve.sources.declared import runtime_declared_symbols
from nsresolve.sources.filesystem import LocalFileSystem
from nsresolve.sources.models import Discovery
from nsresolve.sources.static import StaticSource
from nsresolve.sources.walker import PathWalker, normalize_file_name

__all__ = [
    "Source",
    "FileSystem",
    "LocalFileSystem",
    "Discovery",
    "StaticSource",
    "PathWalker",
    "normalize_file_name",
    "runtime_declared_symbols",
]
