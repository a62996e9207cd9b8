"""
Core module: names, models, exceptions, registry and resolution.

Names (names.py):
    - NamespaceName: Canonical segment tuple for a dotted name
    - normalize / short_name / parent_name: Pure name helpers
    - classify_symbol / classify_namespace: Owned class vs child namespace

Models (models.py):
    - Unresolved / Resolved: Lazy map entry states
    - SymbolHandle: Default handle for an owned class
    - ResolverSettings: Declared-symbol and legacy-prefix switches

Exceptions (exceptions.py):
    - NsResolveError: Base exception for all nsresolve errors
    - NameRequiredError: Namespace constructed without a name
    - UnknownSymbolError / UnknownNamespaceError: Short name not owned
    - ConfigError: Malformed configuration file

Resolution:
    - SourceRegistry: Ordered sources and their snapshot token
    - MergeEngine: First-writer-wins merging of all sources
    - ResolvedNamespace: Public facade
"""

from nsresolve.core.exceptions import (
    ConfigError,
    NameRequiredError,
    NsResolveError,
    UnknownNamespaceError,
    UnknownSymbolError,
)
from nsresolve.core.models import ResolverSettings, SymbolHandle
from nsresolve.core.names import NamespaceName, normalize, parent_name, short_name
from nsresolve.core.namespace import ResolvedNamespace
from nsresolve.core.registry import SourceRegistry, get_default_registry, set_default_registry
from nsresolve.core.resolver import MergeEngine, NamespaceState

__all__ = [
    # Names
    "NamespaceName",
    "normalize",
    "short_name",
    "parent_name",
    # Models
    "ResolverSettings",
    "SymbolHandle",
    # Exceptions
    "NsResolveError",
    "NameRequiredError",
    "UnknownSymbolError",
    "UnknownNamespaceError",
    "ConfigError",
    # Resolution
    "SourceRegistry",
    "get_default_registry",
    "set_default_registry",
    "MergeEngine",
    "NamespaceState",
    "ResolvedNamespace",
]
