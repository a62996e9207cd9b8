"""Data models for nsresolve."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar, Union

from nsresolve.core.names import SEPARATOR

T = TypeVar("T")


@dataclass(frozen=True)
class Unresolved:
    """Entry discovered but not yet materialized."""

    location: Path | None = None


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """Entry materialized into a handle."""

    value: T


EntryState = Union[Unresolved, Resolved]


@dataclass(frozen=True)
class SymbolHandle:
    """Default handle produced for an owned class."""

    name: str
    qualified_name: str
    location: Path | None = None


@dataclass
class ResolverSettings:
    """Process-wide switches read by every merge."""

    load_declared_symbols: bool = False
    legacy_prefixes: bool = False
    extension: str = ".py"


def default_materializer(qualified_name: str, location: Path | None) -> SymbolHandle:
    """Build a SymbolHandle for a class discovered by name."""
    short = qualified_name.rsplit(SEPARATOR, 1)[-1]
    return SymbolHandle(name=short, qualified_name=qualified_name, location=location)
