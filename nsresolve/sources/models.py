"""Data models for source discovery results."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Discovery:
    """Qualified names found for one target namespace (before merging)."""

    symbols: list[tuple[str, Path | None]] = field(default_factory=list)
    namespaces: list[str] = field(default_factory=list)

    def extend(self, other: Discovery) -> None:
        self.symbols.extend(other.symbols)
        self.namespaces.extend(other.namespaces)
