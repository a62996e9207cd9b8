"""Namespace names: normalization and segment arithmetic.

Names are compared segment by segment instead of through pattern matching,
so a segment is never confused with a prefix of another one
(``App.Model`` is not an ancestor of ``App.Models.User``).
"""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "."

_STRIP_CHARS = " \t\n\r\0\x0b" + SEPARATOR


@dataclass(frozen=True)
class NamespaceName:
    """Canonical, immutable namespace name."""

    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str | NamespaceName) -> NamespaceName:
        if isinstance(raw, NamespaceName):
            return raw
        return cls(split(raw))

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def short_name(self) -> str:
        return self.segments[-1] if self.segments else ""

    @property
    def parent(self) -> NamespaceName:
        return NamespaceName(self.segments[:-1])

    def child(self, segment: str) -> NamespaceName:
        return NamespaceName((*self.segments, segment))

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)


def split(raw: str) -> tuple[str, ...]:
    """Split a raw name into its non-empty segments."""
    stripped = raw.strip(_STRIP_CHARS)
    return tuple(part.strip() for part in stripped.split(SEPARATOR) if part.strip())


def normalize(raw: str | NamespaceName) -> NamespaceName:
    """Return the canonical form of a raw name."""
    return NamespaceName.parse(raw)


def short_name(raw: str | NamespaceName) -> str:
    """Last segment of a name, or "" for the root name."""
    return normalize(raw).short_name


def parent_name(raw: str | NamespaceName) -> NamespaceName:
    """All but the last segment; the root name for single-segment input."""
    return normalize(raw).parent


def qualify(namespace: NamespaceName, segment: str) -> str:
    """Qualified name of ``segment`` inside ``namespace``."""
    return str(namespace.child(segment))


def relative_segments(target: NamespaceName, name: NamespaceName) -> tuple[str, ...] | None:
    """Segments of ``name`` below ``target``, or None if it is not underneath.

    Returns ``()`` when both names are equal.
    """
    depth = len(target)
    if len(name) < depth or name.segments[:depth] != target.segments:
        return None
    return name.segments[depth:]


def is_ancestor_or_self(prefix: NamespaceName, target: NamespaceName) -> bool:
    return relative_segments(prefix, target) is not None


def classify_symbol(target: NamespaceName, qualified_name: str) -> tuple[str | None, str | None]:
    """Classify a discovered symbol against ``target``.

    Returns ``(class_short_name, namespace_short_name)``, at most one of them
    set. A symbol exactly one segment below ``target`` is an owned class; a
    deeper one reveals the child namespace named by its first extra segment.
    """
    rest = relative_segments(target, normalize(qualified_name))
    if not rest:
        return None, None
    if len(rest) == 1:
        return rest[0], None
    return None, rest[0]


def classify_namespace(target: NamespaceName, namespace: str | NamespaceName) -> str | None:
    """Child of ``target`` on the way to ``namespace``, if any."""
    rest = relative_segments(target, normalize(namespace))
    if not rest:
        return None
    return rest[0]
