"""Symbols already declared by the running interpreter."""

from __future__ import annotations

import inspect
import sys
from collections.abc import Callable

DeclaredSymbols = Callable[[], list[str]]


def runtime_declared_symbols() -> list[str]:
    """Qualified names of every class defined by a loaded module.

    A class counts once, under the module that defines it
    (``collections.OrderedDict``, not every module re-exporting it).
    """
    declared: list[str] = []
    seen: set[str] = set()

    for module_name, module in list(sys.modules.items()):
        if module is None:
            continue
        try:
            members = list(vars(module).values())
        except TypeError:
            continue
        for member in members:
            if not inspect.isclass(member) or getattr(member, "__module__", None) != module_name:
                continue
            qualified_name = f"{module_name}.{member.__qualname__}"
            if "<locals>" in qualified_name or qualified_name in seen:
                continue
            seen.add(qualified_name)
            declared.append(qualified_name)

    return declared
