"""Logic for loading source configuration files."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from nsresolve.core.exceptions import ConfigError
from nsresolve.core.models import ResolverSettings
from nsresolve.core.registry import SourceRegistry
from nsresolve.sources.static import StaticSource

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "settings": {
        "load_declared_symbols": False,
        "legacy_prefixes": False,
        "extension": ".py",
    },
    "sources": [],
}


def deep_merge(base: dict[str, Any], update: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``update`` into a copy of ``base``; nested dicts merge, the rest replaces."""
    result = dict(base)
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Relative source paths are made absolute against the file's directory.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    p = Path(path)
    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    if not isinstance(user_config, dict):
        raise ConfigError(f"Config {p} must be a mapping, got {type(user_config).__name__}")

    config = deep_merge(config, user_config)
    config["base_dir"] = str(p.resolve().parent)
    return config


def build_settings(config: Mapping[str, Any]) -> ResolverSettings:
    """Create ResolverSettings from the ``settings`` section."""
    settings = config.get("settings") or {}
    if not isinstance(settings, Mapping):
        raise ConfigError("'settings' must be a mapping")

    extension = settings.get("extension", ".py")
    if not isinstance(extension, str) or not extension:
        raise ConfigError("'settings.extension' must be a non-empty string")
    if not extension.startswith("."):
        extension = "." + extension

    return ResolverSettings(
        load_declared_symbols=bool(settings.get("load_declared_symbols", False)),
        legacy_prefixes=bool(settings.get("legacy_prefixes", False)),
        extension=extension,
    )


def build_source(entry: Mapping[str, Any], base_dir: Path) -> StaticSource:
    """Create a StaticSource from one ``sources`` entry."""
    if not isinstance(entry, Mapping):
        raise ConfigError(f"Source entries must be mappings, got {entry!r}")

    source = StaticSource(
        name=str(entry.get("name", "")),
        authoritative=bool(entry.get("authoritative", False)),
    )

    class_map = entry.get("class_map") or {}
    if not isinstance(class_map, Mapping):
        raise ConfigError(f"'class_map' of source '{source.name}' must be a mapping")
    source.add_class_map(
        {name: _resolve(base_dir, location) for name, location in class_map.items()}
    )

    tables = (("prefixes", source.add_prefix), ("legacy_prefixes", source.add_legacy_prefix))
    for key, add in tables:
        table = entry.get(key) or {}
        if not isinstance(table, Mapping):
            raise ConfigError(f"'{key}' of source '{source.name}' must be a mapping")
        for prefix, paths in table.items():
            if isinstance(paths, str):
                paths = [paths]
            if not isinstance(paths, list):
                raise ConfigError(f"Paths for prefix '{prefix}' must be a string or a list")
            add(str(prefix), [_resolve(base_dir, p) for p in paths])

    return source


def build_registry(
    config: Mapping[str, Any], registry: SourceRegistry | None = None
) -> SourceRegistry:
    """Populate a registry (a new one by default) from a loaded config."""
    entries = config.get("sources") or []
    if not isinstance(entries, list):
        raise ConfigError("'sources' must be a list")

    base_dir = Path(config.get("base_dir", "."))
    sources = [build_source(entry, base_dir) for entry in entries]

    registry = registry if registry is not None else SourceRegistry()
    registry.init(sources, build_settings(config))
    logger.debug("Registry built with %d sources", len(sources))
    return registry


def load_registry(path: str | Path | None = None) -> SourceRegistry:
    """Shortcut for ``build_registry(load_config(path))``."""
    return build_registry(load_config(path))


def _resolve(base_dir: Path, location: str | None) -> Path | None:
    if location is None:
        return None
    path = Path(str(location))
    return path if path.is_absolute() else base_dir / path
