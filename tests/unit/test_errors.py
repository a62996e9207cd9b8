"""Tests for error handling paths."""

from pathlib import Path

import pytest

from nsresolve.core.config import build_registry, load_config
from nsresolve.core.exceptions import (
    ConfigError,
    NameRequiredError,
    NsResolveError,
    UnknownNamespaceError,
    UnknownSymbolError,
)
from nsresolve.core.namespace import ResolvedNamespace
from nsresolve.core.registry import SourceRegistry
from nsresolve.sources.static import StaticSource


class TestFilesystemErrors:
    """Tests that unreadable paths never escalate."""

    def test_missing_prefix_root(self, temp_dir: Path) -> None:
        registry = SourceRegistry()
        registry.register(StaticSource().add_prefix("App", temp_dir / "missing"))

        ns = ResolvedNamespace("App.Models", registry)
        assert ns.class_names() == {}
        assert ns.namespace_names() == {}

    def test_missing_root_does_not_hide_other_roots(self, temp_dir: Path) -> None:
        (temp_dir / "Config.py").write_text("")
        registry = SourceRegistry()
        registry.register(StaticSource().add_prefix("App", [temp_dir / "missing", temp_dir]))

        assert list(ResolvedNamespace("App", registry).class_names()) == ["Config"]


class TestProviderErrors:
    """Tests that provider errors propagate unchanged."""

    def test_declared_provider_error(self) -> None:
        def broken() -> list[str]:
            raise RuntimeError("provider down")

        registry = SourceRegistry()
        registry.load_declared_symbols()
        ns = ResolvedNamespace("App", registry, declared=broken)

        with pytest.raises(RuntimeError, match="provider down"):
            ns.class_names()


class TestConfigErrors:
    """Tests for configuration validation."""

    def test_missing_file(self, temp_dir: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(temp_dir / "nope.yaml")
        assert "nope.yaml" in str(exc_info.value)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "bad.yaml"
        path.write_text("sources: [unclosed")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_top_level_not_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)

    def test_sources_not_list(self) -> None:
        with pytest.raises(ConfigError, match="'sources' must be a list"):
            build_registry({"sources": {"name": "x"}})

    def test_bad_prefix_paths(self) -> None:
        config = {"sources": [{"name": "x", "prefixes": {"App": 3}}]}
        with pytest.raises(ConfigError, match="Paths for prefix 'App'"):
            build_registry(config)

    def test_bad_extension(self) -> None:
        with pytest.raises(ConfigError, match="extension"):
            build_registry({"settings": {"extension": ""}, "sources": []})


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [NameRequiredError, UnknownSymbolError, UnknownNamespaceError, ConfigError],
    )
    def test_is_nsresolve_error(self, error_type: type) -> None:
        error = error_type("test")
        assert isinstance(error, NsResolveError)
        assert isinstance(error, Exception)

    def test_name_required_message(self) -> None:
        with pytest.raises(NameRequiredError, match="name is required"):
            ResolvedNamespace(42)  # type: ignore[arg-type]
