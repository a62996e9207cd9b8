"""Unit tests for the source registry."""

from nsresolve.core.models import ResolverSettings
from nsresolve.core.registry import SourceRegistry, get_default_registry, set_default_registry
from nsresolve.sources.static import StaticSource


class TestCurrentSources:
    """Tests for source list caching and snapshot tokens."""

    def test_register_order_kept(self) -> None:
        registry = SourceRegistry()
        first, second = StaticSource("first"), StaticSource("second")
        registry.register(first)
        registry.register(second)

        sources, _ = registry.current_sources()
        assert sources == (first, second)

    def test_cached_until_registration(self) -> None:
        """Test that discovery hooks are not re-run on every call."""
        registry = SourceRegistry()
        calls = []
        source = StaticSource("discovered")

        def discover():
            calls.append(1)
            return [source]

        registry.add_discovery(discover)

        _, snapshot1 = registry.current_sources()
        _, snapshot2 = registry.current_sources()
        assert len(calls) == 1
        assert snapshot1 == snapshot2

        registry.register(StaticSource("new"))
        sources, snapshot3 = registry.current_sources()
        assert len(calls) == 2
        assert snapshot3 != snapshot2
        assert [s.name for s in sources] == ["new", "discovered"]

    def test_force_refresh_keeps_snapshot_when_unchanged(self) -> None:
        registry = SourceRegistry()
        registry.register(StaticSource())
        _, before = registry.current_sources()

        _, after = registry.current_sources(force_refresh=True)
        assert after == before

    def test_force_refresh_sees_discovered_changes(self) -> None:
        registry = SourceRegistry()
        found: list[StaticSource] = []
        registry.add_discovery(lambda: list(found))
        _, before = registry.current_sources()

        found.append(StaticSource("late"))
        sources, cached = registry.current_sources()
        assert sources == ()
        assert cached == before

        sources, after = registry.current_sources(force_refresh=True)
        assert [s.name for s in sources] == ["late"]
        assert after != before

    def test_discovery_does_not_duplicate_registered(self) -> None:
        registry = SourceRegistry()
        source = StaticSource()
        registry.register(source)
        registry.add_discovery(lambda: [source])

        sources, _ = registry.current_sources()
        assert sources == (source,)


class TestLifecycle:
    """Tests for init, reset, invalidate and flags."""

    def test_invalidate_moves_snapshot(self) -> None:
        registry = SourceRegistry()
        _, before = registry.current_sources()
        registry.invalidate()
        assert registry.snapshot != before

    def test_init_replaces_sources_and_settings(self) -> None:
        registry = SourceRegistry()
        registry.register(StaticSource("old"))

        settings = ResolverSettings(extension=".php")
        registry.init([StaticSource("a"), StaticSource("b")], settings)

        sources, _ = registry.current_sources()
        assert [s.name for s in sources] == ["a", "b"]
        assert registry.settings.extension == ".php"

    def test_reset_clears_everything(self) -> None:
        registry = SourceRegistry()
        registry.register(StaticSource())
        registry.add_discovery(lambda: [StaticSource()])
        registry.reset()

        sources, _ = registry.current_sources()
        assert sources == ()

    def test_flags_invalidate(self) -> None:
        registry = SourceRegistry()
        assert not registry.is_loading_declared_symbols()
        assert not registry.is_loading_legacy_prefixes()

        before = registry.snapshot
        registry.load_declared_symbols()
        assert registry.is_loading_declared_symbols()
        assert registry.snapshot != before

        before = registry.snapshot
        registry.load_legacy_prefixes()
        assert registry.is_loading_legacy_prefixes()
        assert registry.snapshot != before

        registry.load_declared_symbols(False)
        assert not registry.is_loading_declared_symbols()


class TestDefaultRegistry:
    """Tests for the process default registry."""

    def test_default_is_shared(self) -> None:
        assert get_default_registry() is get_default_registry()

    def test_set_default(self) -> None:
        registry = SourceRegistry()
        set_default_registry(registry)
        assert get_default_registry() is registry

        set_default_registry(None)
        assert get_default_registry() is not registry
