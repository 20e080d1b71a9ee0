"""Tests for ModuleComposer.compose()."""

from __future__ import annotations

import dataclasses
from types import SimpleNamespace

import pytest

from scaffoldkit.composer import CompositionResult, ModuleComposer, compose
from scaffoldkit.context import ProjectContext
from scaffoldkit.manifest import ProviderContribution, RouteContribution


class TestDependencyMaps:
    def test_newer_version_wins_either_order(self, manifest_factory) -> None:
        """json_annotation ^4.8.0 vs ^4.9.0 yields ^4.9.0 in both orders."""
        old = manifest_factory("old", dependencies={"json_annotation": "^4.8.0"})
        new = manifest_factory("new", dependencies={"json_annotation": "^4.9.0"})
        assert compose([old, new]).dependencies["json_annotation"] == "^4.9.0"
        assert compose([new, old]).dependencies["json_annotation"] == "^4.9.0"

    def test_dev_dependencies_arbitrated(self, manifest_factory) -> None:
        a = manifest_factory("a", dev_dependencies={"json_serializable": "^6.9.0"})
        b = manifest_factory("b", dev_dependencies={"json_serializable": "^6.8.0"})
        result = compose([a, b])
        assert dict(result.dev_dependencies) == {"json_serializable": "^6.9.0"}
        assert dict(result.dependencies) == {}

    def test_never_older_than_newest_declared(self, manifest_factory) -> None:
        modules = [
            manifest_factory("a", dependencies={"dio": "^5.4.0"}),
            manifest_factory("b", dependencies={"dio": "^5.7.0"}),
            manifest_factory("c", dependencies={"dio": "^5.5.1"}),
        ]
        assert compose(modules).dependencies["dio"] == "^5.7.0"
        assert compose(list(reversed(modules))).dependencies["dio"] == "^5.7.0"

    def test_disjoint_modules_keep_everything(self, manifest_factory) -> None:
        a = manifest_factory("a", dependencies={"dio": "^5.7.0"}, env_vars=["API_BASE_URL"])
        b = manifest_factory("b", dependencies={"intl": "^0.19.0"}, env_vars=["SENTRY_DSN"])
        result = compose([a, b])
        assert dict(result.dependencies) == {"dio": "^5.7.0", "intl": "^0.19.0"}
        assert result.env_vars == ("API_BASE_URL", "SENTRY_DSN")

    def test_first_seen_order_kept(self, manifest_factory) -> None:
        a = manifest_factory("a", dependencies={"b_pkg": "1.0.0", "a_pkg": "1.0.0"})
        b = manifest_factory("b", dependencies={"b_pkg": "2.0.0"})
        assert list(compose([a, b]).dependencies) == ["b_pkg", "a_pkg"]


class TestProvidersRoutesEnv:
    def test_providers_deduplicated_by_import_path(self, manifest_factory) -> None:
        """The first provider for a path wins."""
        path = "../../core/theme/theme_provider.dart"
        a = manifest_factory("a", providers=[{"name": "first", "import_path": path}])
        b = manifest_factory(
            "b",
            providers=[
                {"name": "second", "import_path": path},
                {"name": "other", "import_path": "../../other.dart"},
            ],
        )
        result = compose([a, b])
        assert [p.name for p in result.providers] == ["first", "other"]
        assert all(isinstance(p, ProviderContribution) for p in result.providers)

    def test_routes_not_deduplicated(self, manifest_factory) -> None:
        route = {"path": "/login", "name": "login", "import_path": "login_page.dart"}
        a = manifest_factory("a", routes=[route])
        b = manifest_factory("b", routes=[route, {"path": "/home", "name": "home", "import_path": "home.dart"}])
        result = compose([a, b])
        assert [r.path for r in result.routes] == ["/login", "/login", "/home"]
        assert isinstance(result.routes[0], RouteContribution)

    def test_env_vars_first_occurrence_order(self, manifest_factory) -> None:
        a = manifest_factory("a", env_vars=["B", "A"])
        b = manifest_factory("b", env_vars=["C", "A", "B"])
        assert compose([a, b]).env_vars == ("B", "A", "C")


class TestIsEnabled:
    def test_disabled_module_contributes_nothing(self, manifest_factory) -> None:
        enabled = manifest_factory("enabled", dependencies={"dio": "^5.7.0"})
        disabled = manifest_factory(
            "disabled",
            dependencies={"firebase_auth": "^5.3.4"},
            providers=[{"name": "auth", "import_path": "auth.dart"}],
            routes=[{"path": "/login", "name": "login", "import_path": "login.dart"}],
            env_vars=["AUTH_KEY"],
            is_enabled=lambda ctx: False,
        )
        result = compose([enabled, disabled], ProjectContext())
        assert dict(result.dependencies) == {"dio": "^5.7.0"}
        assert result.providers == ()
        assert result.routes == ()
        assert result.env_vars == ()

    def test_context_passed_through(self, manifest_factory) -> None:
        """The predicate receives the caller's context object untouched."""
        seen = []
        context = SimpleNamespace(flavor="prod")

        def predicate(ctx: object) -> bool:
            seen.append(ctx)
            return ctx.flavor == "prod"

        module = manifest_factory("m", env_vars=["X"], is_enabled=predicate)
        assert compose([module], context).env_vars == ("X",)
        assert seen == [context]

    def test_no_predicate_means_enabled(self, manifest_factory) -> None:
        assert compose([manifest_factory("m", env_vars=["X"])], None).env_vars == ("X",)

    def test_disabled_module_does_not_lower_version(self, manifest_factory) -> None:
        a = manifest_factory("a", dependencies={"dio": "^5.4.0"})
        b = manifest_factory("b", dependencies={"dio": "^6.0.0"}, is_enabled=lambda ctx: False)
        assert compose([a, b]).dependencies["dio"] == "^5.4.0"


class TestCompositionResult:
    def test_empty(self) -> None:
        result = ModuleComposer().compose([], None)
        assert dict(result.dependencies) == {}
        assert result.providers == ()

    def test_frozen(self, manifest_factory) -> None:
        result = compose([manifest_factory("a", dependencies={"dio": "^5.7.0"})])
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.env_vars = ("X",)  # type: ignore[misc]
        with pytest.raises(TypeError):
            result.dependencies["dio"] = "^1.0.0"  # type: ignore[index]

    def test_accepts_resolved_set(self, layered_registry) -> None:
        from scaffoldkit.resolver import ModuleResolver

        resolved = ModuleResolver(layered_registry).resolve(["auth"])
        assert isinstance(compose(resolved), CompositionResult)
