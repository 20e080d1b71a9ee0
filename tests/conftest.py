"""Shared test fixtures for the scaffoldkit test suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from scaffoldkit.manifest import ModuleContribution, ModuleManifest
from scaffoldkit.registry import Registry


def make_manifest(
    module_id: str,
    requires: list[str] | None = None,
    conflicts_with: list[str] | None = None,
    always_included: bool = False,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
    providers: list[dict[str, str]] | None = None,
    routes: list[dict[str, str]] | None = None,
    env_vars: list[str] | None = None,
    is_enabled: Callable[[Any], bool] | None = None,
) -> ModuleManifest:
    """Build a manifest with only the fields a test cares about."""
    return ModuleManifest(
        id=module_id,
        name=module_id.title(),
        description=f"{module_id} module",
        requires=requires or [],
        conflicts_with=conflicts_with or [],
        always_included=always_included,
        template_dir=f"templates/modules/{module_id}",
        contributions=ModuleContribution(
            pubspec_dependencies=dependencies or {},
            pubspec_dev_dependencies=dev_dependencies or {},
            providers=providers or [],
            routes=routes or [],
            env_vars=env_vars or [],
        ),
        is_enabled=is_enabled,
    )


def build_registry(*manifests: ModuleManifest) -> Registry:
    registry = Registry()
    for manifest in manifests:
        registry.register(manifest)
    return registry


# === Fixtures ===


@pytest.fixture
def manifest_factory() -> Callable[..., ModuleManifest]:
    """Factory for minimal manifests (see ``make_manifest``)."""
    return make_manifest


@pytest.fixture
def registry_factory() -> Callable[..., Registry]:
    """Factory for a Registry pre-populated with the given manifests."""
    return build_registry


@pytest.fixture
def layered_registry() -> Registry:
    """core (always included) <- api <- auth."""
    return build_registry(
        make_manifest("core", always_included=True),
        make_manifest("api", requires=["core"]),
        make_manifest("auth", requires=["api"]),
    )
