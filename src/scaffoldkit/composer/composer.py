"""Merging of module contributions into a single composition result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from scaffoldkit.composer.versions import pick_newer_version
from scaffoldkit.manifest import ModuleManifest, ProviderContribution, RouteContribution

logger = logging.getLogger(__name__)

__all__ = ["CompositionResult", "ModuleComposer", "compose"]


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class CompositionResult:
    """Merged contributions of all enabled active modules.

    Attributes:
        dependencies: Package name -> version constraint, newest constraint wins.
        dev_dependencies: Same shape as ``dependencies``.
        providers: Providers, first occurrence of each import path kept.
        routes: All routes in module order, duplicates included.
        env_vars: Required environment variables, first occurrence order.
    """

    dependencies: Mapping[str, str] = field(default_factory=_empty_mapping)
    dev_dependencies: Mapping[str, str] = field(default_factory=_empty_mapping)
    providers: tuple[ProviderContribution, ...] = ()
    routes: tuple[RouteContribution, ...] = ()
    env_vars: tuple[str, ...] = ()


class ModuleComposer:
    """Merges the contributions of an already resolved, ordered module list."""

    def compose(self, active_modules: Iterable[ModuleManifest], project_context: Any = None) -> CompositionResult:
        """Compose contributions in resolved order.

        Modules whose ``is_enabled`` predicate returns False for
        ``project_context`` contribute nothing.
        """
        dependencies: dict[str, str] = {}
        dev_dependencies: dict[str, str] = {}
        providers: dict[str, ProviderContribution] = {}
        routes: list[RouteContribution] = []
        env_vars: dict[str, None] = {}

        for manifest in active_modules:
            if not manifest.is_enabled_for(project_context):
                logger.debug("Module '%s' is disabled for this project, skipping contributions", manifest.id)
                continue

            contributions = manifest.contributions
            _merge_versions(dependencies, contributions.pubspec_dependencies)
            _merge_versions(dev_dependencies, contributions.pubspec_dev_dependencies)
            for provider in contributions.providers:
                providers.setdefault(provider.import_path, provider)
            routes.extend(contributions.routes)
            for name in contributions.env_vars:
                env_vars.setdefault(name, None)

        return CompositionResult(
            dependencies=MappingProxyType(dependencies),
            dev_dependencies=MappingProxyType(dev_dependencies),
            providers=tuple(providers.values()),
            routes=tuple(routes),
            env_vars=tuple(env_vars),
        )


def compose(active_modules: Iterable[ModuleManifest], project_context: Any = None) -> CompositionResult:
    """Shortcut for ``ModuleComposer().compose(...)``."""
    return ModuleComposer().compose(active_modules, project_context)


def _merge_versions(target: dict[str, str], incoming: Mapping[str, str]) -> None:
    for name, version in incoming.items():
        existing = target.get(name)
        target[name] = version if existing is None else pick_newer_version(existing, version)
