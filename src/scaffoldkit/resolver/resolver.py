"""Resolution of a module selection into an ordered activation plan."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, overload

from scaffoldkit.errors import (
    MissingDependencyError,
    ModuleConflictError,
    ModuleNotFoundError,
)
from scaffoldkit.manifest import ModuleManifest
from scaffoldkit.registry.registry import Registry
from scaffoldkit.resolver.dependencies import topological_order

logger = logging.getLogger(__name__)

__all__ = ["ModuleResolver", "ResolvedSet"]


class ResolvedSet:
    """Immutable, dependency-ordered sequence of manifests from one ``resolve()`` call."""

    __slots__ = ("_modules",)

    def __init__(self, modules: Iterable[ModuleManifest]) -> None:
        self._modules: tuple[ModuleManifest, ...] = tuple(modules)

    @property
    def modules(self) -> tuple[ModuleManifest, ...]:
        return self._modules

    @property
    def ids(self) -> list[str]:
        """Module ids in resolved order."""
        return [m.id for m in self._modules]

    def index(self, module_id: str) -> int:
        """Position of ``module_id`` in the resolved order.

        Raises:
            ValueError: If the id is not part of this set.
        """
        return self.ids.index(module_id)

    def __iter__(self) -> Iterator[ModuleManifest]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    @overload
    def __getitem__(self, index: int) -> ModuleManifest: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[ModuleManifest, ...]: ...

    def __getitem__(self, index: int | slice) -> ModuleManifest | tuple[ModuleManifest, ...]:
        return self._modules[index]

    def __contains__(self, module_id: object) -> bool:
        return any(m.id == module_id for m in self._modules)

    def __repr__(self) -> str:
        return f"ResolvedSet({self.ids!r})"


class ModuleResolver:
    """Validates a selection against the registry and orders it.

    Every failure raises before anything is returned; a partially resolved
    set is never observable.
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def resolve(self, selected_ids: Iterable[str]) -> ResolvedSet:
        """Resolve selected module ids, plus all always-included modules.

        Args:
            selected_ids: Module ids explicitly chosen by the caller. Duplicates collapse.

        Returns:
            ResolvedSet with dependencies before dependents, ties broken by id.

        Raises:
            ModuleNotFoundError: A selected id is not registered.
            MissingDependencyError: A required id is not registered.
            CircularDependencyError: The requires graph has a cycle.
            ModuleConflictError: Two active modules conflict.
        """
        seed = self._seed(selected_ids)
        for module_id in seed:
            if not self._registry.has(module_id):
                raise ModuleNotFoundError(module_id=module_id)

        graph = self._collect(seed)

        order = topological_order(graph)
        resolved = [self._registry.get(module_id) for module_id in order]
        self._check_conflicts(resolved)

        logger.debug("Resolved %s into %s", sorted(seed), order)
        return ResolvedSet(resolved)

    def _seed(self, selected_ids: Iterable[str]) -> list[str]:
        seed: dict[str, None] = dict.fromkeys(selected_ids)
        for manifest in self._registry.get_always_included():
            seed.setdefault(manifest.id, None)
        return list(seed)

    def _collect(self, seed: list[str]) -> dict[str, tuple[str, ...]]:
        """Transitive closure over ``requires``, as an id -> requires graph."""
        graph: dict[str, tuple[str, ...]] = {}
        pending = list(reversed(seed))
        while pending:
            module_id = pending.pop()
            if module_id in graph:
                continue
            manifest = self._registry.get(module_id)
            graph[module_id] = manifest.requires
            for dep_id in manifest.requires:
                if not self._registry.has(dep_id):
                    raise MissingDependencyError(module_id=module_id, dependency_id=dep_id)
            for dep_id in reversed(manifest.requires):
                if dep_id not in graph:
                    pending.append(dep_id)
        return graph

    @staticmethod
    def _check_conflicts(active: list[ModuleManifest]) -> None:
        active_ids = {m.id for m in active}
        for manifest in active:
            for conflict_id in manifest.conflicts_with:
                if conflict_id in active_ids and conflict_id != manifest.id:
                    raise ModuleConflictError(module_id=manifest.id, conflict_id=conflict_id)
