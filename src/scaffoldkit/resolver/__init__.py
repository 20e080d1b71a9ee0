"""Dependency resolution for module selections."""

from __future__ import annotations

from scaffoldkit.resolver.dependencies import find_cycle, topological_order
from scaffoldkit.resolver.resolver import ModuleResolver, ResolvedSet

__all__ = [
    "ModuleResolver",
    "ResolvedSet",
    "find_cycle",
    "topological_order",
]
