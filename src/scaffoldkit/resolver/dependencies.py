"""Graph algorithms over the module ``requires`` relation."""

from __future__ import annotations

import heapq
import logging
from collections import defaultdict
from typing import Mapping, Sequence

from scaffoldkit.errors import CircularDependencyError

logger = logging.getLogger(__name__)

__all__ = ["find_cycle", "topological_order"]

_UNVISITED, _IN_PROGRESS, _DONE = 0, 1, 2


def find_cycle(graph: Mapping[str, Sequence[str]]) -> list[str] | None:
    """Find a cycle with a three-colour depth-first search.

    Args:
        graph: Maps each module id to the ids it requires. Edges to ids that
            are not keys of ``graph`` are ignored.

    Returns:
        The cycle as a path whose first id is repeated at the end
        (``["a", "b", "a"]``), or None if the graph is acyclic.
    """
    color: dict[str, int] = {node: _UNVISITED for node in graph}
    stack: list[str] = []

    def visit(node: str) -> list[str] | None:
        color[node] = _IN_PROGRESS
        stack.append(node)
        for dep in graph[node]:
            if dep not in color:
                continue
            if color[dep] == _IN_PROGRESS:
                return stack[stack.index(dep):] + [dep]
            if color[dep] == _UNVISITED:
                cycle = visit(dep)
                if cycle is not None:
                    return cycle
        stack.pop()
        color[node] = _DONE
        return None

    for node in sorted(graph):
        if color[node] == _UNVISITED:
            cycle = visit(node)
            if cycle is not None:
                return cycle
    return None


def topological_order(graph: Mapping[str, Sequence[str]]) -> list[str]:
    """Order module ids so that every dependency precedes its dependents.

    Uses Kahn's algorithm with a min-heap frontier: whenever several ids are
    ready, the alphabetically smallest is emitted first.

    Raises:
        CircularDependencyError: If the graph contains a cycle.
    """
    dependents: dict[str, set[str]] = defaultdict(set)
    in_degree: dict[str, int] = {node: 0 for node in graph}

    for node, deps in graph.items():
        for dep in set(deps):
            if dep not in in_degree:
                continue
            dependents[dep].add(node)
            in_degree[node] += 1

    ready = [node for node, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)

    order: list[str] = []
    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for dependent in dependents.get(node, ()):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                heapq.heappush(ready, dependent)

    if len(order) < len(in_degree):
        raise CircularDependencyError(cycle_path=find_cycle(graph))

    logger.debug("Topological order: %s", order)
    return order
