"""Topological ordering of the include graph."""

from __future__ import annotations

from typing import List

from glslmerge import log
from glslmerge.errors import AmbiguousEntryError, CyclicDependencyError
from glslmerge.graph import FragmentGraph


def topological_order(graph: FragmentGraph) -> List[str]:
    """
    Order fragments so that every fragment precedes the ones it includes.

    The first element is the entry fragment (included by nobody), leaves
    come last. Callers that substitute content walk the result in reverse.

    Raises:
        AmbiguousEntryError: zero or several fragments are not included anywhere
        CyclicDependencyError: some fragments could not be ordered
    """
    in_degree = graph.in_degrees()

    # Kahn's algorithm
    queue = [name for name in graph.names if in_degree[name] == 0]
    if len(queue) != 1:
        raise AmbiguousEntryError(queue)

    ordered: List[str] = []
    while queue:
        name = queue.pop(0)
        ordered.append(name)
        for dep in graph.forward[name]:
            in_degree[dep] -= 1
            if in_degree[dep] == 0:
                queue.append(dep)

    stuck = [name for name in graph.names if in_degree[name] != 0]
    if stuck:
        raise CyclicDependencyError(stuck)

    log.debug(f"[FragmentGraph] entry: {ordered[0]}, order: {', '.join(ordered)}")
    return ordered


__all__ = [
    "topological_order",
]
