"""Merge engine - substitutes included fragments into the entry fragment.

Fragments are processed leaves first. Each fragment receives fully merged
copies of the fragments it includes, so a plain fragment is repeated in
every place it is included. A `#pragma once` fragment is inserted only at
the first include site met during the whole merge; later sites are removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from glslmerge import log
from glslmerge.directives import (
    remove_includes,
    replace_first_include,
    strip_once_markers,
)
from glslmerge.graph import FragmentGraph, build_graph
from glslmerge.order import topological_order


@dataclass
class MergeContext:
    """State of a single merge call."""
    sources: Mapping[str, str]
    graph: FragmentGraph
    visited: Dict[str, bool] = field(default_factory=dict)
    resolved: Dict[str, str] = field(default_factory=dict)

    def resolve(self, name: str) -> str:
        """Substitute includes of one fragment; its dependencies must be resolved already."""
        content = self.sources[name]
        refs = self.graph.includes(name)

        for ref in refs:
            if self.graph.once.get(ref, False) and self.visited.get(ref, False):
                continue
            content = replace_first_include(content, ref, self.resolved[ref])
            self.visited[ref] = True

        # Repeated include lines of the same fragment get nothing
        for ref in refs:
            content = remove_includes(content, ref)

        self.resolved[name] = content
        return content

    def run(self, order: List[str]) -> str:
        """Resolve fragments from the last in `order` (leaves) to the first (entry)."""
        content = ""
        for name in reversed(order):
            content = self.resolve(name)
        return strip_once_markers(content)


def merge_sources(
    sources: Mapping[str, str],
    graph: Optional[FragmentGraph] = None,
    order: Optional[List[str]] = None,
) -> str:
    """
    Merge fragments into a single source.

    Args:
        sources: Mapping fragment name -> raw content
        graph: Prebuilt include graph (built from sources when omitted)
        order: Prebuilt topological order, entry first

    Returns:
        Entry fragment with all includes resolved

    Raises:
        MissingSourceError, AmbiguousEntryError, CyclicDependencyError
    """
    if graph is None:
        graph = build_graph(sources)
    if order is None:
        order = topological_order(graph)

    context = MergeContext(sources=sources, graph=graph)
    result = context.run(order)
    log.debug(f"[MergeContext] merged {len(order)} fragments into {order[0]} ({len(result)} chars)")
    return result


__all__ = [
    "MergeContext",
    "merge_sources",
]
