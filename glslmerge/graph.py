"""Dependency graph of GLSL fragments.

Pure data, keyed by fragment name:
- forward[name]  - distinct names the fragment includes (first appearance order)
- backward[name] - fragments that include `name`
- once[name]     - fragment carries `#pragma once`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Set, Tuple

from glslmerge import log
from glslmerge.directives import extract_references, has_once_marker
from glslmerge.errors import MissingSourceError


@dataclass
class FragmentGraph:
    """Include graph built from a fragment registry snapshot."""
    names: List[str] = field(default_factory=list)  # Registry order
    forward: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    backward: Dict[str, Set[str]] = field(default_factory=dict)
    once: Dict[str, bool] = field(default_factory=dict)

    def in_degrees(self) -> Dict[str, int]:
        """Number of fragments including each fragment."""
        return {name: len(self.backward.get(name, ())) for name in self.names}

    def roots(self) -> List[str]:
        """Fragments not included by any other fragment."""
        return [name for name, degree in self.in_degrees().items() if degree == 0]

    def includes(self, name: str) -> Tuple[str, ...]:
        return self.forward.get(name, ())

    def __len__(self) -> int:
        return len(self.names)


def build_graph(sources: Mapping[str, str]) -> FragmentGraph:
    """
    Build the include graph for a set of fragments.

    Args:
        sources: Mapping fragment name -> raw content

    Returns:
        FragmentGraph with forward, backward edges and once flags

    Raises:
        MissingSourceError: a fragment includes an unregistered name
    """
    graph = FragmentGraph(names=list(sources))

    for name, content in sources.items():
        refs = extract_references(content)
        for ref in refs:
            if ref not in sources:
                raise MissingSourceError(ref, name)
        graph.forward[name] = refs
        graph.once[name] = has_once_marker(content)

    graph.backward = {name: set() for name in graph.names}
    for name, refs in graph.forward.items():
        for ref in refs:
            graph.backward[ref].add(name)

    edge_count = sum(len(refs) for refs in graph.forward.values())
    log.debug(f"[FragmentGraph] {len(graph)} fragments, {edge_count} include edges")
    return graph


__all__ = [
    "FragmentGraph",
    "build_graph",
]
