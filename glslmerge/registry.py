"""FragmentRegistry - named GLSL fragments merged through #include."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional

from glslmerge import log
from glslmerge.config import LoaderConfig
from glslmerge.errors import IncludeError
from glslmerge.graph import FragmentGraph, build_graph
from glslmerge.loader import fragment_name, load_directory, load_fragment
from glslmerge.merge import merge_sources
from glslmerge.order import topological_order


class FragmentRegistry:
    """
    Registry of shader fragments.

    Each fragment is registered under a unique name and can be included
    from another fragment with `#include <name>`. Exactly one fragment must
    be left unreferenced: it becomes the entry of the merged source.

    Example:
        registry = FragmentRegistry()
        registry.add("lighting.glsl", "#pragma once\\nvec3 light() { ... }")
        registry.add("main.frag", "#include <lighting.glsl>\\nvoid main() { ... }")
        source = registry.merge()

    Merging works on a snapshot of the registry and never modifies it.
    The registry does no locking: callers that share it between threads
    must not add or remove fragments during a merge.
    """

    def __init__(self, sources: Optional[Mapping[str, str]] = None):
        self._sources: Dict[str, str] = {}
        if sources:
            for name, content in sources.items():
                self.add(name, content)

    def add(self, name: str, content: str) -> None:
        """
        Register fragment. An existing fragment with the same name is replaced.

        Content is not validated until merge().
        """
        if name in self._sources:
            log.debug(f"[FragmentRegistry] Replacing fragment '{name}'")
        self._sources[name] = content

    def remove(self, name: str) -> None:
        """Remove fragment if registered."""
        self._sources.pop(name, None)

    def get(self, name: str) -> str:
        """Fragment content, or empty string if not registered."""
        return self._sources.get(name, "")

    def clear(self) -> None:
        self._sources.clear()

    def names(self) -> List[str]:
        return list(self._sources)

    def __contains__(self, name: object) -> bool:
        return name in self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sources))

    def add_file(self, path: str | Path, name: str | None = None, encoding: str = "utf-8") -> str:
        """
        Register fragment from file.

        Args:
            path: Path to shader file
            name: Include name (defaults to file name with extension)

        Returns:
            Name the fragment was registered under
        """
        content = load_fragment(path, encoding)
        name = name or fragment_name(path)
        self.add(name, content)
        return name

    def add_directory(self, directory: str | Path, config: Optional[LoaderConfig] = None) -> List[str]:
        """Register every fragment file found in directory. Returns registered names."""
        fragments = load_directory(directory, config)
        for name, content in fragments.items():
            self.add(name, content)
        log.info(f"[FragmentRegistry] Loaded {len(fragments)} fragments from {directory}")
        return list(fragments)

    def graph(self) -> FragmentGraph:
        """Build the include graph of the current fragments."""
        return build_graph(dict(self._sources))

    def entry(self) -> str:
        """Name of the fragment not included by any other fragment."""
        return topological_order(self.graph())[0]

    def merge(self) -> str:
        """
        Merge all fragments into a single source.

        Returns:
            Entry fragment with every #include resolved

        Raises:
            MissingSourceError: a fragment includes an unregistered name
            AmbiguousEntryError: not exactly one fragment is left unreferenced
            CyclicDependencyError: fragments include each other
        """
        snapshot = dict(self._sources)
        try:
            return merge_sources(snapshot)
        except IncludeError as e:
            log.debug(f"[FragmentRegistry] Merge failed: {e}")
            raise


def merge_fragments(sources: Mapping[str, str]) -> str:
    """Merge a name -> content mapping without keeping a registry around."""
    return FragmentRegistry(sources).merge()


__all__ = [
    "FragmentRegistry",
    "merge_fragments",
]
