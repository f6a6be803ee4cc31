"""
glslmerge - merges GLSL fragments connected by `#include <name>` directives.

Основные модули:
- directives - поиск #include и #pragma once
- graph - граф включений
- order - топологическая сортировка
- merge - подстановка фрагментов
- registry - реестр фрагментов
"""

from glslmerge.errors import (
    AmbiguousEntryError,
    ConfigError,
    CyclicDependencyError,
    FragmentLoadError,
    IncludeError,
    MissingSourceError,
)
from glslmerge.directives import extract_references, has_includes, has_once_marker
from glslmerge.graph import FragmentGraph, build_graph
from glslmerge.order import topological_order
from glslmerge.merge import MergeContext, merge_sources
from glslmerge.registry import FragmentRegistry, merge_fragments

__version__ = '0.1.0'

__all__ = [
    'AmbiguousEntryError',
    'ConfigError',
    'CyclicDependencyError',
    'FragmentLoadError',
    'IncludeError',
    'MissingSourceError',
    'extract_references',
    'has_includes',
    'has_once_marker',
    'FragmentGraph',
    'build_graph',
    'topological_order',
    'MergeContext',
    'merge_sources',
    'FragmentRegistry',
    'merge_fragments',
]
