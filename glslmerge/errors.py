"""Errors raised while merging GLSL fragments."""

from __future__ import annotations

from typing import Iterable, List


class IncludeError(Exception):
    """Base class for all include resolution errors."""
    pass


class MissingSourceError(IncludeError):
    """A fragment includes a name that is not registered."""

    def __init__(self, name: str, referrer: str = ""):
        self.name = name
        self.referrer = referrer
        if referrer:
            msg = f"Cannot include missing source {name} (included from {referrer})"
        else:
            msg = f"Cannot include missing source {name}"
        super().__init__(msg)


class AmbiguousEntryError(IncludeError):
    """Not exactly one fragment is left unreferenced."""

    def __init__(self, candidates: Iterable[str] = ()):
        self.candidates: List[str] = list(candidates)
        msg = "There must be exactly 1 fragment which is not included by any other fragment"
        if self.candidates:
            msg += f", found {len(self.candidates)}: {', '.join(self.candidates)}"
        else:
            msg += ", found none"
        super().__init__(msg)


class CyclicDependencyError(IncludeError):
    """Fragments include each other in a cycle."""

    def __init__(self, names: Iterable[str] = ()):
        self.names: List[str] = list(names)
        msg = "Cyclic dependency detected"
        if self.names:
            msg += f" between: {', '.join(self.names)}"
        super().__init__(msg)


class FragmentLoadError(IncludeError):
    """A fragment file or directory could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class ConfigError(Exception):
    """Malformed loader configuration."""
    pass


__all__ = [
    "IncludeError",
    "MissingSourceError",
    "AmbiguousEntryError",
    "CyclicDependencyError",
    "FragmentLoadError",
    "ConfigError",
]
