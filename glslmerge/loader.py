"""Reading GLSL fragments from disk."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from glslmerge import log
from glslmerge.config import LoaderConfig
from glslmerge.errors import FragmentLoadError


def fragment_name(
    path: str | Path,
    root: str | Path | None = None,
    config: Optional[LoaderConfig] = None,
) -> str:
    """
    Include name for a fragment file.

    The name is the file name (or the path relative to root, with "/"
    separators), optionally without its extension.
    """
    path = Path(path)
    config = config or LoaderConfig()

    if root is not None:
        rel = path.relative_to(root)
    else:
        rel = Path(path.name)

    if config.strip_extension:
        rel = rel.with_suffix("")
    return rel.as_posix()


def load_fragment(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read fragment content.

    Raises:
        FragmentLoadError: file cannot be read or decoded
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FragmentLoadError(str(path), str(e)) from e

    log.debug(f"[Loader] Loaded {path} ({len(content)} chars)")
    return content


def load_directory(
    directory: str | Path,
    config: Optional[LoaderConfig] = None,
) -> Dict[str, str]:
    """
    Load all fragment files from a directory.

    Args:
        directory: Directory with shader files
        config: Extensions, recursion and naming rules

    Returns:
        Mapping include name -> content, sorted by name

    Raises:
        FragmentLoadError: directory missing, unreadable file, or two files
            mapping to the same include name
    """
    directory = Path(directory)
    config = config or LoaderConfig()

    if not directory.is_dir():
        raise FragmentLoadError(str(directory), "not a directory")

    pattern = "**/*" if config.recursive else "*"
    fragments: Dict[str, str] = {}
    origins: Dict[str, Path] = {}

    for path in sorted(directory.glob(pattern)):
        if not path.is_file() or not config.matches(path.name):
            continue

        name = fragment_name(path, directory if config.recursive else None, config)
        if name in fragments:
            raise FragmentLoadError(
                str(path),
                f"include name '{name}' already used by {origins[name]}",
            )

        fragments[name] = load_fragment(path, config.encoding)
        origins[name] = path

    if not fragments:
        log.warn(f"[Loader] No fragment files found in {directory}")

    return dict(sorted(fragments.items()))


__all__ = [
    "fragment_name",
    "load_fragment",
    "load_directory",
]
