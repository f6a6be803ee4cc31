"""Directive scanner - finds #include and #pragma once lines in GLSL text.

Only two directive forms are recognised, each on its own line:

    #include <fragment_name>
    #pragma once

Leading and trailing spaces or tabs are ignored. Any other text before the
directive on the same line (a `//` comment, code) disables it, so commented
out includes pass through unchanged.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Tuple

NAME_PATTERN = r"[A-Za-z0-9_.]+"

# Line end without consuming it: keeps "\r\n" endings intact on substitution
_EOL = r"[ \t]*(?=\r?$)"
# Line end consuming its own terminator
_EOL_CONSUME = r"[ \t]*(?:\r?\n|\r?\Z)"

_INCLUDE_RE = re.compile(
    r"^[ \t]*#include[ \t]+<(" + NAME_PATTERN + r")>" + _EOL,
    re.MULTILINE,
)
_PRAGMA_ONCE_RE = re.compile(r"^[ \t]*#pragma[ \t]+once" + _EOL, re.MULTILINE)
_PRAGMA_ONCE_LINE_RE = re.compile(
    r"^[ \t]*#pragma[ \t]+once" + _EOL_CONSUME,
    re.MULTILINE,
)


def extract_references(content: str) -> Tuple[str, ...]:
    """
    Collect names referenced by #include directives.

    Names are unique and kept in order of first appearance.

    Args:
        content: Raw fragment text

    Returns:
        Tuple of distinct included names
    """
    names = dict.fromkeys(m.group(1) for m in _INCLUDE_RE.finditer(content))
    return tuple(names)


def has_once_marker(content: str) -> bool:
    """Check if any line of content is `#pragma once`."""
    return _PRAGMA_ONCE_RE.search(content) is not None


def has_includes(content: str) -> bool:
    """Check if content contains any #include directives."""
    return _INCLUDE_RE.search(content) is not None


@lru_cache(maxsize=256)
def include_pattern(name: str) -> re.Pattern:
    """Pattern matching an include line for `name`, without its line terminator."""
    return re.compile(
        r"^[ \t]*#include[ \t]+<" + re.escape(name) + r">" + _EOL,
        re.MULTILINE,
    )


@lru_cache(maxsize=256)
def include_line_pattern(name: str) -> re.Pattern:
    """Pattern matching an include line for `name` together with its line terminator."""
    return re.compile(
        r"^[ \t]*#include[ \t]+<" + re.escape(name) + r">" + _EOL_CONSUME,
        re.MULTILINE,
    )


def replace_first_include(content: str, name: str, replacement: str) -> str:
    """Replace the first include line for `name` with replacement text, taken literally."""
    return include_pattern(name).sub(lambda _m: replacement, content, count=1)


def remove_includes(content: str, name: str) -> str:
    """Delete every include line for `name`."""
    return include_line_pattern(name).sub("", content)


def strip_once_markers(content: str) -> str:
    """Delete every `#pragma once` line."""
    return _PRAGMA_ONCE_LINE_RE.sub("", content)


__all__ = [
    "NAME_PATTERN",
    "extract_references",
    "has_once_marker",
    "has_includes",
    "include_pattern",
    "include_line_pattern",
    "replace_first_include",
    "remove_includes",
    "strip_once_markers",
]
