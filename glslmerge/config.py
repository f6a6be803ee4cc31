"""Loader configuration.

A directory of fragments may carry a `glslmerge.json` file:

    {
        "extensions": [".glsl", ".frag"],
        "recursive": true,
        "encoding": "utf-8",
        "strip_extension": false
    }

All keys are optional.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from glslmerge.errors import ConfigError

CONFIG_FILE_NAME = "glslmerge.json"

DEFAULT_EXTENSIONS = [".glsl", ".vert", ".frag", ".geom", ".comp", ".tesc", ".tese"]


@dataclass
class LoaderConfig:
    """How fragment files are found and named."""
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    recursive: bool = False
    encoding: str = "utf-8"
    # Keep ".glsl" in include names by default: #include <lighting.glsl>
    strip_extension: bool = False

    def matches(self, filename: str) -> bool:
        """Check if file has one of the configured extensions."""
        ext = os.path.splitext(filename)[1].lower()
        return ext in self.extensions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extensions": list(self.extensions),
            "recursive": self.recursive,
            "encoding": self.encoding,
            "strip_extension": self.strip_extension,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoaderConfig":
        """Build config from dict, validating keys and value types."""
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a JSON object, got {type(data).__name__}")

        unknown = set(data) - {"extensions", "recursive", "encoding", "strip_extension"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        config = cls()

        if "extensions" in data:
            extensions = data["extensions"]
            if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
                raise ConfigError("'extensions' must be a list of strings")
            config.extensions = [_normalize_extension(e) for e in extensions]

        for key in ("recursive", "strip_extension"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"'{key}' must be true or false")
                setattr(config, key, data[key])

        if "encoding" in data:
            if not isinstance(data["encoding"], str) or not data["encoding"]:
                raise ConfigError("'encoding' must be a non-empty string")
            config.encoding = data["encoding"]

        return config


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def load_config(path: str) -> LoaderConfig:
    """
    Read LoaderConfig from a JSON file.

    Raises:
        ConfigError: file is missing, not JSON or has invalid values
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    return LoaderConfig.from_dict(data)


def find_config(directory: str) -> Optional[str]:
    """Path of glslmerge.json inside directory, or None."""
    path = os.path.join(directory, CONFIG_FILE_NAME)
    return path if os.path.isfile(path) else None


__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_EXTENSIONS",
    "LoaderConfig",
    "load_config",
    "find_config",
]
