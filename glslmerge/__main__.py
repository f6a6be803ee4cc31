"""
Command-line entry point for glslmerge.

Usage:
    python -m glslmerge shaders/ -o merged.frag
    python -m glslmerge main.frag lighting.glsl common.glsl
"""

import argparse
import logging
import sys
from pathlib import Path

from glslmerge import log
from glslmerge.config import LoaderConfig, find_config, load_config
from glslmerge.errors import ConfigError, IncludeError
from glslmerge.registry import FragmentRegistry


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glslmerge",
        description="Merge GLSL fragments connected by #include <name> into one source",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Fragment files or directories with fragment files",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Loader config JSON (default: glslmerge.json in the first directory, if any)",
    )
    parser.add_argument(
        "--recursive", "-r",
        action="store_true",
        help="Search directories recursively",
    )
    parser.add_argument(
        "--ext",
        nargs="+",
        default=None,
        help="File extensions to load from directories",
    )
    parser.add_argument(
        "--strip-extension",
        action="store_true",
        help="Register fragments without their file extension",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug output")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only report errors")
    return parser


def resolve_config(args) -> LoaderConfig:
    """Config file (explicit or found in a directory) overridden by command-line flags."""
    config_path = args.config
    if config_path is None:
        for path in args.paths:
            if Path(path).is_dir():
                config_path = find_config(path)
                if config_path:
                    break

    config = load_config(config_path) if config_path else LoaderConfig()
    if config_path:
        log.debug(f"[glslmerge] Using config {config_path}")

    if args.recursive:
        config.recursive = True
    if args.strip_extension:
        config.strip_extension = True
    if args.ext:
        config = LoaderConfig.from_dict({**config.to_dict(), "extensions": args.ext})
    return config


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    logging.basicConfig(format="%(levelname)s: %(message)s")
    log.set_level(level)

    try:
        config = resolve_config(args)
        registry = FragmentRegistry()
        for path in args.paths:
            if Path(path).is_dir():
                registry.add_directory(path, config)
            else:
                name = None
                if config.strip_extension:
                    name = Path(path).stem
                registry.add_file(path, name=name, encoding=config.encoding)

        merged = registry.merge()
    except (IncludeError, ConfigError) as e:
        log.error(f"[glslmerge] {e}")
        return 1

    if args.output:
        with open(args.output, "w", encoding=config.encoding, newline="") as f:
            f.write(merged)
        log.info(f"[glslmerge] Wrote {args.output}")
    else:
        sys.stdout.write(merged)
    return 0


if __name__ == "__main__":
    sys.exit(main())
