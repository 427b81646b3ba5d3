# src/main.py - v2
"""CLI entry point: resolve, upload, list commands.

Usage:
    buildcache resolve <fingerprint> <platform> [--project-root DIR]
    buildcache upload <fingerprint> <platform> <build_path> [--project-root DIR]
    buildcache list [--platform PLATFORM] [--project-root DIR]

Resolved and stored paths go to stdout; logs go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from buildcache.version import __version__

if TYPE_CHECKING:
    from buildcache.config.settings import Settings

logger = logging.getLogger(__name__)

PLATFORM_CHOICES = ("ios", "android")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    from buildcache.config.settings import ConfigurationError

    try:
        settings = _load_settings(args)
    except (ConfigurationError, ValueError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1
    _setup_logging(settings, args.verbose)

    try:
        return args.func(args, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="buildcache",
        description=f"buildcache v{__version__}: local build artifact cache",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--cache-root", type=Path, default=None,
        help="Cache directory (default: CACHE_ROOT or .expo/cache)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- resolve ---
    p_resolve = subparsers.add_parser(
        "resolve", help="Print the cached build path for a fingerprint",
    )
    p_resolve.add_argument("fingerprint", help="Fingerprint hash")
    p_resolve.add_argument("platform", choices=PLATFORM_CHOICES)
    p_resolve.add_argument(
        "--project-root", type=Path, default=None,
        help="Directory a relative cache root is resolved against (default: cwd)",
    )
    p_resolve.set_defaults(func=_cmd_resolve)

    # --- upload ---
    p_upload = subparsers.add_parser(
        "upload", help="Store a build artifact under a fingerprint",
    )
    p_upload.add_argument("fingerprint", help="Fingerprint hash")
    p_upload.add_argument("platform", choices=PLATFORM_CHOICES)
    p_upload.add_argument("build_path", type=Path, help="Built .app directory or .apk file")
    p_upload.add_argument(
        "--project-root", type=Path, default=None,
        help="Directory a relative cache root is resolved against (default: cwd)",
    )
    p_upload.set_defaults(func=_cmd_upload)

    # --- list ---
    p_list = subparsers.add_parser("list", help="List cached builds")
    p_list.add_argument("--platform", choices=PLATFORM_CHOICES, default=None)
    p_list.add_argument(
        "--project-root", type=Path, default=None,
        help="Directory a relative cache root is resolved against (default: cwd)",
    )
    p_list.set_defaults(func=_cmd_list)

    return parser


def _cmd_resolve(args: argparse.Namespace, settings: Settings) -> int:
    """Print the cached path, exit 1 on a miss."""
    from buildcache.api.facade import resolve_build_cache

    path = resolve_build_cache(
        args.fingerprint, args.platform, args.project_root, settings=settings,
    )
    if path is None:
        return 1
    print(path)
    return 0


def _cmd_upload(args: argparse.Namespace, settings: Settings) -> int:
    """Store an artifact and print its cache path, exit 1 on failure."""
    from buildcache.api.facade import upload_build_cache

    path = upload_build_cache(
        args.fingerprint, args.platform, args.build_path, args.project_root,
        settings=settings,
    )
    if path is None:
        return 1
    print(path)
    return 0


def _cmd_list(args: argparse.Namespace, settings: Settings) -> int:
    """Print one line per cached build."""
    from buildcache.cache.cache_factory import create_cache_store

    store = create_cache_store(settings, base_dir=args.project_root)
    entries = store.list_entries(args.platform)
    for entry in entries:
        kind = "dir " if entry.is_directory else "file"
        print(
            f"{entry.key.platform.value:8s} {entry.key.fingerprint_hash:40s} "
            f"{kind} {_format_size(entry.size_bytes):>9s} "
            f"{entry.modified_at:%Y-%m-%d %H:%M}  {entry.path}"
        )
    if not entries:
        logger.info("No cached builds found")
    return 0


def _format_size(size: int) -> str:
    """Format a byte count for listings."""
    if size < 1024:
        return f"{size}B"
    value = size / 1024
    for unit in ("KB", "MB"):
        if value < 1024:
            return f"{value:.1f}{unit}"
        value /= 1024
    return f"{value:.1f}GB"


def _load_settings(args: argparse.Namespace) -> Settings:
    from buildcache.config.settings import load_settings

    overrides: dict[str, object] = {}
    if args.cache_root is not None:
        overrides["cache_root"] = args.cache_root
    return load_settings(**overrides)


def _setup_logging(settings: Settings, verbose: bool) -> None:
    """Configure logging for CLI usage."""
    from buildcache.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=str(settings.log_file) if settings.log_file else None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


if __name__ == "__main__":
    sys.exit(main())
