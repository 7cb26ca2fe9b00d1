"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

DEFAULTS_ONLY_OPTIONS = (("name", "--name"), ("out_dir", "--out-dir"), ("git", "--git/--no-git"))


def _package_version() -> str:
    try:
        return version("tsscaffold")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tsscaffold",
        description="Create a TypeScript library in the current (empty) directory.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--defaults", action="store_true", help="Use defaults without prompting (requires --name)")
    source.add_argument("--answers", default=None, help="Read answers from a JSON file instead of prompting")

    parser.add_argument("--name", default=None, help="Project name (with --defaults)")
    parser.add_argument("--out-dir", default=None, help="Output dir (with --defaults, default: dist)")
    parser.add_argument(
        "--git",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Initialize a git repository (with --defaults, default: yes)",
    )
    parser.add_argument("--package-manager", default="npm", help="Package manager executable (default: npm)")
    parser.add_argument("--skip-install", action="store_true", help="Write files only, do not install dependencies")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject answer options given without ``--defaults``.

    Exits with status 2 through :meth:`argparse.ArgumentParser.error`.
    """
    if args.defaults:
        return
    given = [flag for dest, flag in DEFAULTS_ONLY_OPTIONS if getattr(args, dest) is not None]
    if given:
        parser.error(f"{', '.join(given)} can only be used with --defaults")


__all__ = ["build_parser", "validate_args"]
