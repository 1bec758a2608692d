"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("rustci")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustci",
        description="Generate a GitHub Actions CI workflow for a Rust project.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "project",
        nargs="?",
        default=".",
        help="Path to the Rust project (default: current directory)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--dry-run", action="store_true", help="Validate and show what would be written")
    mode.add_argument("--check", action="store_true", help="Exit non-zero if the workflow is missing or outdated")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
