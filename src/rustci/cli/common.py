"""Shared CLI output helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def make_console(*, stderr: bool = False, no_color: bool = False) -> Console:
    return Console(stderr=stderr, no_color=no_color, highlight=False, soft_wrap=True)


def print_error(message: str, *, no_color: bool = False) -> None:
    make_console(stderr=True, no_color=no_color).print(f"[bold red]error:[/] {escape(message)}")
