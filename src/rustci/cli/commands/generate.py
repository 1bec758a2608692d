"""Generate and check command handlers."""

from __future__ import annotations

import argparse

from rich.markup import escape

from rustci import GenerateResult


def format_generate_summary(result: GenerateResult) -> str:
    if result.dry_run:
        action = "would replace" if result.replaced else "would create"
        lines = [
            f"[yellow]\\[dry-run][/] Rust CI workflow {action}:",
            f"  {escape(str(result.output_path))}",
        ]
        if result.created_dir:
            lines.append(f"  [dim]directory {escape(str(result.output_path.parent))} would be created[/]")
        lines.append("  [dim]No files were written[/]")
        return "\n".join(lines)

    action = "regenerated" if result.replaced else "generated"
    relative = result.output_path.relative_to(result.project_dir).as_posix()
    return "\n".join(
        [
            f"[green]✓[/] Rust CI workflow {action}:",
            f"  {escape(str(result.output_path))}",
            "",
            "[cyan]Next steps:[/]",
            f"  git add {escape(relative)}",
            '  git commit -m "Add Rust CI workflow"',
            "  git push",
        ]
    )


def run_generate(args: argparse.Namespace) -> int:
    import rustci.cli as cli

    result = cli.generate(args.project, dry_run=args.dry_run)
    cli.make_console(no_color=args.no_color).print(format_generate_summary(result))
    return 0


def run_check(args: argparse.Namespace) -> int:
    import rustci.cli as cli

    console = cli.make_console(no_color=args.no_color)
    if cli.check_workflow(args.project):
        console.print("[green]✓[/] Rust CI workflow is up to date")
        return 0
    console.print("[yellow]![/] Rust CI workflow is missing or outdated; run [bold]rustci[/] to regenerate it")
    return 5


__all__ = ["format_generate_summary", "run_check", "run_generate"]
