"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from rustci import NotARecognizedProjectError, PathNotFoundError


def main(argv: list[str] | None = None) -> int:
    import rustci.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.check:
            return cli._run_check(args)
        return cli._run_generate(args)
    except PathNotFoundError as exc:
        cli.print_error(str(exc), no_color=args.no_color)
        return 3
    except NotARecognizedProjectError as exc:
        cli.print_error(str(exc), no_color=args.no_color)
        return 4
    except OSError as exc:
        cli.print_error(f"filesystem error: {exc}", no_color=args.no_color)
        return 1
    except Exception as exc:  # pragma: no cover - defensive fallback
        cli.print_error(str(exc), no_color=args.no_color)
        return 1


__all__ = ["main"]
