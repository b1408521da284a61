"""CLI entrypoint for the query compiler dev harness."""

from __future__ import annotations

import argparse
import sys

from .compile import list_presets, run_compile
from .utils import configure_dev_logging, parse_variables, resolve_auth


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query compiler dev harness")
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_ = subparsers.add_parser("compile", help="Compile options into a query string")
    source = compile_.add_mutually_exclusive_group()
    source.add_argument("--where", help="Where expression, e.g. \"Priority eq High\"")
    source.add_argument("--preset", help="Named search preset, e.g. myOpenTasks")
    compile_.add_argument("--var", action="append", default=[], help="Preset variable as key=value (repeatable)")
    compile_.add_argument("--include", action="append", default=None, help="Include path (repeatable)")
    compile_.add_argument("--take", type=int, default=None, help="Number of items to return")
    compile_.add_argument("--order-by", action="append", default=None, help="Sort key (repeatable)")
    compile_.add_argument("--format", dest="fmt", default=None, help="Response format (default json)")
    compile_.add_argument("--config", default=None, help="Path to config JSON/YAML with an auth section")

    subparsers.add_parser("presets", help="List search presets")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    configure_dev_logging()
    args = _parse_args(argv)
    if args.command == "presets":
        for name, template in list_presets():
            print(f"{name}: {template}")
        return 0

    try:
        query = run_compile(
            auth=resolve_auth(args.config),
            where=args.where,
            preset=args.preset,
            variables=parse_variables(args.var),
            include=args.include,
            take=args.take,
            order_by=args.order_by,
            fmt=args.fmt,
        )
    except (ValueError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(query)
    return 0


if __name__ == "__main__":
    sys.exit(main())
