"""Entry point for the donutlabel CLI."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..boot.logging import configure_logging
from . import config_cmd, place


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="donutlabel", description="Donut label placement")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    place.add_subparser(sub)
    config_cmd.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(verbosity=args.verbose)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
