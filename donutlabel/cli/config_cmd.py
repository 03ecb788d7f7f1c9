"""``config`` subcommand: inspect or initialise the settings file."""

from __future__ import annotations

import argparse
import sys

import yaml

from ..config import ensure_default_config, load_settings


def add_subparser(sub: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``config`` subcommand."""

    parser = sub.add_parser("config", help="Show or create the settings file")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--show", action="store_true", help="Print the effective settings")
    group.add_argument("--init", action="store_true", help="Write defaults if missing")
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    if args.init:
        print(ensure_default_config())
        return 0
    settings = load_settings()
    yaml.safe_dump(settings.model_dump(), sys.stdout, sort_keys=False, allow_unicode=True)
    return 0
