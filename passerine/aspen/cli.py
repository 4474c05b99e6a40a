"""The ``aspen`` command line."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path

from passerine.aspen.new import new_package
from passerine.aspen.status import AspenError, Status


def package_dir(path: str) -> Path:
    """The package directory named on the command line; ``.`` is the cwd."""
    if path == ".":
        return Path(os.getcwd())
    return Path(path)


def repl() -> None:
    """Start an interactive session, which is not available yet."""
    raise AspenError("Interactive repl is WIP")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aspen", description="Passerine package manager")
    commands = parser.add_subparsers(dest="command", required=True)

    new = commands.add_parser("new", help="Creates a new Passerine package")
    new.add_argument("path", nargs="?", default=".", type=package_dir)

    commands.add_parser("repl", help="Starts an interactive session")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command == "new":
            new_package(args.path)
        else:
            repl()
    except AspenError as error:
        Status.fatal().log(str(error))
        return 1
    return 0