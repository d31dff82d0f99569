#!/usr/bin/env python3
"""
Start an interactive myshell session.

The shell name, prompt terminator and alias limit can be set on the command
line, and an alias file can be loaded before the first prompt.
"""
import argparse
import logging
import sys

from aliases import AliasTable
from constants import DEFAULT_SHELL_NAME, DEFAULT_TERMINATOR, MAX_ALIASES
from exceptions import AliasFileError
from shell import Shell
from shell_state import ShellState

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="myshell",
        description="Interactive shell with built-in alias management"
    )
    parser.add_argument(
        "--name",
        default=DEFAULT_SHELL_NAME,
        help=f"Initial shell name shown in the prompt (default: {DEFAULT_SHELL_NAME})"
    )
    parser.add_argument(
        "--terminator",
        default=DEFAULT_TERMINATOR,
        help=f"Initial prompt terminator (default: {DEFAULT_TERMINATOR})"
    )
    parser.add_argument(
        "--max-aliases",
        type=positive_int,
        default=MAX_ALIASES,
        metavar="N",
        help=f"Maximum number of aliases held in the table (default: {MAX_ALIASES})"
    )
    parser.add_argument(
        "--aliases",
        metavar="FILE",
        help="Alias file to load before the first prompt"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log dispatch and alias file activity to stderr"
    )
    return parser


def build_state(args) -> ShellState:
    state = ShellState(
        name=args.name,
        terminator=args.terminator,
        aliases=AliasTable(),
        max_aliases=args.max_aliases,
    )
    if args.aliases:
        try:
            state.aliases.load(args.aliases, state.max_aliases)
        except AliasFileError as e:
            print(f"Error: {e}", file=sys.stderr)
    return state


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

    sh = Shell(build_state(args))
    rc = sh.run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
