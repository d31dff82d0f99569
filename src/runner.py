""" Execute a shell command. """
import logging
import subprocess
import sys

from command import Command
from exceptions import CommandError, ShellError
from lexer import tokenize
from parser import parse_simple_command
from shell_builtins import BUILTINS
from shell_state import ShellState

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127


def run_external(name: str, args: list[str]) -> int:
    """
    Run a program with the shell's stdin, stdout and stderr.
    Raises CommandError unless it starts and exits with status 0.
    """
    try:
        completed = subprocess.run([name] + list(args))
    except FileNotFoundError as e:
        raise CommandError(f"{name}: command not found", COMMAND_NOT_FOUND) from e
    except OSError as e:
        raise CommandError(f"{name}: {e.strerror or e}", COMMAND_NOT_FOUND) from e
    except ValueError as e:
        # e.g. an embedded null byte in the program name or an argument
        raise CommandError(f"{name}: cannot run: {e}", COMMAND_NOT_FOUND) from e

    logger.debug("%s exited with status %d", name, completed.returncode)
    if completed.returncode != 0:
        raise CommandError(
            f"Command '{name}' returned a non-zero exit status {completed.returncode}",
            completed.returncode,
        )
    return 0


def resolve_alias(cmd: Command, shell_state: ShellState) -> Command:
    """
    Replace an aliased command with its stored command line.
    Arguments typed after the alias name are dropped.
    """
    value = shell_state.aliases.get(cmd.name)
    if value is None:
        return cmd

    tokens = tokenize(value)
    if not tokens:
        raise CommandError(f"alias '{cmd.name}' has an empty command")

    logger.debug("alias %s -> %s", cmd.name, tokens)
    return Command(tokens[0], tokens[1:])


def execute_command(cmd: Command, shell_state: ShellState) -> int:
    # Builtins shadow aliases and programs of the same name
    if cmd.name in BUILTINS:
        logger.debug("builtin %s %s", cmd.name, cmd.args)
        return BUILTINS[cmd.name](cmd.args, shell_state) or 0

    target = resolve_alias(cmd, shell_state)
    logger.debug("external %s %s", target.name, target.args)
    return run_external(target.name, target.args)


def dispatch(tokens: list[str], shell_state: ShellState) -> int:
    """
    Run one tokenized input line and return its status.
    Failures are reported on stderr; only ShellExit escapes.
    """
    cmd = parse_simple_command(tokens)
    if cmd is None:
        return 0

    try:
        return execute_command(cmd, shell_state)
    except ShellError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.status
