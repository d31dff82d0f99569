""" Parse shell commands. """
from command import Command


def parse_simple_command(tokens: list[str]) -> Command|None:
    """ Parse a simple shell command. """
    if not tokens:
        return None
    return Command(tokens[0], tokens[1:])
