""" Current state of the shell. """
from aliases import AliasTable
from constants import DEFAULT_SHELL_NAME, DEFAULT_TERMINATOR, MAX_ALIASES


class ShellState:
    def __init__(self, name=DEFAULT_SHELL_NAME, terminator=DEFAULT_TERMINATOR,
                 aliases=None, max_aliases=MAX_ALIASES):
        self.name = name
        self.terminator = terminator
        self.aliases = aliases if aliases is not None else AliasTable()
        self.max_aliases = max_aliases
        self.last_status = 0

    def prompt(self) -> str:
        return f"{self.name}{self.terminator} "

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0

    def alias_table_full(self) -> bool:
        return len(self.aliases) >= self.max_aliases
