""" In-memory alias table and its file format. """
import logging

from constants import ALIAS_SEPARATOR
from exceptions import AliasFileError

logger = logging.getLogger(__name__)


def parse_alias_line(line: str) -> tuple[str, str]|None:
    """
    Split an alias file line on its first separator.
    Returns (alias, command line), or None when either part would be empty.
    """
    name, sep, command = line.rstrip("\r\n").partition(ALIAS_SEPARATOR)
    if not sep or not name or not command:
        return None
    return name, command


def format_alias_line(name: str, command: str) -> str:
    return f"{name}{ALIAS_SEPARATOR}{command}\n"


class AliasTable:
    """ Maps alias names to the command line they stand for. """
    def __init__(self, aliases=None):
        self._aliases: dict[str, str] = dict(aliases or {})

    def __len__(self):
        return len(self._aliases)

    def __contains__(self, name):
        return name in self._aliases

    def __iter__(self):
        return iter(self._aliases)

    def get(self, name, default=None):
        return self._aliases.get(name, default)

    def set(self, name: str, command: str):
        self._aliases[name] = command

    def delete(self, name: str) -> bool:
        """ Remove an alias. Returns False if it was not defined. """
        if name not in self._aliases:
            return False
        del self._aliases[name]
        return True

    def items(self):
        return self._aliases.items()

    def as_dict(self) -> dict[str, str]:
        return dict(self._aliases)

    def render(self) -> list[str]:
        """ Lines for LISTNEWNAMES, one per alias. """
        return [f"{name} - {command}" for name, command in self._aliases.items()]

    def load(self, path, max_aliases: int) -> int:
        """
        Add aliases from a file on top of the current entries.
        Existing names are replaced. Stops as soon as the table holds
        max_aliases entries; the rest of the file is not read.
        Returns the number of lines applied.
        """
        applied = 0
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    parsed = parse_alias_line(line)
                    if parsed is None:
                        continue

                    name, command = parsed
                    if name not in self._aliases and len(self._aliases) >= max_aliases:
                        break
                    self._aliases[name] = command
                    applied += 1

                    if len(self._aliases) >= max_aliases:
                        break
        except OSError as e:
            raise AliasFileError(f"cannot read alias file {path}: {e.strerror or e}", path) from e
        except UnicodeDecodeError as e:
            raise AliasFileError(f"cannot read alias file {path}: not valid UTF-8 ({e.reason})", path) from e

        logger.debug("loaded %d alias lines from %s (%d defined)", applied, path, len(self._aliases))
        return applied

    def save(self, path) -> int:
        """
        Write every alias to a file, replacing its contents.
        The first write failure stops the save; lines already written stay.
        """
        try:
            f = open(path, "w", encoding="utf-8")
        except OSError as e:
            raise AliasFileError(f"cannot create alias file {path}: {e.strerror or e}", path) from e

        written = 0
        try:
            with f:
                for name, command in self._aliases.items():
                    f.write(format_alias_line(name, command))
                    written += 1
        except OSError as e:
            raise AliasFileError(f"cannot write alias file {path}: {e.strerror or e}", path) from e

        logger.debug("saved %d aliases to %s", written, path)
        return written
