""" Registry of builtin commands. """
from constants import (
    LISTNEWNAMES,
    NEWNAME,
    READNEWNAMES,
    SAVENEWNAMES,
    SETSHELLNAME,
    SETTERMINATOR,
    STOP,
)
from exceptions import ShellError, ShellExit, UsageError

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def print_aliases(state):
    print("Aliases:")
    for line in state.aliases.render():
        print(line)


@builtin(STOP)
def builtin_stop(args, state):
    # trailing arguments are ignored
    raise ShellExit(0)


@builtin(SETSHELLNAME)
def builtin_setshellname(args, state):
    state.name = " ".join(args)
    print(f"Shell name set to: {state.name}")
    return 0


@builtin(SETTERMINATOR)
def builtin_setterminator(args, state):
    if args:
        state.terminator = args[0]
        print(f"Terminator set to: {state.terminator}")
    else:
        print(f"No terminator specified. Using the default terminator: {state.terminator}")
    return 0


@builtin(NEWNAME)
def builtin_newname(args, state):
    """
    NEWNAME                    (list aliases)
    NEWNAME alias              (delete alias)
    NEWNAME alias command      (define or replace alias)
    """
    if len(args) == 0:
        print_aliases(state)
        return 0

    if len(args) == 1:
        name = args[0]
        if state.aliases.delete(name):
            print(f"Alias '{name}' deleted.")
        else:
            print(f"Alias '{name}' does not exist.")
        return 0

    if len(args) == 2:
        name, command = args
        if name not in state.aliases and state.alias_table_full():
            raise ShellError(f"cannot define alias '{name}': alias limit of {state.max_aliases} reached")
        state.aliases.set(name, command)
        print(f"Alias '{name}' defined for '{command}'.")
        return 0

    raise UsageError(f"Invalid usage of {NEWNAME} command.")


@builtin(READNEWNAMES)
def builtin_readnewnames(args, state):
    if len(args) != 1:
        raise UsageError(f"Usage: {READNEWNAMES} <file_name>")

    path = args[0]
    applied = state.aliases.load(path, state.max_aliases)
    print(f"Aliases loaded from file: {path} ({applied} applied)")
    return 0


@builtin(LISTNEWNAMES)
def builtin_listnewnames(args, state):
    print_aliases(state)
    return 0


@builtin(SAVENEWNAMES)
def builtin_savenewnames(args, state):
    if len(args) != 1:
        raise UsageError(f"Usage: {SAVENEWNAMES} <file_name>")

    path = args[0]
    state.aliases.save(path)
    print(f"Aliases saved to file: {path}")
    return 0
