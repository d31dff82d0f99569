""" Exceptions raised while handling a command. """


class ShellExit(Exception):
    """ Raised to leave the read-eval loop with the given status. """
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class ShellError(Exception):
    """ A failure that is reported to the user; the loop keeps going. """
    status = 1

    def __init__(self, message, status=None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def __str__(self):
        return self.message


class UsageError(ShellError):
    """ A builtin was called with the wrong number of arguments. """
    status = 2


class AliasFileError(ShellError):
    """ An alias file could not be opened, read or written. """
    def __init__(self, message, path):
        super().__init__(message)
        self.path = path


class CommandError(ShellError):
    """ An external program failed to launch or exited non-zero. """
