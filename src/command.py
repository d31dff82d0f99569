""" Command to be executed. """


class Command:
    def __init__(self, name, args=None):
        self.name = name
        self.args = list(args) if args else []

    def __eq__(self, other):
        if not isinstance(other, Command):
            return NotImplemented
        return self.name == other.name and self.args == other.args

    def __repr__(self):
        return f"Command({self.name!r}, {self.args!r})"
