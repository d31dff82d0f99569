""" Implement the core of the shell. """
from exceptions import ShellExit
from lexer import tokenize
from runner import dispatch
from shell_state import ShellState


def read_command(prompt="My Shell> "):
    """ Read one line of input. """
    return input(prompt)


class Shell:
    def __init__(self, state=None):
        self.state = state if state is not None else ShellState()

    def run_line(self, line: str) -> int:
        status = dispatch(tokenize(line), self.state)
        self.state.set_status(status)
        return status

    def run(self):
        while True:
            try:
                line = read_command(self.state.prompt())
                self.run_line(line)
            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
