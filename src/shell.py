""" Implement the core of the shell. """
import logging
import sys

from constants import DEFAULT_PROMPT
from exceptions import ShellExit
from lexer import tokenize
from runner import execute_command
from shell_state import ShellState

log = logging.getLogger(__name__)


def read_command(prompt=DEFAULT_PROMPT):
    """ Read one line of input, without its newline. """
    return input(prompt)


class Shell:
    def __init__(self, state=None, prompt=DEFAULT_PROMPT):
        self.state = state if state is not None else ShellState()
        self.prompt = prompt

    def run_line(self, line: str) -> int:
        cmd = tokenize(line)
        if cmd.is_blank:
            return self.state.last_status
        status = execute_command(cmd, self.state)
        self.state.set_status(status)
        return status

    def run(self):
        while True:
            try:
                line = read_command(self.prompt)
            except EOFError:
                print("Error reading input: EOF", file=sys.stderr)
                return 1
            except (OSError, UnicodeDecodeError) as e:
                print(f"Error reading input: {e}", file=sys.stderr)
                return 1

            log.debug("read %r", line)
            try:
                self.run_line(line)
            except ShellExit as e:
                return e.status
