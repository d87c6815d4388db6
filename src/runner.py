""" Execute a shell command. """
import contextlib
import logging
import os
import subprocess
import sys

from command import Command, Stream
from shell_builtins import BUILTINS, is_builtin
from shell_state import ShellState

log = logging.getLogger(__name__)


def open_target(cmd: Command, state: ShellState, binary=False):
    """ Open the redirect target of cmd, truncating unless appending. """
    mode = "a" if cmd.redirect.append else "w"
    path = state.resolve(cmd.redirect.path)
    if binary:
        return open(path, mode + "b")
    return open(path, mode, encoding="utf-8")


@contextlib.contextmanager
def redirect_stdout(cmd: Command, state: ShellState):
    if not cmd.redirects(Stream.STDOUT):
        yield
        return

    with open_target(cmd, state) as f:
        old_stdout = state.stdout
        state.stdout = f
        try:
            yield
        finally:
            state.stdout = old_stdout


@contextlib.contextmanager
def redirect_stderr(cmd: Command, state: ShellState):
    if not cmd.redirects(Stream.STDERR):
        yield
        return

    with open_target(cmd, state) as f:
        old = state.stderr
        state.stderr = f
        try:
            yield
        finally:
            state.stderr = old


def write_bytes(stream, data: bytes, default):
    """ Write raw bytes to a text stream, through its buffer when it has one. """
    if not data:
        return
    if stream is None:
        stream = default
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode("utf-8", errors="replace"))
        return
    stream.flush()
    buffer.write(data)
    buffer.flush()


def missing_argument(cmd: Command, state: ShellState) -> str | None:
    """ Guess which argument made a command fail: the first that is not an existing path. """
    for arg in cmd.args:
        if not os.path.exists(state.resolve(arg)):
            return arg
    return None


def report_failure(cmd: Command, state: ShellState, stderr_data: bytes) -> bytes:
    """ Error output to relay for a finished child. """
    if stderr_data:
        return stderr_data
    arg = missing_argument(cmd, state)
    if arg is None:
        return b""
    return f"{cmd.name}: {arg}: No such file or directory\n".encode()


def write_target(cmd: Command, state: ShellState, data: bytes, err: bytes) -> bool:
    """
    Write captured output to the redirect target.

    On failure the child's error output still reaches the shell's stderr,
    followed by the reason the target could not be written.
    """
    try:
        with open_target(cmd, state, binary=True) as f:
            f.write(data)
        return True
    except OSError as e:
        write_bytes(state.stderr, err, sys.stderr)
        print(f"{cmd.target_path}: {e.strerror or e}", file=state.stderr)
        return False


def execute_external(cmd: Command, state: ShellState) -> int:
    path = state.which(cmd.name)
    if path is None:
        print(f"{cmd.name}: command not found", file=state.stderr)
        return 127

    try:
        completed = subprocess.run(
            [cmd.name, *cmd.args],
            executable=path,
            cwd=state.cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        print(f"{cmd.name}: {e.strerror or e}", file=state.stderr)
        return 126
    log.debug("%s exited with %s", path, completed.returncode)

    err = completed.stderr or b""
    if completed.returncode != 0:
        err = report_failure(cmd, state, err)

    if cmd.redirects(Stream.STDOUT):
        if not write_target(cmd, state, completed.stdout or b"", err):
            return 1
    else:
        write_bytes(state.stdout, completed.stdout, sys.stdout)

    if cmd.redirects(Stream.STDERR):
        if not write_target(cmd, state, err, err):
            return 1
    else:
        write_bytes(state.stderr, err, sys.stderr)

    return completed.returncode


def execute_command(cmd: Command, state: ShellState) -> int:
    if cmd.is_blank:
        return 0

    log.debug("dispatch %r", cmd)
    if not is_builtin(cmd.name):
        return execute_external(cmd, state)

    # Builtins: redirect the state's streams for the duration of the call
    stack = contextlib.ExitStack()
    try:
        stack.enter_context(redirect_stdout(cmd, state))
        stack.enter_context(redirect_stderr(cmd, state))
    except OSError as e:
        stack.close()
        print(f"{cmd.target_path}: {e.strerror or e}", file=state.stderr)
        return 1

    with stack:
        return BUILTINS[cmd.name](list(cmd.args), state) or 0
