""" Current state of the shell. """
import logging
import os
import shutil

log = logging.getLogger(__name__)


def _process_cwd():
    try:
        return os.getcwd(), None
    except OSError as e:
        # the directory we were started in may be gone
        return None, e


class ShellState:
    """
    Everything a command can see or change.

    Tests build their own instance instead of touching the process: the
    working directory, search path, home directory and output streams are
    all fields here. ``stdout``/``stderr`` of None mean the process streams,
    which keeps ``print(..., file=state.stdout)`` working either way.
    """
    def __init__(self, cwd=None, path=None, home=None, stdout=None, stderr=None):
        self.cwd_error = None
        if cwd is None:
            cwd, self.cwd_error = _process_cwd()
        self.cwd = cwd

        if path is None:
            path = os.environ.get("PATH", os.defpath).split(os.pathsep)
        self.path = [p for p in path if p]

        self.home = home
        self.stdout = stdout
        self.stderr = stderr
        self.last_status = 0

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0

    def home_dir(self) -> str | None:
        """ Return the home directory, or None if it cannot be determined. """
        if self.home is not None:
            return self.home
        home = os.path.expanduser("~")
        if home == "~":
            return None
        return home

    def resolve(self, path: str) -> str:
        """ Make a path absolute against the shell's working directory. """
        if os.path.isabs(path) or self.cwd is None:
            return path
        return os.path.join(self.cwd, path)

    def chdir(self, path: str):
        """
        Change the working directory.

        Raises FileNotFoundError or NotADirectoryError like os.chdir does;
        nothing changes on failure.
        """
        target = os.path.normpath(self.resolve(path))
        if not os.path.exists(target):
            raise FileNotFoundError(path)
        if not os.path.isdir(target):
            raise NotADirectoryError(path)
        log.debug("cwd %s -> %s", self.cwd, target)
        self.cwd = target
        self.cwd_error = None

    def which(self, name: str) -> str | None:
        """ Resolve a command name to an executable file, or None. """
        if not name:
            return None
        if os.sep in name:
            candidate = self.resolve(name)
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                return candidate
            return None
        found = shutil.which(name, path=os.pathsep.join(self.path))
        log.debug("which %s -> %s", name, found)
        return found
