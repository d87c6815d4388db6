""" Registry of builtin commands. """
from constants import WRONG_ARGS
from exceptions import ShellExit

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def is_builtin(name: str) -> bool:
    return name in BUILTINS


def wrong_args(name, state) -> int:
    print(f"{name}: {WRONG_ARGS}", file=state.stderr)
    return 1


@builtin("exit")
def builtin_exit(args, state):
    if len(args) != 1:
        return wrong_args("exit", state)
    try:
        status = int(args[0])
    except ValueError:
        print(f"exit: {args[0]}: numeric argument required", file=state.stderr)
        raise ShellExit(1)
    raise ShellExit(status)


@builtin("echo")
def builtin_echo(args, state) -> int:
    print(" ".join(args), file=state.stdout)
    return 0


@builtin("pwd")
def builtin_pwd(args, state):
    if state.cwd is None:
        print(f"pwd: error retrieving current directory: {state.cwd_error}", file=state.stderr)
        return 1
    print(state.cwd, file=state.stdout)
    return 0


def expand_home(path, state):
    """ Replace a leading ~ with the home directory. """
    if not path.startswith("~"):
        return path
    home = state.home_dir()
    if home is None:
        print("cd: could not determine home directory", file=state.stderr)
        return path
    return home + path[1:]


@builtin("cd")
def builtin_cd(args, state):
    if len(args) != 1:
        return wrong_args("cd", state)
    target = expand_home(args[0], state)

    try:
        state.chdir(target)
        return 0
    except FileNotFoundError:
        print(f"cd: {target}: No such file or directory", file=state.stderr)
    except NotADirectoryError:
        print(f"{target} is not a directory", file=state.stderr)
    # Indicate failure due to error
    return 1


@builtin("type")
def builtin_type(args, state):
    if len(args) != 1:
        return wrong_args("type", state)
    name = args[0]

    if is_builtin(name):
        print(f"{name} is a shell builtin", file=state.stdout)
        return 0

    path = state.which(name)
    if path is None:
        print(f"{name}: not found", file=state.stdout)
        return 1
    print(f"{name} is {path}", file=state.stdout)
    return 0
