""" Exceptions raised by the shell. """


class ShellExit(Exception):
    """ Raised to stop the read-eval loop with the given status. """
    def __init__(self, status: int):
        super().__init__(status)
        self.status = status
