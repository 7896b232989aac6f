""" Exceptions used to leave the shell loop. """


class ShellExit(Exception):
    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


class StartupError(Exception):
    """ Raised when the shell cannot be initialized. """
