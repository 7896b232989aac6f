""" Tab completion candidates for the line reader. """
import logging
import os

from shell_builtins import BUILTIN_NAMES

logger = logging.getLogger(__name__)


def complete_word(word: str, state) -> list[str]:
    """
    Candidates for a partially typed word.

    Builtin names, alias names, $-prefixed environment variable names and
    entries of the current directory, each kept if it starts with word.
    """
    completions = [name for name in BUILTIN_NAMES if name.startswith(word)]
    completions += [name for name in sorted(state.aliases) if name.startswith(word)]

    var_prefix = word[1:] if word.startswith("$") else word
    completions += [f"${name}" for name in sorted(state.env) if name.startswith(var_prefix)]

    try:
        entries = sorted(os.listdir("."))
    except OSError as e:
        logger.debug("Completion could not list current directory: %s", e)
        entries = []
    completions += [name for name in entries if name.startswith(word)]

    return completions


class SessionSnapshot:
    """ Read-only copy of the parts of a ShellState completion needs. """
    def __init__(self, state):
        self.aliases = dict(state.aliases)
        self.env = dict(state.env)


class Completer:
    """ readline completer backed by a snapshot of the session. """
    def __init__(self, state):
        self.snapshot = SessionSnapshot(state)
        self.matches = []

    def refresh(self, state):
        self.snapshot = SessionSnapshot(state)

    def complete(self, text, index):
        if index == 0:
            self.matches = complete_word(text, self.snapshot)
        try:
            return self.matches[index]
        except IndexError:
            return None
