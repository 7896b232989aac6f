""" Current state of the shell. """
import logging
import os
import time
from collections import deque

import config
from constants import HISTORY_LIMIT, SHOW_SYSTEM_INFO
from expander import expand_vars

logger = logging.getLogger(__name__)


class ShellState:
    def __init__(self, env=None, rc_path=None):
        # copy so the shell never writes back into os.environ
        self.env = dict(os.environ if env is None else env)
        self.aliases = {}
        self.history = deque(maxlen=HISTORY_LIMIT)
        self.dir_stack = []
        self.command_started = None
        self.rc_path = rc_path

    # environment
    def get_env(self, name):
        return self.env.get(name)

    def set_env(self, name, value):
        self.env[name] = value

    def interpolate(self, text: str) -> str:
        return expand_vars(text, self.env)

    # aliases
    def add_alias(self, name, command):
        self.aliases[name] = command

    def get_alias(self, name):
        return self.aliases.get(name)

    # history
    def add_to_history(self, line: str):
        self.history.append(line)

    # directory stack
    def push_dir(self, path: str):
        self.dir_stack.append(path)

    def pop_dir(self):
        if not self.dir_stack:
            return None
        return self.dir_stack.pop()

    # timing
    def start_command_timer(self):
        self.command_started = time.monotonic()

    def end_command_timer(self):
        """ Return seconds since start_command_timer(), or None. """
        if self.command_started is None:
            return None
        elapsed = time.monotonic() - self.command_started
        self.command_started = None
        return elapsed

    # system info preference
    def get_show_system_info(self) -> bool:
        return self.env.get(SHOW_SYSTEM_INFO, "").lower() == "true"

    def set_show_system_info(self, show: bool):
        value = "true" if show else "false"
        self.env[SHOW_SYSTEM_INFO] = value
        if self.rc_path is None:
            return
        try:
            config.write_export(self.rc_path, SHOW_SYSTEM_INFO, value)
        except OSError as e:
            # the preference still applies to this session
            logger.warning("Could not persist %s to %s: %s", SHOW_SYSTEM_INFO, self.rc_path, e)

    def load_config(self, path=None):
        """ Seed aliases and environment from the rc file, creating it if needed. """
        if path is not None:
            self.rc_path = path
        if self.rc_path is None:
            return
        try:
            config.ensure_rc(self.rc_path)
        except OSError as e:
            logger.warning("Could not create %s: %s", self.rc_path, e)
            return
        try:
            config.load_rc(self.rc_path, self)
        except OSError as e:
            logger.warning("Could not read %s: %s", self.rc_path, e)
