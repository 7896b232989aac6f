""" Implement the core of the shell. """
import logging
import os
import sys

import system_info
from completion import Completer
from constants import SHOW_SYSTEM_INFO
from exceptions import ShellExit, StartupError
from runner import execute_command
from shell_state import ShellState

logger = logging.getLogger(__name__)

BANNER = "Welcome to the Batcave Terminal. Proceed with caution."


def read_command(prompt="$ "):
    """ Read one line of input. """
    return input(prompt)


def make_prompt() -> str:
    try:
        cwd = os.getcwd()
    except OSError:
        cwd = "?"
    return f"{cwd}> "


def init_line_reader(completer: Completer):
    """ Hook the completer into readline. """
    try:
        import readline
    except ImportError as e:
        raise StartupError(f"line editing is unavailable: {e}") from e

    readline.set_completer(completer.complete)
    # '$' must reach the completer so variable names can be completed
    readline.set_completer_delims(" \t\n")
    readline.parse_and_bind("tab: complete")
    readline.set_auto_history(False)
    return readline


def write_result(result: str, out=None):
    out = out or sys.stdout
    if not result:
        return
    out.write(result if result.endswith("\n") else result + "\n")
    out.flush()


class Shell:
    def __init__(self, state=None, rc_path=None):
        self.state = state or ShellState(rc_path=rc_path)
        self.completer = Completer(self.state)
        self.readline = None

    def start(self, interactive_setup=True):
        """ Load the rc file, hook up line editing and show the startup summary. """
        self.state.load_config()
        self.completer.refresh(self.state)
        if interactive_setup:
            self.readline = init_line_reader(self.completer)
        print(BANNER)
        self.show_startup_info()

    def show_startup_info(self):
        if SHOW_SYSTEM_INFO not in self.state.env:
            print()
            print(system_info.system_info(self.state.env))
            print()
            try:
                answer = read_command(
                    "Would you like to see this system information every time you start the shell? [Y/n] "
                )
            except (EOFError, KeyboardInterrupt):
                # no answer counts as the default yes
                print()
                answer = ""
            self.state.set_show_system_info(answer.strip().lower() != "n")
            print("Preference saved. You can change this later using the 'systeminfo' command.")
        elif self.state.get_show_system_info():
            print()
            print(system_info.system_info(self.state.env))
        print()

    def handle_line(self, line: str) -> str | None:
        """ Run one raw input line. Raises ShellExit on `exit`. """
        line = line.strip()
        if not line:
            return None
        if line == "exit":
            raise ShellExit(0)

        self.state.add_to_history(line)
        if self.readline is not None:
            self.readline.add_history(line)

        result = execute_command(line, self.state)
        logger.info("Executed command: %s", line)
        self.completer.refresh(self.state)
        return result

    def run(self) -> int:
        while True:
            try:
                line = read_command(make_prompt())
            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
                return 0

            except OSError as e:
                logger.error("Line reader failed: %s", e)
                print(f"Error: {e}", file=sys.stderr)
                return 1

            try:
                write_result(self.handle_line(line))
            except ShellExit as e:
                print("Exiting the Batcave...")
                return e.status

            except KeyboardInterrupt:
                print()
                return 0
