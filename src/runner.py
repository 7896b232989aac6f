""" Execute a shell command. """
import difflib
import logging
import subprocess

from command import Command
from constants import SLOW_COMMAND_SECONDS
from parser import parse_line
from shell_builtins import BUILTINS
from shell_state import ShellState

logger = logging.getLogger(__name__)


def suggest_command(name: str) -> str | None:
    matches = difflib.get_close_matches(name, sorted(BUILTINS), n=1, cutoff=0.6)
    return matches[0] if matches else None


def command_not_found(name: str) -> str:
    suggestion = suggest_command(name)
    if suggestion:
        return f"Command '{name}' not found. Did you mean '{suggestion}'?"
    return f"Command '{name}' not found. Try 'help' for a list of commands."


def execute_external(tokens: list[str]) -> str:
    """
    Run tokens[0] from PATH with the rest as arguments.

    stdin stays attached to the terminal; stdout and stderr are captured.
    Returns stdout on success and stderr on a non-zero exit.
    """
    try:
        completed = subprocess.run(
            tokens,
            stdin=None,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        logger.error("Command not found: %s (%s)", tokens[0], e)
        return command_not_found(tokens[0])
    except OSError as e:
        logger.error("Failed to execute %s: %s", tokens[0], e)
        return f"Failed to execute command: {e}"

    if completed.returncode == 0:
        return completed.stdout
    logger.info("%s exited with status %d", tokens[0], completed.returncode)
    return completed.stderr


def dispatch(cmd: Command, state: ShellState) -> str:
    handler = BUILTINS.get(cmd.name)
    if handler is not None:
        return handler(cmd.args, state)
    return execute_external(cmd.tokens)


def execute_line(line: str, state: ShellState) -> str:
    cmd = parse_line(line, state)
    if cmd is None:
        return "No command entered"
    return dispatch(cmd, state)


def execute_command(line: str, state: ShellState) -> str:
    """ Execute one input line, reporting how long it took if it was slow. """
    state.start_command_timer()
    try:
        result = execute_line(line, state)
    finally:
        duration = state.end_command_timer()
    if duration is not None and duration > SLOW_COMMAND_SECONDS:
        print(f"Command took {duration:.2f}s")
    return result
