""" Resolve an input line into a command. """
import logging

from command import Command
from lexer import tokenize
from shell_state import ShellState

logger = logging.getLogger(__name__)


def resolve_alias(tokens: list[str], state: ShellState) -> tuple[list[str], str | None]:
    """
    Replace the whole token list with the alias body if tokens[0] is an alias.

    Only one level is resolved: the body's first word is never looked up
    as an alias again.
    """
    if not tokens:
        return tokens, None
    body = state.get_alias(tokens[0])
    if body is None:
        return tokens, None
    logger.debug("alias %s -> %s", tokens[0], body)
    return tokenize(body), tokens[0]


def parse_line(line: str, state: ShellState) -> Command | None:
    """ Expand, tokenize and alias-resolve a line. Returns None if nothing is left. """
    tokens = tokenize(state.interpolate(line))
    tokens, alias = resolve_alias(tokens, state)
    if not tokens:
        return None
    return Command(tokens[0], tokens[1:], alias=alias)
