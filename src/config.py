""" Load and persist the ~/.batcaverc configuration file. """
import logging
import os

from constants import DEFAULT_RC, RC_ENV_OVERRIDE, RC_FILENAME

logger = logging.getLogger(__name__)


def home_dir(env=None) -> str:
    env = os.environ if env is None else env
    home = env.get("HOME") or env.get("USERPROFILE")
    if home:
        return home
    home = os.path.expanduser("~")
    if home == "~":
        return os.getcwd()
    return home


def rc_path(env=None) -> str:
    env = os.environ if env is None else env
    override = env.get(RC_ENV_OVERRIDE)
    if override:
        return override
    return os.path.join(home_dir(env), RC_FILENAME)


def ensure_rc(path: str) -> bool:
    """ Write the default template to path if nothing is there. Returns True if created. """
    if os.path.exists(path):
        return False
    with open(path, "w", encoding="utf-8") as f:
        f.write(DEFAULT_RC)
    logger.info("Created default configuration at %s", path)
    return True


def strip_quotes(value: str) -> str:
    """ Remove one layer of matching surrounding quotes. """
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_rc_line(line: str):
    """
    Parse one configuration line.

    Returns (kind, name, value) where kind is "alias" or "export", or None
    for comments, blank lines and anything unrecognized.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    kind, _, rest = line.partition(" ")
    if kind not in ("alias", "export"):
        return None

    name, sep, value = rest.strip().partition("=")
    name = name.strip()
    if not sep or not name or " " in name:
        return None
    return kind, name, strip_quotes(value.strip())


def load_rc(path: str, state):
    """ Apply every alias/export directive in path to state. """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, 1):
            parsed = parse_rc_line(line)
            if parsed is None:
                if line.strip() and not line.lstrip().startswith("#"):
                    logger.debug("%s:%d: skipping unrecognized line", path, lineno)
                continue
            kind, name, value = parsed
            if kind == "alias":
                state.add_alias(name, value)
            else:
                state.set_env(name, state.interpolate(value))


def write_export(path: str, name: str, value: str):
    """ Replace the `export name=...` line in path, or append one. """
    lines = []
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()

    directive = f"export {name}={value}"
    for i, line in enumerate(lines):
        parsed = parse_rc_line(line)
        if parsed is not None and parsed[0] == "export" and parsed[1] == name:
            lines[i] = directive
            break
    else:
        lines.append(directive)

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
