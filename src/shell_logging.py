""" Log file setup. """
import logging
import os

import config
from constants import LOG_ENV_OVERRIDE, LOG_FILENAME
from exceptions import StartupError

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def log_path(env=None) -> str:
    env = os.environ if env is None else env
    override = env.get(LOG_ENV_OVERRIDE)
    if override:
        return override
    return os.path.join(config.home_dir(env), LOG_FILENAME)


def setup_logging(path=None, level=logging.INFO) -> logging.Handler:
    """ Send all log records to path (appending). Raises StartupError if it can't be opened. """
    path = path or log_path()
    try:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as e:
        raise StartupError(f"cannot open log file {path}: {e}") from e

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return handler
