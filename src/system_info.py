""" A short summary of the host, shown at startup and by `info`. """
import datetime
import getpass
import os
import platform


def _user(env) -> str:
    name = env.get("USER") or env.get("USERNAME")
    if name:
        return name
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "Unknown"


def system_info(env=None) -> str:
    env = os.environ if env is None else env
    rows = [
        ("User", _user(env)),
        ("Host", platform.node() or "Unknown"),
        ("Time", datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")),
        ("System Name", platform.system() or "Unknown"),
        ("Kernel Version", platform.release() or "Unknown"),
        ("Python", platform.python_version()),
        ("Number of CPUs", os.cpu_count() or "Unknown"),
    ]
    lines = ["System Overview"]
    lines += [f"{label:<20}: {value}" for label, value in rows]
    return "\n".join(lines)
