""" Registry of builtin commands. """
import logging
import os
import shutil
import subprocess
import sys

import config
import help_texts
import system_info
from constants import APP_NAME

logger = logging.getLogger(__name__)

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


def _change_directory(target) -> tuple[bool, str]:
    try:
        os.chdir(os.path.expanduser(target))
    except OSError as e:
        logger.error("Failed to change directory to %s: %s", target, e)
        return False, f"Failed to change directory: {e}"
    return True, f"Changed to directory: {target}"


@builtin("cd")
def builtin_cd(args, state):
    if not args:
        logger.error("cd: missing argument")
        return "cd: missing argument"
    return _change_directory(args[0])[1]


@builtin("ls")
def builtin_ls(args, state):
    path = args[0] if args else "."
    try:
        with os.scandir(os.path.expanduser(path)) as it:
            entries = sorted(it, key=lambda e: e.name)
            names = []
            for entry in entries:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                names.append(entry.name + "/" if is_dir else entry.name)
    except OSError as e:
        logger.error("Failed to list directory %s: %s", path, e)
        return f"Failed to list directory: {e}"
    return "  ".join(names)


@builtin("mkdir")
def builtin_mkdir(args, state):
    if not args:
        logger.error("mkdir: missing argument")
        return "mkdir: missing argument"
    path = args[0]
    try:
        os.mkdir(path)
    except OSError as e:
        logger.error("Failed to create directory %s: %s", path, e)
        return f"Failed to create directory: {e}"
    return f"Directory created: {path}"


@builtin("rm")
def builtin_rm(args, state):
    """
    rm PATH
      Directories are removed recursively, anything else is unlinked.
    """
    if not args:
        logger.error("rm: missing argument")
        return "rm: missing argument"
    path = args[0]

    # don't follow a symlink to a directory into rmtree
    if os.path.isdir(path) and not os.path.islink(path):
        try:
            shutil.rmtree(path)
        except OSError as e:
            logger.error("Failed to remove directory %s: %s", path, e)
            return f"Failed to remove directory: {e}"
        return f"Directory removed: {path}"

    try:
        os.remove(path)
    except OSError as e:
        logger.error("Failed to remove file %s: %s", path, e)
        return f"Failed to remove file: {e}"
    return f"File removed: {path}"


@builtin("touch")
def builtin_touch(args, state):
    if not args:
        logger.error("touch: missing argument")
        return "touch: missing argument"
    path = args[0]
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as e:
        logger.error("Failed to create file %s: %s", path, e)
        return f"Failed to create file: {e}"
    return f"File created: {path}"


@builtin("pwd")
def builtin_pwd(args, state):
    try:
        return os.getcwd()
    except OSError as e:
        logger.error("Failed to get current directory: %s", e)
        return f"Failed to get current directory: {e}"


@builtin("echo")
def builtin_echo(args, state):
    return " ".join(state.interpolate(arg) for arg in args)


@builtin("alias")
def builtin_alias(args, state):
    """
    alias              list aliases as name='command'
    alias name=value   define an alias
    """
    if not args:
        return "\n".join(f"{name}='{command}'" for name, command in sorted(state.aliases.items()))

    name, sep, command = " ".join(args).partition("=")
    name = name.strip()
    if not sep or not name:
        logger.error("alias: malformed definition: %s", " ".join(args))
        return "Usage: alias name=command"

    command = config.strip_quotes(command.strip())
    state.add_alias(name, command)
    return f"Added alias: {name}='{command}'"


@builtin("export")
def builtin_export(args, state):
    """
    export NAME=value [NAME=value ...]
    Arguments without '=' are ignored.
    """
    if not args:
        logger.error("export: missing NAME=value")
        return "Usage: export NAME=value"

    for arg in args:
        name, sep, value = arg.partition("=")
        if sep and name:
            state.set_env(name, value)
    return ""


@builtin("env")
def builtin_env(args, state):
    return "\n".join(f"{k}={v}" for k, v in sorted(state.env.items()))


@builtin("pushd")
def builtin_pushd(args, state):
    if not args:
        logger.error("pushd: missing directory argument")
        return "pushd: missing directory argument"
    try:
        current = os.getcwd()
    except OSError as e:
        logger.error("pushd: cannot read current directory: %s", e)
        return f"pushd: {e}"
    state.push_dir(current)
    ok, result = _change_directory(args[0])
    if not ok:
        state.pop_dir()
    return result


@builtin("popd")
def builtin_popd(args, state):
    directory = state.pop_dir()
    if directory is None:
        logger.error("popd: directory stack empty")
        return "popd: directory stack empty"
    return _change_directory(directory)[1]


@builtin("history")
def builtin_history(args, state):
    return "\n".join(f"{i:5} {line}" for i, line in enumerate(state.history, 1))


@builtin("systeminfo")
def builtin_systeminfo(args, state):
    option = args[0] if args else None
    if option == "on":
        state.set_show_system_info(True)
        return "System info display enabled"
    if option == "off":
        state.set_show_system_info(False)
        return "System info display disabled"
    if option == "status":
        status = "enabled" if state.get_show_system_info() else "disabled"
        return f"System info display is {status}"
    logger.error("systeminfo: unrecognized option %r", option)
    return "Usage: systeminfo [on|off|status] - Configure system information display"


@builtin("info")
def builtin_info(args, state):
    return system_info.system_info(state.env)


@builtin("help")
def builtin_help(args, state):
    if not args:
        return help_texts.general_help()
    return help_texts.command_help(args[0])


@builtin("init")
def builtin_init(args, state):
    path = state.rc_path or config.rc_path(state.env)
    try:
        created = config.ensure_rc(path)
    except OSError as e:
        logger.error("Failed to create %s: %s", path, e)
        return f"Failed to create configuration file: {e}"
    if created:
        return f"Configuration created: {path}"
    return f"Configuration already exists: {path}"


def _shell_executable() -> str:
    found = shutil.which(APP_NAME)
    if found:
        return found
    return os.path.abspath(sys.argv[0]) if sys.argv and sys.argv[0] else APP_NAME


@builtin("set-default")
def builtin_set_default(args, state):
    shell_path = _shell_executable()

    try:
        with open("/etc/shells", "r", encoding="utf-8") as f:
            shells = f.read()
    except OSError:
        shells = ""

    try:
        if shell_path not in shells.splitlines():
            completed = subprocess.run(
                ["sudo", "sh", "-c", f"echo '{shell_path}' >> /etc/shells"],
            )
            if completed.returncode != 0:
                logger.error("Adding %s to /etc/shells exited with %d", shell_path, completed.returncode)
                return "Failed to add batcave to /etc/shells"

        completed = subprocess.run(["chsh", "-s", shell_path])
    except OSError as e:
        logger.error("Failed to set default shell: %s", e)
        return f"Failed to set batcave as default shell: {e}"

    if completed.returncode != 0:
        logger.error("chsh -s %s exited with %d", shell_path, completed.returncode)
        return f"Failed to set batcave as default shell: chsh exited with {completed.returncode}"
    return "batcave set as default shell. Please log out and back in for changes to take effect"


@builtin("remove-default")
def builtin_remove_default(args, state):
    try:
        completed = subprocess.run(["chsh", "-s", "/bin/bash"])
    except OSError as e:
        logger.error("Failed to reset default shell: %s", e)
        return f"Failed to reset default shell: {e}"

    if completed.returncode != 0:
        logger.error("chsh -s /bin/bash exited with %d", completed.returncode)
        return f"Failed to reset default shell: chsh exited with {completed.returncode}"
    return "Default shell reset to bash. Please log out and back in for changes to take effect"


BUILTIN_NAMES = tuple(sorted(BUILTINS))
