""" Help text for the builtin commands. """

# (usage, description, examples)
COMMAND_HELP = {
    "pushd": ("pushd <directory>", "Push current directory to stack and change to new directory",
              ["pushd /path/to/dir"]),
    "popd": ("popd", "Pop directory from stack and change to it", ["popd"]),
    "history": ("history", "Display command history", ["history"]),
    "systeminfo": ("systeminfo [on|off|status]", "Configure system information display on startup",
                   ["systeminfo on", "systeminfo off", "systeminfo status"]),
    "echo": ("echo [text...]", "Display text or variable content",
             ["echo Hello, World!", "echo $USER is using batcave"]),
    "pwd": ("pwd", "Print current working directory path", ["pwd"]),
    "cd": ("cd <directory>", "Change current directory", ["cd /home/user", "cd ..", "cd ~"]),
    "ls": ("ls [directory]", "List directory contents, directories end with '/'", ["ls", "ls /home"]),
    "mkdir": ("mkdir <directory>", "Create a new directory", ["mkdir new_folder"]),
    "rm": ("rm <path>", "Remove a file, or a directory and everything in it", ["rm file.txt", "rm directory"]),
    "touch": ("touch <filename>", "Create an empty file, truncating an existing one", ["touch newfile.txt"]),
    "alias": ("alias [name=value]", "Create command aliases or show existing ones",
              ["alias ll='ls -la'", "alias"]),
    "export": ("export NAME=value...", "Set environment variables",
               ["export PATH=$PATH:/new/path", "export EDITOR=vim"]),
    "env": ("env", "Display all environment variables", ["env"]),
    "init": ("init", "Create the default .batcaverc configuration file", ["init"]),
    "set-default": ("set-default", "Set batcave as your default shell", ["set-default"]),
    "remove-default": ("remove-default", "Remove batcave as default shell (revert to bash)", ["remove-default"]),
    "info": ("info", "Display system information", ["info"]),
    "help": ("help [command]", "Display help information", ["help", "help cd"]),
    "exit": ("exit", "Exit the shell", ["exit"]),
}

SECTIONS = [
    ("Directory Navigation", ["cd", "pwd", "pushd", "popd"]),
    ("File Operations", ["ls", "mkdir", "rm", "touch"]),
    ("Environment & Aliases", ["alias", "export", "env", "echo"]),
    ("History", ["history"]),
    ("Shell Management", ["init", "systeminfo", "set-default", "remove-default", "exit"]),
    ("System & Help", ["info", "help"]),
]


def general_help() -> str:
    lines = ["Available Commands", "=================="]
    for title, names in SECTIONS:
        lines.append("")
        lines.append(f"{title}:")
        for name in names:
            lines.append(f"  {name:<15} - {COMMAND_HELP[name][1]}")
    lines += [
        "",
        "Anything else is run as an external program.",
        "",
        "Usage: help <command> for specific command details",
    ]
    return "\n".join(lines)


def command_help(name: str) -> str:
    entry = COMMAND_HELP.get(name)
    if entry is None:
        return f"No help available for '{name}'\nType 'help' for a list of commands."
    usage, description, examples = entry
    label = "Example:" if len(examples) == 1 else "Examples:"
    body = "\n".join(f"  {ex}" for ex in examples)
    return f"{usage}\n{description}\n\n{label}\n{body}"
