
APP_NAME = "batcave"
RC_FILENAME = ".batcaverc"
LOG_FILENAME = ".batcave.log"
RC_ENV_OVERRIDE = "BATCAVE_RC"
LOG_ENV_OVERRIDE = "BATCAVE_LOG"

HISTORY_LIMIT = 1000
SLOW_COMMAND_SECONDS = 1.0

SHOW_SYSTEM_INFO = "SHOW_SYSTEM_INFO"

DEFAULT_RC = """\
# batcave shell configuration
# Lines of the form `alias NAME=VALUE` and `export NAME=VALUE` are loaded at startup.

# Aliases
alias ll='ls -la'
alias la='ls -a'
alias cls='clear'

# Environment
export PATH=$PATH:/usr/local/bin
export EDITOR=vim
export TERM=xterm-256color
"""
