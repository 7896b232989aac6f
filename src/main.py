""" Entry point for the batcave shell. """
import argparse
import sys

from config import rc_path
from exceptions import StartupError
from shell import Shell
from shell_logging import setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(prog="batcave", description="The Batcave interactive shell")
    parser.add_argument("--rc", metavar="FILE", help="configuration file (default: ~/.batcaverc)")
    parser.add_argument("--log", metavar="FILE", help="log file (default: ~/.batcave.log)")
    args = parser.parse_args(argv)

    try:
        setup_logging(args.log)
        sh = Shell(rc_path=args.rc or rc_path())
        sh.start()
    except StartupError as e:
        print(f"batcave: {e}", file=sys.stderr)
        return 1
    return sh.run()


if __name__ == "__main__":
    sys.exit(main())
