import sys

from doomfire.firegui import main as run_window
from doomfire.logger_setup import setup_logging


def main():
    setup_logging()
    sys.exit(run_window(sys.argv))


if __name__ == "__main__":
    main()
