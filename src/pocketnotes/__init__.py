# SPDX-License-Identifier: MIT

from pocketnotes.cleanup import register_cleanup
from pocketnotes.initialize import initialize
from pocketnotes.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
