# SPDX-License-Identifier: MIT

import atexit

from pocketnotes.repository.configuration import CONFIGURATION_REPO
from pocketnotes.repository.note import NOTE_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    # Wait for saves still running on the background worker
    NOTE_REPO.close()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
