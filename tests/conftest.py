"""
Pytest Configuration and Fixtures

Shared fixtures: temporary key-value storage, a controllable clock, and an
isolated application environment (config and data directories under
``tmp_path``) for the command-line tests.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from pocketnotes import configuration
from pocketnotes.controller.notes import NotesController
from pocketnotes.model.view_state import ViewState
from pocketnotes.repository.configuration import CONFIGURATION_REPO
from pocketnotes.repository.note import NOTE_REPO, NoteRepository
from pocketnotes.storage.key_value import KeyValueStorage
from pocketnotes.template.view_state import get_view_state_template

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FakeClock:
    """Clock returning a fixed timestamp string that tests can move forward."""

    def __init__(self, now: str = "10/19/2026, 9:00:00 AM") -> None:
        self.now = now

    def __call__(self) -> str:
        return self.now


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage(tmp_path: Path) -> KeyValueStorage:
    """Key-value storage backed by a file in a fresh temporary directory."""
    return KeyValueStorage(tmp_path / "storage.yaml")


@pytest.fixture
def repository(storage: KeyValueStorage) -> Generator[NoteRepository, None, None]:
    repo = NoteRepository(storage)
    yield repo
    repo.close()


@pytest.fixture
def controller(repository: NoteRepository, clock: FakeClock) -> NotesController:
    return NotesController(repository, clock)


@pytest.fixture
def state() -> ViewState:
    return get_view_state_template()


@pytest.fixture
def app_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """
    Point the application at temporary config and data directories.

    Yields the data directory. Logging setup is skipped so pytest keeps
    capturing log records.
    """
    import importlib

    initialize_module = importlib.import_module("pocketnotes.initialize")

    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_STORAGE_PATH", data_path / "storage.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(NOTE_REPO, "_storage", None)
    monkeypatch.setattr(initialize_module, "setup_logging", lambda *args: None)

    initialize_module.initialize()
    yield data_path
    NOTE_REPO.flush()
