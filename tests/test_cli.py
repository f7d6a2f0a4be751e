"""
Command-Line Tests

Runs the one-shot typer commands against an isolated data directory and
checks the persisted notes after each command.
"""

from pathlib import Path
from typing import Optional

import pendulum
import pytest
from click.testing import Result
from typer.testing import CliRunner

from pocketnotes import configuration
from pocketnotes.errors import EditorError
from pocketnotes.model.note import Note
from pocketnotes.repository.note import NOTE_REPO, NOTES_STORAGE_KEY, deserialize_notes
from pocketnotes.storage.key_value import KeyValueStorage
from pocketnotes.terminal import note as note_commands
from pocketnotes.terminal.app import app

runner = CliRunner()

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _invoke(args: list[str], input: Optional[str] = None) -> Result:
    result = runner.invoke(app, args, input=input)
    # Each command is one process in real use; wait for its save as exit would
    assert NOTE_REPO.flush(timeout=5)
    return result


def _persisted() -> list[Note]:
    raw = KeyValueStorage(configuration.DATA_STORAGE_PATH).get_item(NOTES_STORAGE_KEY)
    return deserialize_notes(raw) if raw is not None else []


@pytest.fixture
def two_notes(app_environment: Path) -> None:
    _invoke(["add", "--text", "A"])
    _invoke(["add", "--text", "B"])


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestAdd:
    """Tests for the add command."""

    def test_add_with_text(self, app_environment: Path) -> None:
        result = _invoke(["add", "--text", "Hello"])

        assert result.exit_code == 0, result.output
        assert "Hello" in result.output
        notes = _persisted()
        assert [n["text"] for n in notes] == ["Hello"]
        assert notes[0]["lastEditDateTime"] is None

    def test_alias(self, app_environment: Path) -> None:
        result = _invoke(["a", "-t", "Hello"])

        assert result.exit_code == 0, result.output
        assert len(_persisted()) == 1

    def test_blank_text_adds_nothing(self, app_environment: Path) -> None:
        result = _invoke(["add", "--text", "   "])

        assert result.exit_code == 0
        assert "Nothing to add" in result.output
        assert _persisted() == []

    def test_add_from_editor(
        self, app_environment: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(note_commands, "open_editor_for_text", lambda *args: "from editor")

        result = _invoke(["add"])

        assert result.exit_code == 0, result.output
        assert [n["text"] for n in _persisted()] == ["from editor"]

    def test_empty_editor_cancels(
        self, app_environment: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(note_commands, "open_editor_for_text", lambda *args: None)

        result = _invoke(["add"])

        assert "cancelled" in result.output
        assert _persisted() == []

    def test_editor_failure_exits_with_error(
        self, app_environment: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def broken_editor(*args: object) -> None:
            raise EditorError("Could not edit the note with 'vi'")

        monkeypatch.setattr(note_commands, "open_editor_for_text", broken_editor)

        result = _invoke(["add"])

        assert result.exit_code == 1
        assert _persisted() == []

    def test_timestamp_format_from_config(self, app_environment: Path) -> None:
        assert _invoke(["config", "set", "--timestamp-format", "YYYY"]).exit_code == 0

        _invoke(["add", "--text", "Hello"])

        assert _persisted()[0]["creationDateTime"] == str(pendulum.now("local").year)


class TestEdit:
    """Tests for the edit command."""

    def test_edit_with_text(self, two_notes: None) -> None:
        before = _persisted()

        result = _invoke(["edit", "1", "--text", "A2"])

        assert result.exit_code == 0, result.output
        after = _persisted()
        assert [n["text"] for n in after] == ["A2", "B"]
        assert after[0]["creationDateTime"] == before[0]["creationDateTime"]
        assert after[0]["lastEditDateTime"] is not None
        assert after[1] == before[1]

    def test_edit_missing_note(self, two_notes: None) -> None:
        result = _invoke(["edit", "5", "--text", "x"])

        assert result.exit_code == 1
        assert [n["text"] for n in _persisted()] == ["A", "B"]

    def test_edit_number_below_one(self, two_notes: None) -> None:
        result = _invoke(["edit", "0", "--text", "x"])

        assert result.exit_code != 0


class TestDelete:
    """Tests for the delete command."""

    def test_cancel(self, two_notes: None) -> None:
        result = _invoke(["delete", "1"], input="n\n")

        assert "Delete cancelled" in result.output
        assert [n["text"] for n in _persisted()] == ["A", "B"]

    def test_confirm(self, two_notes: None) -> None:
        result = _invoke(["delete", "1"], input="y\n")

        assert result.exit_code == 0, result.output
        assert "Delete Note" in result.output
        assert [n["text"] for n in _persisted()] == ["B"]

    def test_yes_skips_prompt(self, two_notes: None) -> None:
        result = _invoke(["delete", "2", "--yes"])

        assert result.exit_code == 0, result.output
        assert [n["text"] for n in _persisted()] == ["A"]

    def test_missing_note(self, two_notes: None) -> None:
        result = _invoke(["delete", "3", "--yes"])

        assert result.exit_code == 1
        assert len(_persisted()) == 2


class TestReadOnlyCommands:
    """Tests for list, preview and settings."""

    def test_list(self, two_notes: None) -> None:
        result = _invoke(["list"])

        assert result.exit_code == 0, result.output
        assert "A" in result.output
        assert "B" in result.output

    def test_preview(self, app_environment: Path) -> None:
        _invoke(["add", "--text", "line1\nline2\nline3"])

        result = _invoke(["preview", "1"])

        assert result.exit_code == 0, result.output
        assert "Created:" in result.output
        assert "line2" in result.output
        assert "line3" not in result.output

    def test_settings(self, app_environment: Path) -> None:
        result = _invoke(["settings"])

        assert result.exit_code == 0, result.output
        assert configuration.APP_VERSION in result.output
        assert configuration.APP_AUTHOR in result.output


class TestConfig:
    """Tests for the config commands."""

    def test_view(self, app_environment: Path) -> None:
        result = _invoke(["config", "view"])

        assert result.exit_code == 0, result.output
        assert "timestamp_format" in result.output

    def test_rejects_unknown_log_level(self, app_environment: Path) -> None:
        result = _invoke(["config", "set", "--log-level", "chatty"])

        assert result.exit_code == 2
