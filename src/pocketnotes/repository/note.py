# SPDX-License-Identifier: MIT

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Optional

from pocketnotes import configuration
from pocketnotes.errors import NoteFormatError, StorageError
from pocketnotes.model.note import Note
from pocketnotes.model.save_result import SaveResult
from pocketnotes.storage.key_value import KeyValueStorage

logger = logging.getLogger(__name__)

NOTES_STORAGE_KEY = "notes"
CORRUPT_NOTES_STORAGE_KEY = "notes.corrupt"


def serialize_notes(notes: list[Note]) -> str:
    serializable_notes = [
        {
            "text": note["text"],
            "creationDateTime": note["creationDateTime"],
            "lastEditDateTime": note.get("lastEditDateTime"),
        }
        for note in notes
    ]
    return json.dumps(serializable_notes, ensure_ascii=False)


def corrupt_notes_storage_keys(keys: list[str]) -> list[str]:
    """Backup keys of unreadable notes values: notes.corrupt, notes.corrupt.1, ..."""
    prefix = f"{CORRUPT_NOTES_STORAGE_KEY}."
    return [
        key
        for key in keys
        if key == CORRUPT_NOTES_STORAGE_KEY
        or (key.startswith(prefix) and key[len(prefix) :].isdigit())
    ]


def _convert_note_for_deserialization(position: int, raw_note: Any) -> Note:
    if not isinstance(raw_note, dict):
        raise NoteFormatError(f"Note {position} is not an object")

    text = _text_field(raw_note.get("text")) or ""
    creation_date_time = _text_field(raw_note.get("creationDateTime")) or ""
    last_edit_date_time = _text_field(raw_note.get("lastEditDateTime"))

    if raw_note.get("text") is None or raw_note.get("creationDateTime") is None:
        logger.warning("Note %d is missing fields, filled with empty values", position)

    return {
        "text": text,
        "creationDateTime": creation_date_time,
        "lastEditDateTime": last_edit_date_time,
    }


def _text_field(value: Any) -> Optional[str]:
    # Non-string values are kept as their JSON text
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def deserialize_notes(raw_notes: str) -> list[Note]:
    """
    Parse the persisted notes value.

    Raises:
        NoteFormatError: If the value is not a JSON array of note objects

    Missing or null fields inside a note object are filled in rather than
    rejected.
    """
    if not isinstance(raw_notes, str):
        raise NoteFormatError("Persisted notes value is not a string")
    try:
        parsed = json.loads(raw_notes)
    except json.JSONDecodeError as e:
        raise NoteFormatError(f"Persisted notes value is not valid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise NoteFormatError("Persisted notes value is not an array")

    return [
        _convert_note_for_deserialization(position, raw_note)
        for position, raw_note in enumerate(parsed)
    ]


class NoteRepository:
    """
    Mirror of the note collection in the key-value storage.

    The whole collection is written under a single key on every save. Saves
    run on one background worker, so they complete in the order they were
    issued and never block the caller.
    """

    def __init__(self, storage: Optional[KeyValueStorage] = None) -> None:
        self._storage = storage
        self._executor: Optional[ThreadPoolExecutor] = None
        self._pending: list[Future[SaveResult]] = []

    @property
    def storage(self) -> KeyValueStorage:
        if self._storage is None:
            self._storage = KeyValueStorage(configuration.DATA_STORAGE_PATH)
        return self._storage

    @property
    def executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="pocketnotes-save"
            )
        return self._executor

    def load(self) -> list[Note]:
        """Read the persisted collection, or an empty one if absent or unreadable."""
        try:
            raw_notes = self.storage.get_item(NOTES_STORAGE_KEY)
        except StorageError:
            logger.exception("Error loading notes")
            return []

        if raw_notes is None:
            logger.debug("No notes stored yet")
            return []

        try:
            notes = deserialize_notes(raw_notes)
        except NoteFormatError:
            logger.exception("Error loading notes, starting with an empty list")
            self.__back_up_corrupt_value(raw_notes)
            return []

        logger.debug("Loaded %d notes", len(notes))
        return notes

    def __back_up_corrupt_value(self, raw_notes: Any) -> None:
        raw_notes = str(raw_notes)
        try:
            backup_keys = corrupt_notes_storage_keys(self.storage.get_all_keys())
            for key in backup_keys:
                if self.storage.get_item(key) == raw_notes:
                    logger.debug("Unreadable notes value already kept under %r", key)
                    return

            backup_key = CORRUPT_NOTES_STORAGE_KEY
            suffix = 0
            while backup_key in backup_keys:
                suffix += 1
                backup_key = f"{CORRUPT_NOTES_STORAGE_KEY}.{suffix}"

            self.storage.set_item(backup_key, raw_notes)
            logger.warning("Unreadable notes value kept under %r", backup_key)
        except StorageError:
            logger.exception("Error keeping a copy of the unreadable notes value")

    def __save_data(self, serialized_notes: str) -> SaveResult:
        try:
            self.storage.set_item(NOTES_STORAGE_KEY, serialized_notes)
        except StorageError as e:
            logger.exception("Error saving notes")
            return {"succeeded": False, "error": str(e)}
        return {"succeeded": True, "error": None}

    def save(self, notes: list[Note]) -> Future[SaveResult]:
        # Serialize now: later mutations of the caller's list must not leak in
        serialized_notes = serialize_notes(notes)
        future = self.executor.submit(self.__save_data, serialized_notes)
        self._pending = [f for f in self._pending if not f.done()]
        self._pending.append(future)
        return future

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for outstanding saves. Returns False if some are still running."""
        if not self._pending:
            return True
        _, not_done = wait(self._pending, timeout=timeout)
        self._pending = list(not_done)
        return len(not_done) == 0

    def close(self) -> None:
        self.flush()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None


NOTE_REPO = NoteRepository()
