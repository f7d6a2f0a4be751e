# SPDX-License-Identifier: MIT


class PocketNotesError(Exception):
    """Base class for errors raised by pocketnotes."""

    pass


class StorageError(PocketNotesError):
    """Raised when the key-value storage file cannot be read or written."""

    pass


class NoteFormatError(PocketNotesError, ValueError):
    """Raised when a persisted notes value is not a valid note array."""

    pass


class NoteIndexError(PocketNotesError, IndexError):
    """Raised when a note position does not exist in the collection."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        # Shown to the user, who counts notes from 1
        super().__init__(f"No note #{index + 1} (there are {count} notes)")


class EditorError(PocketNotesError):
    """Raised when the external text editor cannot be run or exits with an error."""

    pass
