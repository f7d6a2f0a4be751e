# SPDX-License-Identifier: MIT

import logging
from concurrent.futures import Future
from copy import deepcopy
from typing import Callable, Optional, TypeAlias

from pocketnotes.errors import NoteIndexError
from pocketnotes.model.note import Note
from pocketnotes.model.save_result import SaveResult
from pocketnotes.model.view_state import ViewState
from pocketnotes.repository.configuration import CONFIGURATION_REPO
from pocketnotes.repository.note import NOTE_REPO, NoteRepository
from pocketnotes.template.note import get_note_template
from pocketnotes.time import now_display_str

logger = logging.getLogger(__name__)

Clock: TypeAlias = Callable[[], str]
ConfirmCallback: TypeAlias = Callable[[str, str], bool]

DELETE_NOTE_TITLE = "Delete Note"
DELETE_NOTE_MESSAGE = "Are you sure you want to delete this note?"
PREVIEW_LINE_COUNT = 2


def render_preview_text(note: Note) -> str:
    """
    Render the timestamps and the first two lines of a note.

    Lines past the second are dropped without any ellipsis.
    """
    creation_date_time_text = f"Created: {note['creationDateTime']}"
    last_edit_date_time_text = (
        f"Last Edited: {note['lastEditDateTime']}"
        if note.get("lastEditDateTime")
        else ""
    )
    lines = note["text"].split("\n") if note["text"] else []
    first_lines = "\n".join(lines[:PREVIEW_LINE_COUNT])
    return f"{creation_date_time_text}\n{last_edit_date_time_text}\n\n{first_lines}"


def submit_label(state: ViewState) -> str:
    return "Update" if state["edit_target"] is not None else "Add"


class NotesController:
    """
    Maps user actions on the notes screen to note store mutations.

    Every action takes the current ViewState and returns the next one; the
    given state is never modified. The note list itself lives here and is
    persisted in full after each mutation.
    """

    def __init__(self, repository: NoteRepository, clock: Clock) -> None:
        self.repository = repository
        self.clock = clock
        self._notes: Optional[list[Note]] = None
        self.last_save: Optional[Future[SaveResult]] = None

    @property
    def notes(self) -> list[Note]:
        if self._notes is None:
            self._notes = self.repository.load()
        return self._notes

    def get_notes(self) -> list[Note]:
        return deepcopy(self.notes)

    def get_note(self, index: int) -> Note:
        self.__check_index(index)
        return deepcopy(self.notes[index])

    def __check_index(self, index: int) -> None:
        if not 0 <= index < len(self.notes):
            raise NoteIndexError(index, len(self.notes))

    def __save(self) -> None:
        self.last_save = self.repository.save(self.notes)

    def set_draft(self, state: ViewState, text: str) -> ViewState:
        new_state = deepcopy(state)
        new_state["draft"] = text
        return new_state

    def add_or_update_note(self, state: ViewState) -> ViewState:
        draft = state["draft"]
        if draft.strip() == "":
            return state

        edit_target = state["edit_target"]
        current_date_time = self.clock()

        if edit_target is not None:
            self.__check_index(edit_target)
            self.notes[edit_target] = {
                "text": draft,
                "creationDateTime": self.notes[edit_target]["creationDateTime"],
                "lastEditDateTime": current_date_time,
            }
            logger.debug("Updated note at position %d", edit_target)
        else:
            self.notes.append(get_note_template(draft, current_date_time))
            logger.debug("Added note at position %d", len(self.notes) - 1)

        self.__save()

        new_state = deepcopy(state)
        new_state["draft"] = ""
        new_state["edit_target"] = None
        return new_state

    def delete_note(
        self, state: ViewState, index: int, confirm: ConfirmCallback
    ) -> ViewState:
        self.__check_index(index)

        if not confirm(DELETE_NOTE_TITLE, DELETE_NOTE_MESSAGE):
            return state

        del self.notes[index]
        logger.debug("Deleted note at position %d", index)
        self.__save()

        new_state = deepcopy(state)
        new_state["edit_target"] = None
        return new_state

    def delete_selected_note(
        self, state: ViewState, confirm: ConfirmCallback
    ) -> ViewState:
        if state["edit_target"] is None:
            return state
        return self.delete_note(state, state["edit_target"], confirm)

    def open_note(self, state: ViewState, index: int, is_edit: bool) -> ViewState:
        self.__check_index(index)
        note = self.notes[index]

        new_state = deepcopy(state)
        if not is_edit:
            new_state["preview_text"] = render_preview_text(note)
            new_state["preview_visible"] = True
        else:
            new_state["draft"] = note["text"] or ""
            new_state["edit_target"] = index
        return new_state

    def close_preview(self, state: ViewState) -> ViewState:
        new_state = deepcopy(state)
        new_state["preview_text"] = ""
        new_state["preview_visible"] = False
        return new_state

    def open_settings(self, state: ViewState) -> ViewState:
        new_state = deepcopy(state)
        new_state["settings_visible"] = True
        return new_state

    def close_settings(self, state: ViewState) -> ViewState:
        new_state = deepcopy(state)
        new_state["settings_visible"] = False
        return new_state


def create_notes_controller(
    repository: NoteRepository = NOTE_REPO,
) -> NotesController:
    config = CONFIGURATION_REPO.get_config()
    timestamp_format = config["timestamp_format"]
    return NotesController(repository, lambda: now_display_str(timestamp_format))
