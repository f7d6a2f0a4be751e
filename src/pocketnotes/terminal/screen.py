# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional, TypeAlias

import typer
from rich.console import Console
from rich.prompt import Prompt

from pocketnotes.controller.notes import ConfirmCallback, NotesController
from pocketnotes.errors import EditorError, NoteIndexError
from pocketnotes.model.view_state import ViewState
from pocketnotes.repository.configuration import CONFIGURATION_REPO
from pocketnotes.template.view_state import get_view_state_template
from pocketnotes.terminal.parse import open_editor_for_text, parse_screen_command
from pocketnotes.terminal.prompt import confirm_delete
from pocketnotes.view.note import notes_screen

logger = logging.getLogger(__name__)

ReadCommand: TypeAlias = Callable[[Console, str], str]
EditText: TypeAlias = Callable[[Optional[str]], Optional[str]]


def read_command(console: Console, prompt: str) -> str:
    return Prompt.ask(prompt, console=console, default="", show_default=False)


def run_screen(
    controller: NotesController,
    console: Console,
    read: ReadCommand = read_command,
    edit_text: EditText = open_editor_for_text,
    confirm: ConfirmCallback = confirm_delete,
) -> ViewState:
    """
    Interactive single-screen loop. One command is handled at a time.

    Returns the view state the screen was left in.
    """
    config = CONFIGURATION_REPO.get_config()
    state = get_view_state_template()
    message: Optional[str] = None

    while True:
        if console.is_terminal:
            console.clear()
        notes_screen(controller.get_notes(), state, config, console, message)
        message = None

        # Overlays are dismiss-only
        if state["preview_visible"] or state["settings_visible"]:
            read(console, "Press Enter to close")
            state = controller.close_preview(state)
            state = controller.close_settings(state)
            continue

        command = read(console, ">")
        if command.strip() == "":
            continue

        try:
            action, index = parse_screen_command(command)
            if action == "q":
                logger.debug("Leaving the notes screen")
                return state
            state = _apply_action(
                controller, state, action, index, console, read, edit_text, confirm
            )
        except (typer.BadParameter, NoteIndexError, EditorError) as e:
            message = str(e)


def _apply_action(
    controller: NotesController,
    state: ViewState,
    action: str,
    index: Optional[int],
    console: Console,
    read: ReadCommand,
    edit_text: EditText,
    confirm: ConfirmCallback,
) -> ViewState:
    if action == "w":
        text = edit_text(state["draft"] or None)
        state = controller.set_draft(state, text or "")
        return controller.add_or_update_note(state)
    if action == "t":
        text = read(console, "Note")
        state = controller.set_draft(state, text)
        return controller.add_or_update_note(state)
    if action == "p" and index is not None:
        return controller.open_note(state, index, is_edit=False)
    if action == "e" and index is not None:
        return controller.open_note(state, index, is_edit=True)
    if action == "d" and index is not None:
        return controller.delete_note(state, index, confirm)
    if action == "x":
        return controller.delete_selected_note(state, confirm)
    if action == "s":
        return controller.open_settings(state)
    # "c" closes anything left open
    state = controller.close_preview(state)
    return controller.close_settings(state)
