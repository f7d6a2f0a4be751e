# SPDX-License-Identifier: MIT

from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console

from pocketnotes.controller.notes import create_notes_controller
from pocketnotes.errors import EditorError, NoteIndexError
from pocketnotes.repository.configuration import CONFIGURATION_REPO
from pocketnotes.template.view_state import get_view_state_template
from pocketnotes.terminal.parse import open_editor_for_text, parse_note_number
from pocketnotes.terminal.prompt import confirm_always, confirm_delete
from pocketnotes.terminal.screen import run_screen
from pocketnotes.view.header import header
from pocketnotes.view.note import notes_report, preview_overlay, single_note_report
from pocketnotes.view.settings import settings_overlay

NoteNumber = Annotated[int, typer.Argument(help="note number as shown in the list")]


def _exit_with_error(error: Exception) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def screen() -> None:
    """Open the interactive notes screen."""
    run_screen(create_notes_controller(), Console())


def list_notes() -> None:
    """List all notes with their first line."""
    controller = create_notes_controller()
    notes_report(controller.get_notes(), Console())


def add(
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="note text; opens $EDITOR when omitted"),
    ] = None,
) -> None:
    """Add a new note."""
    controller = create_notes_controller()

    if text is None:
        try:
            text = open_editor_for_text()
        except EditorError as e:
            _exit_with_error(e)
        if text is None:
            typer.echo("Note creation cancelled (no text provided)")
            return

    state = controller.set_draft(get_view_state_template(), text)
    before = len(controller.notes)
    controller.add_or_update_note(state)
    if len(controller.notes) == before:
        typer.echo("Nothing to add: the note text is empty")
        return

    console = Console()
    header(console, "note added")
    index = len(controller.notes) - 1
    single_note_report(index, controller.get_note(index), console)


def edit(
    number: NoteNumber,
    text: Annotated[
        Optional[str],
        typer.Option("--text", "-t", help="new note text; opens $EDITOR when omitted"),
    ] = None,
) -> None:
    """Replace the text of a note."""
    controller = create_notes_controller()
    index = parse_note_number(number)

    try:
        state = controller.open_note(get_view_state_template(), index, is_edit=True)
    except NoteIndexError as e:
        _exit_with_error(e)

    if text is None:
        try:
            text = open_editor_for_text(state["draft"])
        except EditorError as e:
            _exit_with_error(e)
        if text is None:
            typer.echo("Text editing cancelled")
            return

    state = controller.set_draft(state, text)
    state = controller.add_or_update_note(state)
    if state["edit_target"] is not None:
        typer.echo("Nothing to update: the note text is empty")
        return

    console = Console()
    header(console, "note updated")
    single_note_report(index, controller.get_note(index), console)


def delete(
    number: NoteNumber,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete a note after confirmation."""
    controller = create_notes_controller()
    index = parse_note_number(number)
    confirm = confirm_always if yes else confirm_delete

    before = len(controller.notes)
    try:
        controller.delete_note(get_view_state_template(), index, confirm)
    except NoteIndexError as e:
        _exit_with_error(e)

    if len(controller.notes) == before:
        typer.echo("Delete cancelled")
        return
    typer.echo(f"Deleted note #{number}")


def preview(number: NoteNumber) -> None:
    """Show the preview of a note."""
    controller = create_notes_controller()
    index = parse_note_number(number)

    try:
        state = controller.open_note(get_view_state_template(), index, is_edit=False)
    except NoteIndexError as e:
        _exit_with_error(e)

    Console().print(preview_overlay(state["preview_text"]))


def settings() -> None:
    """Show app information."""
    Console().print(settings_overlay(CONFIGURATION_REPO.get_config()))
