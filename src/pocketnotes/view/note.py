# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pocketnotes.configuration import Configuration
from pocketnotes.controller.notes import render_preview_text, submit_label
from pocketnotes.model.note import Note
from pocketnotes.model.view_state import ViewState
from pocketnotes.view.header import header
from pocketnotes.view.settings import settings_overlay

DRAFT_PLACEHOLDER = "Type your note here..."
SCREEN_ACTIONS = (
    "[w] write  [t] type  [p N] preview  [e N] edit  [d N] delete  "
    "[x] delete selected  [s] settings  [c] close  [q] quit"
)


def note_number(index: int) -> int:
    """Position in the list shown to the user, counted from 1."""
    return index + 1


def note_card(index: int, note: Note, selected: bool = False) -> Panel:
    border_style = "yellow" if selected else "blue"
    return Panel(
        Text(render_preview_text(note)),
        title=f"#{note_number(index)}",
        title_align="left",
        subtitle="Delete | Edit",
        subtitle_align="right",
        border_style=border_style,
        box=box.ROUNDED,
    )


def input_area(state: ViewState) -> Panel:
    if state["draft"] != "":
        body = Text(state["draft"])
    else:
        body = Text(DRAFT_PLACEHOLDER, style="dim italic")
    return Panel(body, title=f"[bold]{submit_label(state)}[/bold]", title_align="right")


def preview_overlay(preview_text: str) -> Panel:
    return Panel(
        Text(preview_text),
        title="Preview",
        subtitle="Close",
        border_style="magenta",
        box=box.DOUBLE,
    )


def notes_screen(
    notes: list[Note],
    state: ViewState,
    config: Configuration,
    console: Console,
    message: Optional[str] = None,
) -> None:
    """Render the whole notes screen for the given state."""
    header(console)

    if len(notes) == 0:
        console.print(Text(" No notes yet.", style="dim"))
    for index, note in enumerate(notes):
        console.print(note_card(index, note, selected=state["edit_target"] == index))

    console.print(input_area(state))
    if state["edit_target"] is not None:
        console.print(
            Text.assemble(
                ("Delete", "red"),
                (f" [x] note #{note_number(state['edit_target'])}", "dim"),
            )
        )

    if state["preview_visible"]:
        console.print(preview_overlay(state["preview_text"]))
    if state["settings_visible"]:
        console.print(settings_overlay(config))

    if message is not None:
        console.print(Text(message, style="red"))
    console.print(Text(SCREEN_ACTIONS, style="dim"))


def notes_report(notes: list[Note], console: Console) -> None:
    header(console, "notes")

    notes_table = Table(box=box.SIMPLE)
    for column in ["#", "created", "last_edited", "first_line"]:
        notes_table.add_column(column)

    for index, note in enumerate(notes):
        first_line = ""
        if note["text"] != "":
            first_line = note["text"].split("\n")[0].strip()
        notes_table.add_row(
            str(note_number(index)),
            note["creationDateTime"],
            note["lastEditDateTime"] or "",
            Text(first_line),
        )

    console.print(notes_table)


def single_note_report(index: int, note: Note, console: Console) -> None:
    console.print(note_card(index, note))
