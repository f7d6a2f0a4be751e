# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from pocketnotes.terminal import configuration, note
from pocketnotes.terminal.custom_typer import AliasedTyperGroup
from pocketnotes.view import state as view_state

app = typer.Typer(
    cls=AliasedTyperGroup,
    help="Pocket Notes - create, edit, preview and delete notes",
    invoke_without_command=True,
)
app.add_typer(configuration.app, name="config, c", help="View or change settings")
app.command(name="screen")(note.screen)
app.command(name="list, ls")(note.list_notes)
app.command(name="add, a")(note.add)
app.command(name="edit, e", no_args_is_help=True)(note.edit)
app.command(name="preview, p", no_args_is_help=True)(note.preview)
app.command(name="delete, d", no_args_is_help=True)(note.delete)
app.command(name="settings, s")(note.settings)


@app.callback()
def main_callback(
    ctx: typer.Context,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress the app header",
        ),
    ] = False,
) -> None:
    """
    Pocket Notes - create, edit, preview and delete notes

    Runs the interactive screen when no command is given.
    """
    if no_header:
        view_state.set_show_header(False)
    if ctx.invoked_subcommand is None:
        note.screen()


def run() -> None:
    app()
