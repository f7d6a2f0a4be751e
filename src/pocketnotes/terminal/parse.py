# SPDX-License-Identifier: MIT

import os
import re
import subprocess
import tempfile
from pathlib import Path
from typing import Optional

import typer

from pocketnotes.errors import EditorError

# Actions on the interactive screen, with whether they take a note number
SCREEN_ACTIONS: dict[str, bool] = {
    "w": False,
    "t": False,
    "p": True,
    "e": True,
    "d": True,
    "x": False,
    "s": False,
    "c": False,
    "q": False,
}

_SCREEN_COMMAND_P = re.compile(r"^\s*([a-z])\s*(-?\d+)?\s*$")


def parse_note_number(number: int) -> int:
    """
    Convert a note number as shown on screen (from 1) to a list position.

    Raises:
        typer.BadParameter: If the number is lower than 1
    """
    if number < 1:
        raise typer.BadParameter(f"Note numbers start at 1, got {number}")
    return number - 1


def parse_screen_command(command: str) -> tuple[str, Optional[int]]:
    """
    Parse one command typed on the interactive screen.

    Args:
        command: An action letter, optionally followed by a note number,
                 e.g. "w", "p 2" or "d3"

    Returns:
        Tuple of (action, list position or None)

    Raises:
        typer.BadParameter: If the action is unknown or the number is
            missing, unexpected or lower than 1
    """
    match = _SCREEN_COMMAND_P.match(command.lower())
    if not match:
        raise typer.BadParameter(f"Unknown command: '{command.strip()}'")

    action = match.group(1)
    number = match.group(2)

    if action not in SCREEN_ACTIONS:
        raise typer.BadParameter(f"Unknown command: '{action}'")

    takes_number = SCREEN_ACTIONS[action]
    if takes_number and number is None:
        raise typer.BadParameter(f"'{action}' needs a note number, e.g. '{action} 1'")
    if not takes_number and number is not None:
        raise typer.BadParameter(f"'{action}' does not take a note number")

    if number is None:
        return (action, None)
    return (action, parse_note_number(int(number)))


def open_editor_for_text(initial_text: Optional[str] = None) -> Optional[str]:
    """
    Open the user's preferred editor to write note text.
    Returns the edited text with trailing newlines removed, or None if empty.
    """
    editor = os.environ.get("EDITOR", "nano")

    with tempfile.NamedTemporaryFile(mode="w+", suffix=".txt") as tf:
        if initial_text is not None:
            tf.write(initial_text)
            tf.flush()

        try:
            subprocess.run([editor, tf.name], check=True)
        except (OSError, subprocess.CalledProcessError) as e:
            raise EditorError(f"Could not edit the note with {editor!r}: {e}") from e
        # Read by path: some editors replace the file instead of writing in place
        text = Path(tf.name).read_text()
        if not text.strip():
            return None
        # Remove trailing newlines but preserve internal empty lines
        return text.rstrip("\n")
