# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from pocketnotes.view.state import get_show_header

APP_TITLE = "Notes App"


def header(console: Console, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    console.print(Padding(f"[bold dark_orange]{APP_TITLE}[/bold dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
