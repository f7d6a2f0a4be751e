# SPDX-License-Identifier: MIT

from rich.prompt import Confirm


def confirm_delete(title: str, message: str) -> bool:
    """Blocking Cancel/OK prompt. Defaults to Cancel."""
    return Confirm.ask(f"[bold]{title}[/bold]\n{message}", default=False)


def confirm_always(title: str, message: str) -> bool:
    return True
