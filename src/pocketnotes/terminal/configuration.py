# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from pocketnotes.repository.configuration import CONFIGURATION_REPO
from pocketnotes.terminal.custom_typer import AliasedTyperGroup
from pocketnotes.view.settings import configuration_table

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(configuration_table(config))

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="directory holding the notes storage file"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="use the default data directory"),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="show the app header"),
    ] = None,
    timestamp_format: Annotated[
        Optional[str],
        typer.Option(
            "--timestamp-format",
            help="pendulum format for note timestamps, e.g. 'YYYY-MM-DD HH:mm'",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=f"one of {', '.join(LOG_LEVELS)}"),
    ] = None,
    log_file: Annotated[
        Optional[str], typer.Option("--log-file", help="write logs to this file")
    ] = None,
    remove_log_file: Annotated[
        bool, typer.Option("--remove-log-file", help="log to the terminal again")
    ] = False,
) -> None:
    """Update configuration settings."""
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )
    if timestamp_format is not None and timestamp_format.strip() == "":
        raise typer.BadParameter(
            "Timestamp format cannot be empty", param_hint="--timestamp-format"
        )

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        timestamp_format=timestamp_format,
        log_level=log_level,
        log_file=log_file,
        remove_log_file=remove_log_file,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()
    console = Console()
    console.print(configuration_table(config))
    console.print(
        f"Timestamp example: {pendulum.now('local').format(config['timestamp_format'])}"
    )
