# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pocketnotes import configuration


def configuration_table(config: configuration.Configuration) -> Table:
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("timestamp_format", config["timestamp_format"])
    table.add_row("log_level", config["log_level"])
    table.add_row("log_file", config.get("log_file") or "None")
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("storage_file", str(configuration.DATA_STORAGE_PATH))
    return table


def settings_overlay(config: configuration.Configuration) -> Panel:
    """Static app information shown by the settings button."""
    return Panel(
        Group(
            Text("App Version", style="bold"),
            Text(configuration.APP_VERSION),
            Text(f"Made by {configuration.APP_AUTHOR}"),
            Text(""),
            configuration_table(config),
        ),
        title="Settings",
        subtitle="Close",
        border_style="cyan",
        box=box.DOUBLE,
    )
