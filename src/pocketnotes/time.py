# SPDX-License-Identifier: MIT

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def datetime_to_display_str(datetime: pendulum.DateTime, format: str) -> str:
    return datetime.in_tz("local").format(format)


def now_display_str(format: str) -> str:
    """Current local time rendered with a pendulum format string."""
    return datetime_to_display_str(now_local(), format)
