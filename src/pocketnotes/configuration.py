# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "pocketnotes"
APP_VERSION = "2.0"
APP_AUTHOR = "Sarvesh Sonkusre"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_STORAGE_PATH: Path = DATA_PATH / "storage.yaml"

# Shape of a locale date-time string, e.g. "10/19/2026, 3:04:05 PM"
DEFAULT_TIMESTAMP_FORMAT = "M/D/YYYY, h:mm:ss A"
DEFAULT_LOG_LEVEL = "WARNING"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    timestamp_format: str
    log_level: str
    log_file: NotRequired[Optional[str]]


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "timestamp_format": DEFAULT_TIMESTAMP_FORMAT,
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the note
    store touches its storage file.
    """
    global DATA_PATH, DATA_STORAGE_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting).expanduser()
        DATA_STORAGE_PATH = DATA_PATH / "storage.yaml"
