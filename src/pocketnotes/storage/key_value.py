# SPDX-License-Identifier: MIT

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

import yaml
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from pocketnotes.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage:
    """
    String key-value store kept in a single YAML mapping file.

    Every write rewrites the whole file; a missing file is an empty store.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def __read_items(self) -> dict[str, str]:
        if not self.path.is_file():
            return {}
        try:
            items = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, yaml.YAMLError) as e:
            raise StorageError(f"Unable to read {self.path}: {e}") from e

        if items is None:
            return {}
        if not isinstance(items, dict):
            raise StorageError(f"{self.path} does not contain a key-value mapping")
        return items

    def __write_items(self, items: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Replace atomically so a failed write never leaves a half file
            fd, temp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(dump(items, Dumper=Dumper, allow_unicode=True))
                os.replace(temp_name, self.path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Unable to write {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        return self.__read_items().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self.__read_items()
        items[key] = value
        self.__write_items(items)
        logger.debug("Stored %d characters under %r", len(value), key)

    def remove_item(self, key: str) -> None:
        items = self.__read_items()
        if key in items:
            del items[key]
            self.__write_items(items)

    def get_all_keys(self) -> list[str]:
        return list(self.__read_items().keys())
