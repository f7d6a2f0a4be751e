# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class SaveResult(TypedDict):
    succeeded: bool
    error: Optional[str]
