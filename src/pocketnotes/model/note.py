# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


# Keys match the persisted JSON field names.
class Note(TypedDict):
    text: str
    creationDateTime: str
    lastEditDateTime: Optional[str]
