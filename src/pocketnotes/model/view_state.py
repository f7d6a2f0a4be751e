# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class ViewState(TypedDict):
    draft: str
    edit_target: Optional[int]
    preview_visible: bool
    preview_text: str
    settings_visible: bool
