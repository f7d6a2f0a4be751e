# SPDX-License-Identifier: MIT

from pocketnotes.model.view_state import ViewState


def get_view_state_template() -> ViewState:
    return {
        "draft": "",
        "edit_target": None,
        "preview_visible": False,
        "preview_text": "",
        "settings_visible": False,
    }
