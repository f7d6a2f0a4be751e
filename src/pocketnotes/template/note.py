# SPDX-License-Identifier: MIT

from pocketnotes.model.note import Note


def get_note_template(text: str, creation_date_time: str) -> Note:
    return {
        "text": text,
        "creationDateTime": creation_date_time,
        "lastEditDateTime": None,
    }
