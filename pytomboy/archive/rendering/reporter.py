from __future__ import annotations

from typing import TextIO

from ..models import Note

BLOCK_TEMPLATE = "Title: {title}\n{body}\n\n"


def format_note(note: Note) -> str:
    return BLOCK_TEMPLATE.format(title=note.title, body=note.text)


def write_note(sink: TextIO, note: Note) -> None:
    """Write one note block; the body markup is passed through untouched."""
    sink.write(format_note(note))
