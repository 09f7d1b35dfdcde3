"""Locate note files inside an archive."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pytomboy.exceptions import InvalidNoteIdError

from .models import NoteEntry

NOTE_SUFFIX = ".note"

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


def validate_note_id(note_id: str) -> str:
    """Return ``note_id`` unchanged if it is safe to use as one path segment."""
    if note_id in ("", ".", "..") or any(c in note_id for c in _FORBIDDEN_CHARS):
        raise InvalidNoteIdError(note_id)
    return note_id


def resolve_note_path(notes_root: Union[str, Path], entry: NoteEntry) -> Path:
    """Return ``<notes_root>/<entry.rev>/<entry.id>.note``.

    Uses the entry's own revision, never the manifest's. Nothing on disk is
    consulted.
    """
    note_id = validate_note_id(entry.id)
    return Path(notes_root) / str(entry.rev) / f"{note_id}{NOTE_SUFFIX}"
