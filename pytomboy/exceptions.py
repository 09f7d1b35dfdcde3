"""Library exceptions."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class TomboyError(Exception):
    """Base pytomboy error."""


class ArchiveError(TomboyError):
    """An archive file could not be turned into a model."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class ArchiveReadError(ArchiveError):
    """The file is missing, unreadable or not a regular file."""


class ArchiveDecodeError(ArchiveError):
    """The file is not well-formed XML or lacks required elements/attributes."""


class InvalidNoteIdError(ArchiveDecodeError):
    """A manifest entry carries an id that is not a single path segment."""

    def __init__(self, note_id: str):
        super().__init__(f"Invalid note id {note_id!r}")
        self.note_id = note_id
