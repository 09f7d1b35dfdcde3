"""High-level note objects handed to the reporter."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain import NoteContent


@dataclass(frozen=True)
class Note:
    """A decoded ``.note`` file."""

    title: str
    content: NoteContent

    @property
    def text(self) -> str:
        """Raw body markup, exactly as stored in the file."""
        return self.content.raw
