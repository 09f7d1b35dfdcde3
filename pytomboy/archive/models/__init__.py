"""Public exports for archive data models."""

from __future__ import annotations

from .dto import Note
from .manifest import Manifest, NoteEntry

__all__ = [
    "Manifest",
    "Note",
    "NoteEntry",
]
