"""
Models for the sync manifest (``manifest.xml``).

The decoder hands the raw XML attribute dicts straight to these models, so
type coercion (``rev="2"`` -> ``2``) and missing-attribute errors are all
reported as pydantic validation errors.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field

from ._base import TomboyModel


class NoteEntry(TomboyModel):
    """Pointer to a note file: ``<notes_root>/<rev>/<id>.note``."""

    id: str
    rev: int

    def __str__(self) -> str:
        return f"Revision: {self.rev}, Id: {self.id}"


class Manifest(TomboyModel):
    revision: int
    server_id: Optional[str] = Field(default=None, alias="server-id")
    notes: Tuple[NoteEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        entries = "\n".join(str(n) for n in self.notes)
        return f"Revision: {self.revision}\nNotes:\n{entries}\n"
