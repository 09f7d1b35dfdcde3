# pytomboy/archive/domain.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NoteContent:
    """Verbatim inner markup of a note's <text> element."""

    raw: str

    def __str__(self) -> str:
        return self.raw
