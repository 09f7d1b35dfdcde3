"""
Read-only view over a Tomboy sync archive directory.

Layout:
  <root>/manifest.xml               revision + (id, rev) note entries
  <root>/0/<rev>/<id>.note          one XML file per note
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .decoding import load_manifest, load_note
from .models import Manifest, Note, NoteEntry
from .paths import resolve_note_path

LOGGER = logging.getLogger(__name__)


class NoteArchive:
    """Resolves and loads the files of one archive rooted at ``root``."""

    MANIFEST_NAME = "manifest.xml"
    # Only the "0" tree is read; other top-level directories are left alone.
    NOTES_DIR = "0"

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)
        LOGGER.debug("Initialized NoteArchive with root: %s", self.root)

    @property
    def manifest_path(self) -> Path:
        return self.root / self.MANIFEST_NAME

    @property
    def notes_root(self) -> Path:
        return self.root / self.NOTES_DIR

    def load_manifest(self) -> Manifest:
        return load_manifest(self.manifest_path)

    def note_path(self, entry: NoteEntry) -> Path:
        return resolve_note_path(self.notes_root, entry)

    def load_note(self, entry: NoteEntry) -> Note:
        """Resolve and decode the file behind ``entry``.

        Raises InvalidNoteIdError, ArchiveReadError or ArchiveDecodeError.
        """
        return load_note(self.note_path(entry))
