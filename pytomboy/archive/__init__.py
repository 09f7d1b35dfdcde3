"""Public API for reading Tomboy archives."""

from .domain import NoteContent
from .models import Manifest, Note, NoteEntry
from .rendering.exporter import ExportResult, export_archive
from .service import NoteArchive

__all__ = [
    "NoteArchive",
    "Manifest",
    "NoteEntry",
    "Note",
    "NoteContent",
    "ExportResult",
    "export_archive",
]
