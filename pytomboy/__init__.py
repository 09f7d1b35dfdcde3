"""Export notes from a Tomboy sync archive."""

from pytomboy.archive import NoteArchive, export_archive
from pytomboy.archive.rendering.options import ExportConfig

__version__ = "0.1.0"

__all__ = ["NoteArchive", "ExportConfig", "export_archive", "__version__"]
