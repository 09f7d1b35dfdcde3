"""
Exporter: manifest -> note files -> text blocks.

A manifest that cannot be loaded is fatal and propagates to the caller.
A note that cannot be resolved or loaded is logged, recorded on the result
and skipped; the remaining notes are still written in manifest order.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, TextIO, Tuple

from pytomboy.exceptions import TomboyError

from ..models import NoteEntry
from ..service import NoteArchive
from .options import ExportConfig
from .reporter import write_note

LOGGER = logging.getLogger(__name__)


@dataclass
class ExportResult:
    written: int = 0
    skipped: List[Tuple[NoteEntry, TomboyError]] = field(default_factory=list)


def export_archive(
    config: ExportConfig,
    sink: Optional[TextIO] = None,
    logger: Optional[logging.Logger] = None,
) -> ExportResult:
    """Write every note listed in the archive manifest to ``sink``.

    ``sink`` defaults to the current ``sys.stdout``; ``logger`` defaults to
    this module's logger.
    """
    log = logger or LOGGER
    out = sink if sink is not None else sys.stdout

    log.info("Output path: %s", config.out_path)
    log.info("Save revisions: %s", config.save_revisions)

    archive = NoteArchive(config.archive_root)
    manifest = archive.load_manifest()
    log.debug(
        "Manifest revision %d lists %d notes", manifest.revision, len(manifest)
    )

    result = ExportResult()
    for entry in manifest.notes:
        try:
            note = archive.load_note(entry)
        except TomboyError as e:
            log.warning("Skipping note %s (rev %d): %s", entry.id, entry.rev, e)
            result.skipped.append((entry, e))
            continue
        write_note(out, note)
        result.written += 1
    return result
