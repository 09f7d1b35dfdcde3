"""
Export configuration for a single run.

Mirrors the command-line flags one to one. ``out_path`` and
``save_revisions`` are accepted and logged but do not change what is
exported yet: output always goes to the sink and only the "0" tree is read.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExportConfig:
    # Archive root holding manifest.xml and the 0/ tree
    in_path: str = ""

    # Intended destination for converted notes (inert)
    out_path: str = ""

    # Intended switch for exporting every historical revision (inert)
    save_revisions: bool = False

    @property
    def archive_root(self) -> Path:
        return Path(self.in_path)
