"""Paths command for the pytomboy CLI."""

import typer
from rich.console import Console

from pytomboy.archive import NoteArchive
from pytomboy.archive.rendering.options import ExportConfig
from pytomboy.exceptions import InvalidNoteIdError, TomboyError

app = typer.Typer(help="List the note files the manifest points at")
console = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Print the resolved path of every manifest entry, in manifest order."""
    config: ExportConfig = ctx.obj or ExportConfig()
    archive = NoteArchive(config.archive_root)

    try:
        manifest = archive.load_manifest()
    except TomboyError:
        raise typer.Exit(1)

    for entry in manifest.notes:
        try:
            path = archive.note_path(entry)
        except InvalidNoteIdError as e:
            console.print(
                f"Skipped: {e}",
                style="yellow",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            continue
        console.print(f"Note: {path}", markup=False, highlight=False, soft_wrap=True)
