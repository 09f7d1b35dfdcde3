#!/usr/bin/env python
"""Command line entry point: ``tomboy-export -in <archive>``."""

import logging

import typer

from pytomboy.archive.rendering.exporter import export_archive
from pytomboy.archive.rendering.options import ExportConfig
from pytomboy.cli.commands import paths
from pytomboy.cli.utils.log import configure_logging
from pytomboy.exceptions import TomboyError

LOGGER = logging.getLogger("pytomboy.cli")

app = typer.Typer(help="Export notes from a Tomboy sync archive", add_completion=False)

app.add_typer(paths.app, name="paths")


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    in_path: str = typer.Option(
        "",
        "-in",
        "--in",
        envvar="PYTOMBOY_IN",
        help="Source path for Tomboy notes",
    ),
    out_path: str = typer.Option(
        "", "-out", "--out", help="Output path for converted notes"
    ),
    save_revisions: bool = typer.Option(
        False, "-revisions", "--revisions", help="Export all note revisions"
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Print the title and body of every note in the archive manifest."""
    configure_logging(verbose)
    ctx.obj = ExportConfig(
        in_path=in_path, out_path=out_path, save_revisions=save_revisions
    )
    if ctx.invoked_subcommand is not None:
        return

    try:
        result = export_archive(ctx.obj)
    except TomboyError:
        raise typer.Exit(1)
    LOGGER.debug("Exported %d notes, skipped %d", result.written, len(result.skipped))


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
