"""Command modules for the pytomboy CLI."""

from pytomboy.cli.commands import paths

__all__ = ["paths"]
