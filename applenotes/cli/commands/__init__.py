"""Command modules for the applenotes CLI."""

from applenotes.cli.commands import config, notes

__all__ = ["config", "notes"]
