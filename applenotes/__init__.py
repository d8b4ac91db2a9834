"""Create, search and read Apple Notes through AppleScript."""

from applenotes.services.notes import NotesService

__version__ = "1.0.1"

__all__ = ["NotesService", "__version__"]
