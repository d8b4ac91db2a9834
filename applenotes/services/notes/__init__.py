"""Public API for the Notes service."""

from .domain import Note, ScriptResult
from .formatting import ContentFormatter, FormatConfig, format_note_content
from .scripting import ScriptRunner, run_applescript
from .service import NotesService
from .settings import NotesSettings

__all__ = [
    "NotesService",
    "NotesSettings",
    "Note",
    "ScriptResult",
    "ScriptRunner",
    "ContentFormatter",
    "FormatConfig",
    "format_note_content",
    "run_applescript",
]
