"""
Tool handlers over NotesService.

Each handler validates a raw argument mapping with the parameter models,
calls the service and returns a ``ToolResponse``. Handlers never raise;
errors become ``ToolResponse(is_error=True)``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Type, TypeVar

from pydantic import ValidationError

from ...exceptions import AppleNotesValidationError
from .models import CreateNoteParams, GetNoteParams, SearchParams
from .models._base import NotesModel
from .service import NotesService

LOGGER = logging.getLogger(__name__)

P = TypeVar("P", bound=NotesModel)


@dataclass(frozen=True)
class ToolResponse:
    text: str
    is_error: bool = False


def parse_params(model: Type[P], arguments: Mapping[str, Any]) -> P:
    """Validate ``arguments`` against ``model``."""
    try:
        return model.model_validate(dict(arguments))
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in e.errors()
        ]
        raise AppleNotesValidationError(
            "Invalid arguments: " + "; ".join(messages), errors=e.errors()
        ) from e


def create_note(service: NotesService, arguments: Mapping[str, Any]) -> ToolResponse:
    try:
        params = parse_params(CreateNoteParams, arguments)
        note = service.create_note(params.title, params.content, params.tags)
        if note is None:
            return ToolResponse(
                "Failed to create note. Please check your Apple Notes configuration.",
                is_error=True,
            )
        return ToolResponse(f'Note created successfully: "{note.title}"')
    except Exception as e:
        LOGGER.debug("notes.tools.create_note failed", exc_info=True)
        return ToolResponse(f"Error creating note: {e}", is_error=True)


def search_notes(service: NotesService, arguments: Mapping[str, Any]) -> ToolResponse:
    try:
        params = parse_params(SearchParams, arguments)
        notes = service.search_notes(params.query)
        if not notes:
            return ToolResponse("No notes found matching your query")
        lines = "\n".join(f"• {n.title}" for n in notes)
        return ToolResponse(f"Found {len(notes)} notes:\n{lines}")
    except Exception as e:
        LOGGER.debug("notes.tools.search_notes failed", exc_info=True)
        return ToolResponse(f"Error searching notes: {e}", is_error=True)


def get_note_content(
    service: NotesService, arguments: Mapping[str, Any]
) -> ToolResponse:
    try:
        params = parse_params(GetNoteParams, arguments)
        content = service.get_note_content(params.title)
        return ToolResponse(content or "Note not found")
    except Exception as e:
        LOGGER.debug("notes.tools.get_note_content failed", exc_info=True)
        return ToolResponse(f"Error retrieving note content: {e}", is_error=True)


TOOLS = {
    "create-note": create_note,
    "search-notes": search_notes,
    "get-note-content": get_note_content,
}
