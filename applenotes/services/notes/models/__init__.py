"""Public exports for Notes tool parameter models."""

from __future__ import annotations

from .params import CreateNoteParams, GetNoteParams, SearchParams

__all__ = [
    "CreateNoteParams",
    "GetNoteParams",
    "SearchParams",
]
