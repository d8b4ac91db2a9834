"""Validated parameters of the note tools."""

from __future__ import annotations

from typing import List

from pydantic import Field

from ._base import NotesModel


class CreateNoteParams(NotesModel):
    title: str = Field(..., min_length=1, description="Title is required")
    content: str = Field(..., min_length=1, description="Content is required")
    tags: List[str] = Field(default_factory=list)


class SearchParams(NotesModel):
    query: str = Field(..., min_length=1, description="Search query is required")


class GetNoteParams(NotesModel):
    title: str = Field(..., min_length=1, description="Note title is required")
