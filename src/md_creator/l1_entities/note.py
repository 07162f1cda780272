"""Note entities."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

NOTE_EXTENSION = '.md'


class Note(BaseModel):
    """A rendered note, ready to be written once."""

    name: str = Field(description='Sanitized file-name stem')
    title: str
    tags: list[str] = Field(default_factory=list)
    body: str


class NoteSummary(BaseModel):
    """An existing note on disk, as shown by the listing command."""

    name: str
    path: Path
    tags: list[str] = Field(default_factory=list)
