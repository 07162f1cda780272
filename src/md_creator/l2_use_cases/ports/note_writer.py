"""Port: note writer."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from md_creator.l1_entities.note import NoteSummary


class NoteWriter(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract persistence for rendered notes."""

    def write(self, name: str, content: str) -> Path:
        """Persist *content* as ``<name>.md``."""
        ...

    def list_notes(self) -> list[NoteSummary]:
        """List existing notes with their tags."""
        ...
