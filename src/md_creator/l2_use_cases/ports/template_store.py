"""Port: template store."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from md_creator.l1_entities.template import NoteTemplate


class TemplateStore(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract store of named note templates."""

    def ensure_directory(self) -> bool:
        """Bootstrap the templates directory. Returns True if it was created."""
        ...

    def create(self, name: str) -> Path:
        """Write a fresh copy of the default template under *name*."""
        ...

    def list_names(self) -> list[str]:
        """List template names (extension stripped)."""
        ...

    def load(self, name: str) -> NoteTemplate:
        """Load and parse the named template."""
        ...
