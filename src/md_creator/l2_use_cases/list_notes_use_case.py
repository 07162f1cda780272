"""Use case: list existing notes with their tags."""

from __future__ import annotations

from md_creator.l1_entities.note import NoteSummary
from md_creator.l2_use_cases.ports.note_writer import NoteWriter


class ListNotesUseCase:
    def __init__(self, note_writer: NoteWriter) -> None:
        self._writer = note_writer

    def execute(self) -> list[NoteSummary]:
        return self._writer.list_notes()
