"""Tests for ListNotesUseCase."""

from __future__ import annotations

from pathlib import Path

from md_creator.l1_entities.note import NoteSummary
from md_creator.l2_use_cases.list_notes_use_case import ListNotesUseCase
from tests.conftest import FakeNoteWriter


class TestListNotes:
    def test_returns_writer_summaries(self):
        summaries = [NoteSummary(name='a', path=Path('a.md'), tags=['x'])]
        assert ListNotesUseCase(FakeNoteWriter(summaries=summaries)).execute() == summaries

    def test_empty(self):
        assert ListNotesUseCase(FakeNoteWriter()).execute() == []
