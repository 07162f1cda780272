"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from md_creator.l1_entities.config import AppConfig
from md_creator.l2_use_cases.create_note_use_case import CreateNoteUseCase
from md_creator.l2_use_cases.list_notes_use_case import ListNotesUseCase
from md_creator.l2_use_cases.ports.note_writer import NoteWriter
from md_creator.l2_use_cases.ports.template_store import TemplateStore
from md_creator.l3_interface_adapters.gateways.file_note_writer import FileNoteWriter
from md_creator.l3_interface_adapters.gateways.yaml_template_store import YamlTemplateStore


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, config: AppConfig, clock: Callable[[], datetime] = datetime.now) -> None:
        self.config = config
        self.template_store: TemplateStore = YamlTemplateStore(Path(config.templates_dir))
        notes_dir = Path(config.notes_dir) if config.notes_dir else None
        self.note_writer: NoteWriter = FileNoteWriter(notes_dir)

        self.create_note = CreateNoteUseCase(self.template_store, self.note_writer, clock=clock)
        self.list_notes = ListNotesUseCase(self.note_writer)
