"""Use case: render a template into a markdown note and persist it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from md_creator.l1_entities.errors import ErrorKind, ValidationError
from md_creator.l1_entities.naming import sanitize_file_name, validate_file_name, validate_title
from md_creator.l1_entities.note import Note
from md_creator.l1_entities.template import DEFAULT_TEMPLATE_NAME
from md_creator.l2_use_cases.ports.note_writer import NoteWriter
from md_creator.l2_use_cases.ports.template_store import TemplateStore
from md_creator.l2_use_cases.utils.content_renderer import render_content

log = logging.getLogger('mdc.notes')


class CreateNoteUseCase:
    """Validates input, loads the template, renders it, writes the note."""

    def __init__(
        self,
        template_store: TemplateStore,
        note_writer: NoteWriter,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._store = template_store
        self._writer = note_writer
        self._clock = clock

    def execute(
        self,
        title: str,
        *,
        name: str | None = None,
        template_name: str = DEFAULT_TEMPLATE_NAME,
        tags: list[str] | None = None,
    ) -> tuple[Note, Path]:
        if not title.strip():
            validate_title(title)
        raw_name = name or title
        validate_file_name(raw_name)
        validate_title(title)
        stem = sanitize_file_name(raw_name)
        if not stem:
            raise ValidationError(ErrorKind.EMPTY_NAME, 'file name', 'contains no usable characters')

        template = self._store.load(template_name)
        effective_tags = template.tags if tags is None else tags
        body = render_content(template, title, effective_tags, now=self._clock())
        note = Note(name=stem, title=title, tags=effective_tags, body=body)

        path = self._writer.write(note.name, note.body)
        log.info('Rendered template %r into %s', template_name, path)
        return note, path
