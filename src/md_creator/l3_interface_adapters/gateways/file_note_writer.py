"""Gateway: file-based note writer -- implements NoteWriter port."""

from __future__ import annotations

import logging
from pathlib import Path

from md_creator.l1_entities.errors import ErrorKind, FileError
from md_creator.l1_entities.note import NOTE_EXTENSION, NoteSummary
from md_creator.l2_use_cases.utils.tag_scanner import extract_tags
from md_creator.l3_interface_adapters.gateways.fs_utils import ensure_directory, write_text_file

log = logging.getLogger('mdc.notes')


class FileNoteWriter:
    """Writes ``<name>.md`` into the notes directory, or the working directory when unset."""

    def __init__(self, notes_dir: Path | None = None) -> None:
        self._notes_dir = notes_dir

    @property
    def notes_dir(self) -> Path:
        return self._notes_dir if self._notes_dir is not None else Path.cwd()

    def write(self, name: str, content: str) -> Path:
        path = self.notes_dir / f'{name}{NOTE_EXTENSION}'
        try:
            if self._notes_dir is not None and ensure_directory(self._notes_dir):
                log.info('Created notes directory %s', self._notes_dir)
            if path.exists():
                log.debug('Overwriting existing note %s', path)
            write_text_file(path, content)
        except OSError as e:
            raise FileError(ErrorKind.WRITE_ERROR, 'write', path, e) from e
        log.debug('Wrote %d chars to %s', len(content), path)
        return path

    def list_notes(self) -> list[NoteSummary]:
        notes_dir = self.notes_dir
        if not notes_dir.exists():
            return []
        try:
            entries = [p for p in notes_dir.iterdir() if p.is_file() and p.name.endswith(NOTE_EXTENSION)]
        except OSError as e:
            raise FileError(ErrorKind.READ_ERROR, 'read', notes_dir, e) from e

        summaries: list[NoteSummary] = []
        for path in entries:
            try:
                text = path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                raise FileError(ErrorKind.READ_ERROR, 'read', path, e) from e
            summaries.append(NoteSummary(name=path.stem, path=path, tags=extract_tags(text)))
        return summaries
