"""Gateway: YAML template store -- implements TemplateStore port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from md_creator.l1_entities.errors import ErrorKind, FileError, ValidationError
from md_creator.l1_entities.naming import sanitize_file_name, validate_file_name
from md_creator.l1_entities.template import (
    DEFAULT_TEMPLATE_NAME,
    DEFAULT_TEMPLATE_YAML,
    TEMPLATE_EXTENSION,
    NoteTemplate,
)
from md_creator.l3_interface_adapters.gateways.fs_utils import ensure_directory, write_text_file

log = logging.getLogger('mdc.templates')


class YamlTemplateStore:
    """Creates, lists and loads ``<name>.yaml`` templates in one directory."""

    def __init__(self, templates_dir: Path) -> None:
        self._templates_dir = templates_dir

    @property
    def templates_dir(self) -> Path:
        return self._templates_dir

    def path_for(self, name: str) -> Path:
        return self._templates_dir / f'{sanitize_file_name(name)}{TEMPLATE_EXTENSION}'

    def ensure_directory(self) -> bool:
        """Create the directory and seed ``default.yaml`` on first use; no-op afterwards."""
        try:
            created = ensure_directory(self._templates_dir)
        except OSError as e:
            raise FileError(ErrorKind.WRITE_ERROR, 'create', self._templates_dir, e) from e
        if not created:
            return False
        log.info('Created templates directory %s', self._templates_dir)
        self._write(self.path_for(DEFAULT_TEMPLATE_NAME))
        return True

    def create(self, name: str) -> Path:
        validate_file_name(name)
        if not sanitize_file_name(name):
            raise ValidationError(ErrorKind.EMPTY_NAME, 'file name', 'contains no usable characters')
        path = self.path_for(name)
        if path.exists():
            log.debug('Overwriting existing template %s', path)
        self._write(path)
        return path

    def list_names(self) -> list[str]:
        try:
            entries = list(self._templates_dir.iterdir())
        except OSError as e:
            raise FileError(ErrorKind.READ_ERROR, 'read', self._templates_dir, e) from e
        return [
            p.name.removesuffix(TEMPLATE_EXTENSION)
            for p in entries
            if not p.is_dir() and p.name.endswith(TEMPLATE_EXTENSION)
        ]

    def load(self, name: str) -> NoteTemplate:
        path = self.path_for(name)
        try:
            raw = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(ErrorKind.TEMPLATE_READ_ERROR, 'read', path, e) from e
        try:
            data = yaml.safe_load(raw) or {}
            if not isinstance(data, dict):
                raise ValueError(f'expected a mapping, got {type(data).__name__}')
            template = NoteTemplate.model_validate(data)
        except (yaml.YAMLError, ValueError) as e:
            # pydantic.ValidationError is a ValueError subclass
            raise FileError(ErrorKind.TEMPLATE_PARSE_ERROR, 'parse', path, e) from e
        log.debug('Loaded template %s (%d tags)', path, len(template.tags))
        return template

    def _write(self, path: Path) -> None:
        try:
            write_text_file(path, DEFAULT_TEMPLATE_YAML)
        except OSError as e:
            raise FileError(ErrorKind.WRITE_ERROR, 'write', path, e) from e
        log.info('Wrote template %s', path)
