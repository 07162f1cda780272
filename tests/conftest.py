"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from md_creator.l1_entities.config import AppConfig
from md_creator.l1_entities.errors import ErrorKind, FileError
from md_creator.l1_entities.note import NoteSummary
from md_creator.l1_entities.template import NoteTemplate
from md_creator.l3_interface_adapters.gateways.file_note_writer import FileNoteWriter
from md_creator.l3_interface_adapters.gateways.yaml_template_store import YamlTemplateStore
from md_creator.l4_frameworks_and_drivers.config import build_app_config

FIXED_NOW = datetime(2024, 3, 9, 7, 5, 3)

# --- Protocol-conforming Fakes ---


class FakeTemplateStore:
    """Fake template store for L2 use case tests."""

    def __init__(self, templates: dict[str, NoteTemplate] | None = None):
        self._templates = dict(templates or {})
        self.load_calls: list[str] = []
        self.created: list[str] = []

    def ensure_directory(self) -> bool:
        return False

    def create(self, name: str) -> Path:
        self.created.append(name)
        return Path('/fake/templates') / f'{name}.yaml'

    def list_names(self) -> list[str]:
        return list(self._templates)

    def load(self, name: str) -> NoteTemplate:
        self.load_calls.append(name)
        if name not in self._templates:
            raise FileError(ErrorKind.TEMPLATE_READ_ERROR, 'read', f'/fake/templates/{name}.yaml', 'not found')
        return self._templates[name]


class FakeNoteWriter:
    """Fake note writer for L2 use case tests."""

    def __init__(self, notes_dir: Path | None = None, summaries: list[NoteSummary] | None = None):
        self._notes_dir = notes_dir or Path('/fake/notes')
        self._summaries = list(summaries or [])
        self.write_calls: list[tuple[str, str]] = []

    def write(self, name: str, content: str) -> Path:
        self.write_calls.append((name, content))
        return self._notes_dir / f'{name}.md'

    def list_notes(self) -> list[NoteSummary]:
        return list(self._summaries)


# --- Standard Fixtures ---


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    return tmp_path / 'templates'


@pytest.fixture
def template_store(templates_dir: Path) -> YamlTemplateStore:
    return YamlTemplateStore(templates_dir)


@pytest.fixture
def bootstrapped_store(template_store: YamlTemplateStore) -> YamlTemplateStore:
    template_store.ensure_directory()
    return template_store


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    return tmp_path / 'notes'


@pytest.fixture
def note_writer(notes_dir: Path) -> FileNoteWriter:
    return FileNoteWriter(notes_dir)


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({}, environ={})


@pytest.fixture
def all_tokens_template() -> NoteTemplate:
    return NoteTemplate(
        content='# {{TITLE}}\nDate: {{DATE}}\nTime: {{TIME}}\nTags: {{TAGS}}\n',
        tags=['from-template'],
    )


@pytest.fixture
def fake_store(all_tokens_template: NoteTemplate) -> FakeTemplateStore:
    return FakeTemplateStore({'default': all_tokens_template})


@pytest.fixture
def fake_writer() -> FakeNoteWriter:
    return FakeNoteWriter()


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty working dir with no home/platform config and no env overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('MD_TEMPLATES_DIR', raising=False)
    monkeypatch.delenv('MD_NOTES_DIR', raising=False)

    import md_creator.l3_interface_adapters.gateways.paths as paths_mod

    monkeypatch.setattr(paths_mod, 'default_config_paths', lambda: [tmp_path / paths_mod.CONFIG_FILE_NAME])
    return tmp_path
