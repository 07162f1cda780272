"""Tests for template and note Pydantic models."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from md_creator.l1_entities.note import Note, NoteSummary
from md_creator.l1_entities.template import DEFAULT_TEMPLATE_YAML, NoteTemplate


class TestNoteTemplate:
    def test_defaults(self):
        tmpl = NoteTemplate()
        assert not tmpl.content
        assert tmpl.tags == []

    def test_null_tags_become_empty(self):
        assert NoteTemplate.model_validate({'content': 'x', 'tags': None}).tags == []

    def test_tags_must_be_a_list(self):
        with pytest.raises(ValidationError):
            NoteTemplate.model_validate({'content': 'x', 'tags': 'a,b'})

    def test_default_yaml_parses(self):
        tmpl = NoteTemplate.model_validate(yaml.safe_load(DEFAULT_TEMPLATE_YAML))
        assert tmpl.content.startswith('# {{TITLE}}\n')
        for token in ('{{DATE}}', '{{TIME}}', '{{TAGS}}'):
            assert token in tmpl.content
        assert tmpl.tags == []


class TestNote:
    def test_creation(self):
        note = Note(name='hello_world', title='Hello World', body='# Hello World\n')
        assert note.tags == []

    def test_summary(self):
        summary = NoteSummary(name='a', path=Path('a.md'), tags=['x'])
        assert summary.path.name == 'a.md'
