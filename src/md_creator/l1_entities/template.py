"""Template Pydantic model -- pure data, no I/O."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

TEMPLATE_EXTENSION = '.yaml'
DEFAULT_TEMPLATE_NAME = 'default'

DEFAULT_TEMPLATE_YAML = """\
content: |
  # {{TITLE}}

  Date: {{DATE}}
  Time: {{TIME}}
  Tags: {{TAGS}}

  ## Introduction

  ## Main Content

  ## Conclusion
tags: []
"""


class NoteTemplate(BaseModel):
    content: str = ''
    tags: list[str] = Field(default_factory=list)

    @field_validator('tags', mode='before')
    @classmethod
    def _none_means_no_tags(cls, value: object) -> object:
        # `tags:` with no items parses as null
        return [] if value is None else value
