"""File-name sanitizing and input validation -- pure functions, no I/O."""

from __future__ import annotations

import re

from md_creator.l1_entities.errors import ErrorKind, ValidationError

MAX_NAME_LENGTH = 255
MAX_TITLE_LENGTH = 100
INVALID_NAME_CHARS = '/\\:*?"<>|'

_UNSAFE_RE = re.compile(r'[^a-zA-Z0-9_-]')


def sanitize_file_name(name: str) -> str:
    """Reduce *name* to a lower-case ``[a-z0-9_-]`` stem of at most 255 characters."""
    name = name.replace(' ', '_')
    name = _UNSAFE_RE.sub('', name)
    return name.lower()[:MAX_NAME_LENGTH]


def validate_file_name(name: str) -> None:
    """Reject an empty, oversized, or path-like raw name."""
    if not name:
        raise ValidationError(ErrorKind.EMPTY_NAME, 'file name', 'cannot be empty')
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(ErrorKind.NAME_TOO_LONG, 'file name', f'too long (max {MAX_NAME_LENGTH} characters)')
    if any(ch in INVALID_NAME_CHARS for ch in name):
        raise ValidationError(ErrorKind.INVALID_CHARACTERS, 'file name', 'contains invalid characters')


def validate_title(title: str) -> None:
    if not title:
        raise ValidationError(ErrorKind.EMPTY_TITLE, 'title', 'cannot be empty')
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(ErrorKind.TITLE_TOO_LONG, 'title', f'too long (max {MAX_TITLE_LENGTH} characters)')
    if not title.strip():
        raise ValidationError(ErrorKind.EMPTY_TITLE, 'title', 'cannot be only whitespace')
