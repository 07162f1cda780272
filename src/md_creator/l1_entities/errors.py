"""Domain error types.

Every error carries an explicit ``kind`` so callers branch on the kind rather
than on the exception class alone.
"""

from __future__ import annotations

import enum
from pathlib import Path


class ErrorKind(enum.Enum):
    EMPTY_NAME = 'empty_name'
    NAME_TOO_LONG = 'name_too_long'
    INVALID_CHARACTERS = 'invalid_characters'
    EMPTY_TITLE = 'empty_title'
    TITLE_TOO_LONG = 'title_too_long'
    TEMPLATE_READ_ERROR = 'template_read_error'
    TEMPLATE_PARSE_ERROR = 'template_parse_error'
    WRITE_ERROR = 'write_error'
    READ_ERROR = 'read_error'
    CONFIG_ERROR = 'config_error'


class MdCreatorError(Exception):
    """Base class for all errors surfaced to the CLI."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class ValidationError(MdCreatorError):
    """Raised when user input (a name or a title) is rejected before any I/O."""

    def __init__(self, kind: ErrorKind, field: str, msg: str) -> None:
        super().__init__(kind, f'Validation error for {field}: {msg}')
        self.field = field
        self.msg = msg


class FileError(MdCreatorError):
    """Wraps an underlying I/O or parse failure with the attempted operation and path."""

    def __init__(self, kind: ErrorKind, op: str, path: str | Path, cause: Exception | str) -> None:
        super().__init__(kind, f'{op} error for file {path}: {cause}')
        self.op = op
        self.path = Path(path)
        self.cause = cause


class ConfigError(MdCreatorError):
    """Raised when a configuration file cannot be read or fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.CONFIG_ERROR, message)
