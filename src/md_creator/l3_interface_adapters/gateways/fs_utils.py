"""Filesystem helpers shared by the template store and the note writer."""

from __future__ import annotations

from pathlib import Path

DIR_MODE = 0o755
FILE_MODE = 0o644


def ensure_directory(path: Path) -> bool:
    """Create *path* (and parents) if missing. Returns True if it was created."""
    if path.exists():
        return False
    path.mkdir(mode=DIR_MODE, parents=True)
    return True


def write_text_file(path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8 with owner read/write, group/other read."""
    path.write_text(content, encoding='utf-8')
    path.chmod(FILE_MODE)
