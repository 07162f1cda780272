"""Naive tag extraction from rendered markdown notes."""

from __future__ import annotations

TAGS_PREFIX = 'Tags:'


def extract_tags(text: str) -> list[str]:
    """Return the comma-separated entries of the first ``Tags:`` line, stripped.

    Trailing or doubled commas yield empty strings; a note without a
    ``Tags:`` line yields an empty list.
    """
    for line in text.splitlines():
        if line.startswith(TAGS_PREFIX):
            return [tag.strip() for tag in line[len(TAGS_PREFIX) :].split(',')]
    return []


def parse_tag_option(raw: str | None) -> list[str] | None:
    """Split a ``--tags a,b`` option value; None when the option was not given."""
    if raw is None:
        return None
    return [tag.strip() for tag in raw.split(',') if tag.strip()]
