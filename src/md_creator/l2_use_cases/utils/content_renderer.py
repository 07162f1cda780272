"""Pure placeholder substitution for note templates."""

from __future__ import annotations

from datetime import datetime

from md_creator.l1_entities.template import NoteTemplate

TITLE_TOKEN = '{{TITLE}}'
DATE_TOKEN = '{{DATE}}'
TIME_TOKEN = '{{TIME}}'
TAGS_TOKEN = '{{TAGS}}'

DATE_FORMAT = '%Y-%m-%d'
TIME_FORMAT = '%H:%M:%S'


def render_content(
    template: NoteTemplate,
    title: str,
    tags: list[str] | None = None,
    *,
    now: datetime | None = None,
) -> str:
    """Replace the four recognized tokens in *template* verbatim.

    *tags* defaults to the template's own tag list. *now* is read once so
    ``{{DATE}}`` and ``{{TIME}}`` always describe the same instant. Any other
    ``{{...}}`` token is left as is.
    """
    if now is None:
        now = datetime.now()
    if tags is None:
        tags = template.tags

    content = template.content.replace(TITLE_TOKEN, title)
    content = content.replace(DATE_TOKEN, now.strftime(DATE_FORMAT))
    content = content.replace(TIME_TOKEN, now.strftime(TIME_FORMAT))
    return content.replace(TAGS_TOKEN, ', '.join(tags))
