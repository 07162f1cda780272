"""Configuration Pydantic model -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class AppConfig(BaseModel):
    templates_dir: str
    notes_dir: str | None = None  # None -> current working directory
