"""Shared path constants for configuration discovery."""

from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_path

CONFIG_FILE_NAME = '.md_config.yaml'
CONFIG_DIR = user_config_path('md-creator')

TEMPLATES_DIR_ENV = 'MD_TEMPLATES_DIR'
NOTES_DIR_ENV = 'MD_NOTES_DIR'


def default_config_paths() -> list[Path]:
    """Candidate config files, most specific first: working dir, home, platform config dir."""
    return [
        Path.cwd() / CONFIG_FILE_NAME,
        Path.home() / CONFIG_FILE_NAME,
        CONFIG_DIR / 'config.yaml',
        CONFIG_DIR / 'config.yml',
    ]
