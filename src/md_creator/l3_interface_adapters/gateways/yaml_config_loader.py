"""Gateway: YAML configuration loader -- discovery, reading and merging of raw config data."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from md_creator.l1_entities.errors import ConfigError
from md_creator.l3_interface_adapters.gateways import paths
from md_creator.l3_interface_adapters.gateways.fs_utils import write_text_file

log = logging.getLogger('mdc.config')

DEFAULT_CONFIG_YAML = """\
# Markdown File Creator Configuration

# templates_dir: Directory where template files are stored
# Default is 'templates' in the current working directory
# Examples for custom paths:
#   Windows: C:\\Users\\YourUsername\\Documents\\templates
#   macOS:   /Users/YourUsername/Documents/templates
#   Linux:   /home/YourUsername/Documents/templates

templates_dir: templates

# notes_dir: Directory where notes are written (default: current directory)
# notes_dir: notes

# Note: You can use the environment variables MD_TEMPLATES_DIR and MD_NOTES_DIR
# to override these directories at runtime.
"""


class YamlConfigLoader:
    """Reads raw config data from YAML files with merge and override support."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        return _load_data(config_path, overrides)

    def find_config(self) -> Path | None:
        """Return the first existing default config file, if any."""
        for default_path in paths.default_config_paths():
            if default_path.is_file():
                return default_path
        return None


def write_default_config(directory: Path) -> Path:
    """Write a commented default config file into *directory*."""
    path = directory / paths.CONFIG_FILE_NAME
    try:
        write_text_file(path, DEFAULT_CONFIG_YAML)
    except OSError as e:
        raise ConfigError(f'Failed to write default config file {path}: {e}') from e
    log.info('Created default configuration file %s', path)
    return path


def _load_data(
    config_path: str | None = None,
    overrides: dict | None = None,
) -> dict:
    """Resolve, read, and merge YAML config into a plain dict."""
    data: dict = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        data = _read_yaml(path)
    else:
        for default_path in paths.default_config_paths():
            if default_path.is_file():
                data = _read_yaml(default_path)
                break
    if overrides:
        deep_merge(data, overrides)
    return data


def _read_yaml(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f'Failed to read config file {path}: {e}') from e
    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a mapping')
    log.debug('Loaded config from %s', path)
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
