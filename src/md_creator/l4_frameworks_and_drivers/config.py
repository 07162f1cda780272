"""Application config defaults and environment overrides -- lives in L4, not domain."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from md_creator.l1_entities.config import AppConfig
from md_creator.l1_entities.errors import ConfigError
from md_creator.l3_interface_adapters.gateways.paths import NOTES_DIR_ENV, TEMPLATES_DIR_ENV
from md_creator.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'templates_dir': 'templates',
    'notes_dir': None,
}

_ENV_OVERRIDES = {
    TEMPLATES_DIR_ENV: 'templates_dir',
    NOTES_DIR_ENV: 'notes_dir',
}


def env_overrides(environ: Mapping[str, str] | None = None) -> dict:
    """Collect non-empty directory overrides from the environment."""
    env = os.environ if environ is None else environ
    return {key: env[var] for var, key in _ENV_OVERRIDES.items() if env.get(var)}


def build_app_config(raw: dict, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Merge defaults <- *raw* file data <- environment, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    deep_merge(merged, env_overrides(environ))
    try:
        return AppConfig.model_validate(merged)
    except PydanticValidationError as e:
        raise ConfigError(f'Invalid configuration: {e}') from e
