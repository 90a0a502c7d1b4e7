"""Settings loader combining YAML defaults with environment overrides."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from propstrings.errors import ConfigurationError

from .schema import FormatterSettings

_LOGGER = logging.getLogger(__name__)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
DEFAULTS_FILE = CONFIG_DIRECTORY / "defaults.yaml"

ENVIRONMENT_OVERRIDES: Mapping[str, str] = {
    "PROPSTRINGS_LOCALE": "default_locale",
    "PROPSTRINGS_FALLBACK_LOCALE": "fallback_locale",
    "PROPSTRINGS_ALTERNATE_LOCALE": "alternate_locale",
    "PROPSTRINGS_PLURAL_POLICY": "plural_policy",
    "PROPSTRINGS_LOCALES_DIR": "locales_dir",
}
_PLURAL_POLICIES = {"fail", "clamp"}


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise ConfigurationError(f"Settings file {path.name} is not valid YAML: {error}") from error
    if not isinstance(data, dict):
        raise ConfigurationError("Settings file must define a mapping at the top level")
    return data


def _environment_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for env, field_name in ENVIRONMENT_OVERRIDES.items():
        value = environ.get(env)
        if value is None or not value.strip():
            continue
        value = value.strip()
        if field_name == "plural_policy" and value.lower() not in _PLURAL_POLICIES:
            _LOGGER.warning("Ignoring invalid value for %s: %s", env, value)
            continue
        overrides[field_name] = value.lower() if field_name == "plural_policy" else value
    return overrides


def load_settings(
    path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> FormatterSettings:
    """Build settings from the packaged defaults, ``path`` and the environment."""

    raw: dict[str, Any] = _load_yaml(DEFAULTS_FILE) if DEFAULTS_FILE.exists() else {}

    if path is not None:
        settings_file = Path(path).expanduser()
        if not settings_file.exists():
            raise FileNotFoundError(f"Settings file not found: {settings_file}")
        raw.update(_load_yaml(settings_file))

    raw.update(_environment_overrides(os.environ if environ is None else environ))

    try:
        return FormatterSettings.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


@lru_cache(maxsize=1)
def default_settings() -> FormatterSettings:
    """Load and cache settings from the defaults file and the process environment."""

    return load_settings()


__all__ = [
    "CONFIG_DIRECTORY",
    "DEFAULTS_FILE",
    "ENVIRONMENT_OVERRIDES",
    "default_settings",
    "load_settings",
]
