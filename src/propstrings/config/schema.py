"""Pydantic models describing formatter settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from propstrings.errors import ConfigurationError


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class FormatterSettings(ImmutableModel):
    """Locale selection and plural handling defaults for packaged formatters."""

    default_locale: str = "en-US"
    fallback_locale: str = "en-US"
    alternate_locale: str = "en-US"
    plural_policy: Literal["fail", "clamp"] = "fail"
    plural_form_delimiter: str = ";"
    locales_dir: Path | None = None

    @field_validator("default_locale", "fallback_locale", "alternate_locale", mode="before")
    @classmethod
    def _normalise_locale(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ConfigurationError("Locale identifiers must be non-empty strings")
        return value.strip()

    @field_validator("plural_form_delimiter")
    @classmethod
    def _validate_delimiter(cls, value: str) -> str:
        if not value:
            raise ConfigurationError("Plural form delimiter must not be empty")
        return value

    @field_validator("locales_dir", mode="after")
    @classmethod
    def _expand_locales_dir(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None


__all__ = ["FormatterSettings", "ImmutableModel"]
