"""Formatter settings and bundle validation."""

from .schema import FormatterSettings
from .settings import default_settings, load_settings

__all__ = ["FormatterSettings", "default_settings", "load_settings"]
