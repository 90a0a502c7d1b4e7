"""Template loaders reading locale bundles from memory, disk or the package."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import yaml

from propstrings.errors import TemplateLoadError

from .properties import parse_properties

_LOGGER = logging.getLogger(__name__)

LOCALES_PACKAGE = "propstrings.locales"
DEFAULT_SUFFIXES: tuple[str, ...] = (".properties", ".json", ".yaml", ".yml")


def _flatten(tree: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    items: dict[str, str] = {}
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            items.update(_flatten(value, path))
        else:
            items[path] = "" if value is None else str(value)
    return items


def parse_table(text: str, suffix: str) -> dict[str, str]:
    """Parse bundle source according to its file ``suffix``."""

    if suffix == ".properties":
        return parse_properties(text)

    try:
        if suffix == ".json":
            payload = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            payload = yaml.safe_load(text) or {}
        else:
            raise TemplateLoadError(f"Unsupported bundle format: {suffix}")
    except (json.JSONDecodeError, yaml.YAMLError) as error:
        raise TemplateLoadError(str(error)) from error

    if not isinstance(payload, Mapping):
        raise TemplateLoadError("Bundle must define a mapping at the top level")
    return _flatten(payload)


def read_table(resource: Path | Traversable) -> dict[str, str]:
    """Read and parse a bundle file, raising :class:`TemplateLoadError` on failure."""

    suffix = Path(resource.name).suffix
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise TemplateLoadError(f"{resource.name}: {error}") from error

    try:
        return parse_table(text, suffix)
    except TemplateLoadError as error:
        raise TemplateLoadError(f"{resource.name}: {error}") from error


def _is_safe_locale(locale: str) -> bool:
    return bool(locale) and "/" not in locale and "\\" not in locale and not locale.startswith(".")


@dataclass(frozen=True)
class MappingLoader:
    """Serve template tables from an in-memory mapping of locale to table."""

    tables: Mapping[str, Mapping[str, str]]

    def __call__(self, locale: str) -> Mapping[str, str] | None:
        return self.tables.get(locale)

    def available_locales(self) -> tuple[str, ...]:
        return tuple(sorted(self.tables))


class _ResourceLoader(ABC):
    """Shared lookup logic for directory-like bundle roots."""

    suffixes: Sequence[str]

    @abstractmethod
    def _root(self) -> Path | Traversable | None:
        """Return the directory-like root holding the bundles."""

    def _entries(self) -> Iterable[Path | Traversable]:
        root = self._root()
        if root is None or not root.is_dir():
            return ()
        return root.iterdir()

    def __call__(self, locale: str) -> Mapping[str, str] | None:
        if not _is_safe_locale(locale):
            _LOGGER.debug("Rejecting unsafe locale identifier %r", locale)
            return None

        root = self._root()
        if root is None:
            return None

        for suffix in self.suffixes:
            resource = root.joinpath(f"{locale}{suffix}")
            if resource.is_file():
                _LOGGER.debug("Reading %s bundle from %s", locale, resource)
                return read_table(resource)
        return None

    def available_locales(self) -> tuple[str, ...]:
        """Return the locales with a bundle in one of the accepted formats."""

        locales = {
            Path(entry.name).stem
            for entry in self._entries()
            if entry.is_file() and Path(entry.name).suffix in self.suffixes
        }
        return tuple(sorted(locales))


class DirectoryLoader(_ResourceLoader):
    """Load ``<locale><suffix>`` bundles from a filesystem directory."""

    def __init__(self, root: str | Path, suffixes: Sequence[str] = DEFAULT_SUFFIXES) -> None:
        self.root = Path(root).expanduser()
        self.suffixes = tuple(suffixes)

    def _root(self) -> Path:
        return self.root

    def __repr__(self) -> str:
        return f"DirectoryLoader({str(self.root)!r})"


class PackageLoader(_ResourceLoader):
    """Load bundles shipped as package resources (``propstrings.locales`` by default)."""

    def __init__(self, package: str = LOCALES_PACKAGE, suffixes: Sequence[str] = DEFAULT_SUFFIXES) -> None:
        self.package = package
        self.suffixes = tuple(suffixes)

    def _root(self) -> Traversable | None:
        try:
            return resources.files(self.package)
        except ModuleNotFoundError:
            _LOGGER.warning("Bundle package %s is not importable", self.package)
            return None

    def __repr__(self) -> str:
        return f"PackageLoader({self.package!r})"


__all__ = [
    "DEFAULT_SUFFIXES",
    "DirectoryLoader",
    "LOCALES_PACKAGE",
    "MappingLoader",
    "PackageLoader",
    "parse_table",
    "read_table",
]
