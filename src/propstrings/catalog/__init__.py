"""Template table sources consumed by the string formatter."""

from .loaders import (
    DirectoryLoader,
    MappingLoader,
    PackageLoader,
    parse_table,
    read_table,
)
from .properties import parse_properties

__all__ = [
    "DirectoryLoader",
    "MappingLoader",
    "PackageLoader",
    "parse_properties",
    "parse_table",
    "read_table",
]
