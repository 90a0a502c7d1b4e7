"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from propstrings.catalog import MappingLoader  # noqa: E402
from propstrings.config import default_settings  # noqa: E402
from propstrings.config.settings import ENVIRONMENT_OVERRIDES  # noqa: E402
from propstrings.localization import get_formatter  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear cached settings/formatters and any ``PROPSTRINGS_*`` overrides."""

    for env in ENVIRONMENT_OVERRIDES:
        monkeypatch.delenv(env, raising=False)
    default_settings.cache_clear()
    get_formatter.cache_clear()

    yield

    default_settings.cache_clear()
    get_formatter.cache_clear()


@pytest.fixture()
def tables() -> dict[str, dict[str, str]]:
    """Return small in-memory template tables for two locales."""

    return {
        "en-US": {
            "pluralRule": "1",
            "greeting": "Hello",
            "hereHave": "Here, have %s and %2$S",
            "items": "one item;%s items",
            "onlyFallback": "Reference text with %S",
        },
        "fr": {
            "pluralRule": "2",
            "greeting": "Bonjour",
            "items": "%s article;%s articles",
        },
    }


@pytest.fixture()
def loader(tables: dict[str, dict[str, str]]) -> MappingLoader:
    """Provide a loader serving the in-memory tables."""

    return MappingLoader(tables)
