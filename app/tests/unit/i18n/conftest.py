"""Feature-level fixtures for i18n system tests.

Provides translation trees on disk, loaders and translators for resolution
and formatting scenarios.
"""

import pytest

from langsection.i18n import DirectoryTranslationLoader
from tests.factories.i18n import DEFAULT_CATALOG_DATA, make_translator, write_messages_tree


@pytest.fixture
def messages_dir(tmp_path):
    """Create a temporary messages tree from the default catalog data.

    Returns a directory structure like:
    - en/ui.json
    - en/menu.json
    - fr/ui.json
    """
    return write_messages_tree(tmp_path / "messages", DEFAULT_CATALOG_DATA)


@pytest.fixture
def directory_loader(messages_dir):
    """Create DirectoryTranslationLoader for the temporary messages tree."""
    return DirectoryTranslationLoader(messages_dir)


@pytest.fixture
def translator():
    """Translator with French active and English as fallback."""
    return make_translator(current="fr", fallback="en")


@pytest.fixture
def ui_view(translator):
    """ResolvedView for the "ui" topic (French over English)."""
    return translator.view("ui").data
