"""Tests for langsection.i18n.factory module."""

import pytest

from langsection.configuration import settings
from langsection.i18n import MISSING_TEXT, DirectoryTranslationLoader, initialize
from langsection.i18n.models import ERROR_MARKER
from langsection.i18n.translator import LANGUAGE_STATE_INVALID
from langsection.operations import OperationStatus
from tests.factories.i18n import write_messages_tree


@pytest.mark.unit
class TestInitialize:
    """Tests for initialize()."""

    def test_initialize_from_directory(self, messages_dir):
        """initialize() loads the tree and sets the requested languages."""
        translator = initialize(messages_dir, default_language="fr", fallback_language="en")
        assert translator.get_current_language() == "fr"
        assert translator.get_fallback_language() == "en"
        assert translator.get_available_languages() == ["en", "fr"]
        assert translator.view("ui").data.text("title") == "Settings"

    def test_initialize_uses_settings_defaults(self, messages_dir, monkeypatch):
        """Languages and directory default to settings.i18n values."""
        monkeypatch.setattr(settings.i18n, "MESSAGES_DIR", str(messages_dir))
        monkeypatch.setattr(settings.i18n, "DEFAULT_LANGUAGE", "fr")
        monkeypatch.setattr(settings.i18n, "FALLBACK_LANGUAGE", "en")
        translator = initialize()
        assert translator.get_current_language() == "fr"
        assert translator.get_fallback_language() == "en"
        assert translator.view("ui").data.text_with_args("hello", ["Léa"]) == "Salut Léa"

    def test_initialize_with_custom_loader(self, messages_dir):
        """A pre-configured loader is used as given."""
        loader = DirectoryTranslationLoader(messages_dir, extensions=[".json"])
        translator = initialize(loader=loader, default_language="en", fallback_language="en")
        assert translator.view("menu").data.text("quit") == "Quit"

    def test_initialize_without_symmetry_check(self, messages_dir, monkeypatch):
        """The symmetry check can be switched off."""
        monkeypatch.setattr(settings.i18n, "CHECK_SYMMETRY", False)
        calls = []
        monkeypatch.setattr(
            DirectoryTranslationLoader,
            "find_missing_topics",
            lambda self: calls.append(self) or {},
        )
        initialize(messages_dir, "en", "en")
        assert calls == []

    def test_initialize_runs_symmetry_check(self, messages_dir, monkeypatch):
        """The symmetry check runs when enabled."""
        monkeypatch.setattr(settings.i18n, "CHECK_SYMMETRY", True)
        calls = []
        monkeypatch.setattr(
            DirectoryTranslationLoader,
            "find_missing_topics",
            lambda self: calls.append(self) or {},
        )
        initialize(messages_dir, "en", "en")
        assert len(calls) == 1

    def test_missing_directory_degrades(self, tmp_path):
        """A missing directory yields a working degraded translator."""
        translator = initialize(tmp_path / "nonexistent", "en", "en")
        assert translator.get_current_language() == ERROR_MARKER
        assert translator.get_fallback_language() == ERROR_MARKER
        assert translator.get_available_languages() == [ERROR_MARKER]

        result = translator.view("menu")
        assert result.is_success
        assert result.data.text("start") == MISSING_TEXT
        assert result.data.plural("items", 3) == MISSING_TEXT
        assert translator.view(ERROR_MARKER).data.text(ERROR_MARKER) == ERROR_MARKER

    def test_malformed_file_degrades(self, tmp_path):
        """A malformed topic file yields the degraded translator."""
        lang_dir = tmp_path / "en"
        lang_dir.mkdir()
        (lang_dir / "ui.json").write_text("{broken", encoding="utf-8")
        translator = initialize(tmp_path, "en", "en")
        assert translator.get_available_languages() == [ERROR_MARKER]
        assert translator.view("ui").data.text("hello") == MISSING_TEXT

    def test_degraded_translator_ignores_language_switch(self, tmp_path):
        """Only the error language can be selected in degraded mode."""
        translator = initialize(tmp_path / "nonexistent", "en", "en")
        assert translator.set_current_language("en") is False
        assert translator.get_current_language() == ERROR_MARKER

    def test_configured_language_missing_is_reported_by_view(self, tmp_path):
        """A configured language without a folder makes view() fail softly."""
        root = write_messages_tree(tmp_path, {"fr": {"ui": {"hello": "Salut"}}})
        translator = initialize(root, default_language="fr", fallback_language="en")
        result = translator.view("ui")
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == LANGUAGE_STATE_INVALID

        # Recover by pointing the fallback at a discovered language
        assert translator.set_fallback_language("fr") is True
        assert translator.view("ui").data.text("hello") == "Salut"
