"""Tests for langsection.i18n.state module."""

import pytest

from tests.factories.i18n import make_language_state


@pytest.mark.unit
class TestLanguageState:
    """Tests for LanguageState."""

    def test_initial_values(self):
        """State starts with the given current and fallback languages."""
        state = make_language_state(current="fr", fallback="en")
        assert state.get_current() == "fr"
        assert state.get_fallback() == "en"
        assert state.available == ("en", "fr")

    def test_set_current_known_language(self):
        """set_current() switches to a discovered language."""
        state = make_language_state(current="fr")
        assert state.set_current("en") is True
        assert state.get_current() == "en"

    def test_set_current_unknown_language_is_ignored(self):
        """set_current() leaves state unchanged for unknown codes."""
        state = make_language_state(current="fr", fallback="en")
        assert state.set_current("de") is False
        assert state.get_current() == "fr"
        assert state.get_fallback() == "en"

    def test_set_fallback_known_language(self):
        """set_fallback() switches the fallback independently."""
        state = make_language_state(current="fr", fallback="en")
        assert state.set_fallback("fr") is True
        assert state.get_fallback() == "fr"
        assert state.get_current() == "fr"

    def test_set_fallback_unknown_language_is_ignored(self):
        """set_fallback() leaves state unchanged for unknown codes."""
        state = make_language_state(current="fr", fallback="en")
        assert state.set_fallback("xx") is False
        assert state.get_fallback() == "en"
        assert state.get_current() == "fr"

    def test_codes_are_case_sensitive(self):
        """Language codes are matched verbatim."""
        state = make_language_state(current="fr")
        assert state.set_current("EN") is False
        assert state.get_current() == "fr"
