"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_catalog,
    make_language_state,
    make_translator,
    write_messages_tree,
)

__all__ = [
    "make_catalog",
    "make_language_state",
    "make_translator",
    "write_messages_tree",
]
