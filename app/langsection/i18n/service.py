"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for hosts that own
their own lifecycle (game loops, UI frameworks, request handlers).
"""

from typing import Any, List, Optional, Sequence

from langsection.i18n.factory import initialize
from langsection.i18n.models import MISSING_TEXT
from langsection.i18n.translator import Translator
from langsection.operations import OperationResult


class TranslationService:
    """Class-based translation service.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance created by ``initialize()``.

    Usage:
        service = TranslationService()
        service.set_current_language("fr")

        result = service.view("menu")
        if result.is_success:
            label = result.data.plural("items", count)

        # One-off lookups
        title = service.translate("menu", "title")
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via ``initialize()``.
        """
        self._translator = translator or initialize()

    def set_current_language(self, code: str) -> bool:
        return self._translator.set_current_language(code)

    def set_fallback_language(self, code: str) -> bool:
        return self._translator.set_fallback_language(code)

    def get_current_language(self) -> str:
        return self._translator.get_current_language()

    def get_fallback_language(self) -> str:
        return self._translator.get_fallback_language()

    def get_available_languages(self) -> List[str]:
        return self._translator.get_available_languages()

    def view(self, topic: str) -> OperationResult:
        """Bind the sections for ``topic``; see ``Translator.view``."""
        return self._translator.view(topic)

    def translate(
        self,
        topic: str,
        key: str,
        arguments: Optional[Sequence[Any]] = None,
    ) -> str:
        """Resolve a single plain text key.

        Args:
            topic: Topic file name.
            key: Translation key.
            arguments: Optional positional placeholder values.

        Returns:
            Translated text, or ``MISSING_TEXT`` when the key is missing or
            the language state is invalid.
        """
        result = self._translator.view(topic)
        if not result.is_success:
            return MISSING_TEXT
        if arguments:
            return result.data.text_with_args(key, arguments)
        return result.data.text(key)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
