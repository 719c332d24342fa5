"""Current and fallback language tracking.

Language switches are usually driven by menus limited to valid choices, so
an unknown code is logged and ignored instead of raising.
"""

from typing import Iterable, Tuple

from langsection.logging import get_module_logger

logger = get_module_logger()


class LanguageState:
    """Holds the active language and the fallback language.

    The only mutable state of the resolver. Not locked: the host is expected
    to serialize writers (e.g. one update phase per frame or request).

    Attributes:
        available: Language codes discovered by the loader; switches are
            validated against this list.
    """

    def __init__(self, current: str, fallback: str, available: Iterable[str]):
        """Initialize language state.

        Args:
            current: Language active at startup.
            fallback: Language consulted for missing topics and keys.
            available: Discovered language codes.
        """
        self._current = current
        self._fallback = fallback
        self.available: Tuple[str, ...] = tuple(available)

    def set_current(self, code: str) -> bool:
        """Switch the active language.

        Args:
            code: Language code to activate.

        Returns:
            True if the switch applied, False if ``code`` is unknown and the
            request was ignored.
        """
        if not self._is_available(code, role="current"):
            return False
        self._current = code
        logger.info("current_language_changed", language=code)
        return True

    def set_fallback(self, code: str) -> bool:
        """Switch the fallback language. Same contract as ``set_current``."""
        if not self._is_available(code, role="fallback"):
            return False
        self._fallback = code
        logger.info("fallback_language_changed", language=code)
        return True

    def get_current(self) -> str:
        return self._current

    def get_fallback(self) -> str:
        return self._fallback

    def _is_available(self, code: str, role: str) -> bool:
        if code in self.available:
            return True
        logger.warning(
            "unknown_language_ignored",
            language=code,
            role=role,
            available_languages=list(self.available),
        )
        return False
