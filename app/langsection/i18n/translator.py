"""Resolution engine: binds topic sections and looks up translated strings.

``Translator.view(topic)`` selects the current language's section for a
topic (or the fallback language's when the current one lacks that topic)
and pairs it with the fallback section. Key lookups on the resulting
``ResolvedView`` try the primary section, then the fallback section, and
return ``MISSING_TEXT`` when both miss.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, List, Optional, Sequence

from langsection.i18n.formatter import interpolate, interpolate_first, plural_bucket
from langsection.i18n.models import (
    MISSING_TEXT,
    Section,
    Text,
    TranslationCatalog,
    VariantSet,
    error_section,
)
from langsection.i18n.state import LanguageState
from langsection.logging import get_module_logger
from langsection.operations import OperationResult, OperationStatus

logger = get_module_logger()

LANGUAGE_STATE_INVALID = "language_state_invalid"


@dataclass(frozen=True)
class ResolvedView:
    """Primary and fallback sections bound for one topic.

    Attributes:
        topic: Topic file name the view was built for.
        primary: Section from the current language, or a copy of the
            fallback section when the current language lacks the topic.
        fallback: Section from the fallback language, or the ``error``
            marker section when the fallback language lacks the topic.
    """

    topic: str
    primary: Section
    fallback: Section

    def text(self, key: str) -> str:
        """Return the plain text for ``key``, or ``MISSING_TEXT``."""
        value = self._lookup_text(key)
        if value is None:
            logger.debug("translation_not_found", topic=self.topic, key=key)
            return MISSING_TEXT
        return value

    def text_with_args(self, key: str, arguments: Sequence[Any]) -> str:
        """Return the text for ``key`` with positional arguments substituted.

        Args:
            key: Translation key.
            arguments: Values for the ``{{...}}`` placeholders, in order.

        Returns:
            Interpolated text, or ``MISSING_TEXT``.
        """
        value = self._lookup_text(key)
        if value is None:
            logger.debug("translation_not_found", topic=self.topic, key=key)
            return MISSING_TEXT
        return interpolate(value, arguments)

    def plural(self, key: str, count: int) -> str:
        """Return the plural form of ``key`` for ``count``.

        The bucket is ``none`` for 0, ``one`` for 1 and ``many`` otherwise;
        ``count`` is inserted at the first placeholder.
        """
        value = self._lookup_variant(key, plural_bucket(count))
        if value is None:
            return MISSING_TEXT
        return interpolate_first(value, count)

    def gendered(self, key: str, tag: str) -> str:
        """Return the variant of ``key`` whose tag equals ``tag`` exactly."""
        value = self._lookup_variant(key, tag)
        if value is None:
            return MISSING_TEXT
        return value

    def gendered_with_args(self, key: str, tag: str, arguments: Sequence[Any]) -> str:
        """Gendered lookup followed by positional interpolation."""
        value = self._lookup_variant(key, tag)
        if value is None:
            return MISSING_TEXT
        return interpolate(value, arguments)

    def has_key(self, key: str) -> bool:
        """Check if ``key`` exists in either bound section."""
        return key in self.primary or key in self.fallback

    def _lookup_text(self, key: str) -> Optional[str]:
        for section in (self.primary, self.fallback):
            value = section.get(key)
            if isinstance(value, Text):
                return value.value
        return None

    def _lookup_variant(self, key: str, bucket: str) -> Optional[str]:
        # Same bucket in the fallback section; never a different bucket.
        for section in (self.primary, self.fallback):
            value = section.get(key)
            if isinstance(value, VariantSet):
                variant = value.get(bucket)
                if variant is not None:
                    return variant
        logger.debug(
            "variant_not_found", topic=self.topic, key=key, bucket=bucket
        )
        return None


class Translator:
    """Resolves topic sections against the catalog and language state.

    Attributes:
        catalog: Read-only TranslationCatalog.
        state: LanguageState holding the current and fallback languages.
    """

    def __init__(self, catalog: TranslationCatalog, state: LanguageState):
        """Initialize Translator.

        Args:
            catalog: Loaded (or degraded) catalog.
            state: Language state validated against the discovered languages.
        """
        self.catalog = catalog
        self.state = state
        logger.info(
            "initialized_translator",
            current_language=state.get_current(),
            fallback_language=state.get_fallback(),
            language_count=len(catalog.languages),
        )

    def set_current_language(self, code: str) -> bool:
        return self.state.set_current(code)

    def set_fallback_language(self, code: str) -> bool:
        return self.state.set_fallback(code)

    def get_current_language(self) -> str:
        return self.state.get_current()

    def get_fallback_language(self) -> str:
        return self.state.get_fallback()

    def get_available_languages(self) -> List[str]:
        return list(self.state.available)

    def view(self, topic: str) -> OperationResult:
        """Bind the primary and fallback sections for ``topic``.

        Args:
            topic: Topic file name (e.g. "menu").

        Returns:
            OperationResult whose ``data`` is a ResolvedView on success.
            If the current or fallback language is not in the catalog at
            all, a NOT_FOUND result with error_code ``language_state_invalid``.
        """
        current = self.state.get_current()
        fallback = self.state.get_fallback()

        for role, code in (("current", current), ("fallback", fallback)):
            if not self.catalog.has_language(code):
                logger.error(
                    "language_not_in_catalog",
                    role=role,
                    language=code,
                    available_languages=self.catalog.language_codes(),
                )
                return OperationResult.error(
                    OperationStatus.NOT_FOUND,
                    f"{role.capitalize()} language '{code}' is not in the catalog",
                    error_code=LANGUAGE_STATE_INVALID,
                )

        fallback_section = self.catalog.get_section(fallback, topic)
        if fallback_section is None:
            logger.warning(
                "fallback_topic_missing", topic=topic, fallback_language=fallback
            )
            fallback_section = MappingProxyType(error_section())

        primary_section = self.catalog.get_section(current, topic)
        if primary_section is None:
            if current != fallback:
                logger.info(
                    "used_fallback_topic",
                    topic=topic,
                    requested_language=current,
                    fallback_language=fallback,
                )
            primary_section = MappingProxyType(dict(fallback_section))

        return OperationResult.success(
            data=ResolvedView(
                topic=topic, primary=primary_section, fallback=fallback_section
            )
        )
