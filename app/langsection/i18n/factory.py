"""Factory functions for creating i18n components.

``initialize()`` is the explicit construction step: it loads the catalog and
language list once and returns a ready Translator. Loading failures never
propagate; they produce a degraded translator whose lookups still return
displayable strings.
"""

from pathlib import Path
from typing import Optional

import structlog

from langsection.configuration import settings
from langsection.i18n.loader import DirectoryTranslationLoader, TranslationLoader
from langsection.i18n.models import ERROR_MARKER, TranslationCatalog
from langsection.i18n.state import LanguageState
from langsection.i18n.translator import Translator

logger = structlog.get_logger()


def initialize(
    messages_dir: Optional[Path] = None,
    default_language: Optional[str] = None,
    fallback_language: Optional[str] = None,
    loader: Optional[TranslationLoader] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        messages_dir: Root translations folder (default: settings.i18n.MESSAGES_DIR).
            Ignored when ``loader`` is given.
        default_language: Language active at startup (default: settings.i18n.DEFAULT_LANGUAGE).
        fallback_language: Fallback language (default: settings.i18n.FALLBACK_LANGUAGE).
        loader: Optional pre-configured TranslationLoader.

    Returns:
        Translator: Ready translator. If loading failed, a degraded translator
        over ``TranslationCatalog.degraded()`` with both languages set to
        ``error``.

    Usage:
        # Use defaults from settings
        translator = initialize()

        # Custom folder and languages
        translator = initialize(Path("assets/messages"), "fr", "en")
        result = translator.view("menu")
        if result.is_success:
            title = result.data.text("title")
    """
    i18n_settings = settings.i18n
    default_language = default_language or i18n_settings.DEFAULT_LANGUAGE
    fallback_language = fallback_language or i18n_settings.FALLBACK_LANGUAGE

    if loader is None:
        loader = DirectoryTranslationLoader(
            messages_dir=Path(messages_dir or i18n_settings.MESSAGES_DIR),
            extensions=i18n_settings.FILE_EXTENSIONS,
            validate_locale_codes=i18n_settings.VALIDATE_LOCALE_CODES,
        )

    try:
        if i18n_settings.CHECK_SYMMETRY and isinstance(
            loader, DirectoryTranslationLoader
        ):
            loader.find_missing_topics()
        catalog = loader.load_all()
        available = loader.discover_languages()
    except (FileNotFoundError, ValueError, OSError) as e:
        logger.error("translations_load_failed", error=str(e))
        state = LanguageState(ERROR_MARKER, ERROR_MARKER, [ERROR_MARKER])
        return Translator(catalog=TranslationCatalog.degraded(), state=state)

    for role, code in (("current", default_language), ("fallback", fallback_language)):
        if not catalog.has_language(code):
            logger.warning(
                "configured_language_missing",
                role=role,
                language=code,
                available_languages=available,
            )

    state = LanguageState(default_language, fallback_language, available)
    translator = Translator(catalog=catalog, state=state)
    logger.info(
        "translator_created",
        language_count=len(available),
        current_language=default_language,
        fallback_language=fallback_language,
    )
    return translator
