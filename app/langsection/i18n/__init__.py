"""i18n system - per-topic translation catalogs with two-level fallback.

Main components:
- models: Text, VariantSet, TranslationCatalog and the missing-text sentinel
- loader: TranslationLoader and DirectoryTranslationLoader (JSON/YAML)
- state: LanguageState (current and fallback language)
- translator: Translator and ResolvedView (fallback resolution, lookups)
- formatter: placeholder interpolation and plural buckets
- factory: initialize() construction step
- service: TranslationService facade
"""

from langsection.i18n.factory import initialize
from langsection.i18n.loader import DirectoryTranslationLoader, TranslationLoader
from langsection.i18n.models import (
    MISSING_TEXT,
    Text,
    TranslationCatalog,
    VariantSet,
)
from langsection.i18n.service import TranslationService
from langsection.i18n.state import LanguageState
from langsection.i18n.translator import ResolvedView, Translator

__all__ = [
    "MISSING_TEXT",
    "Text",
    "VariantSet",
    "TranslationCatalog",
    "TranslationLoader",
    "DirectoryTranslationLoader",
    "LanguageState",
    "ResolvedView",
    "Translator",
    "TranslationService",
    "initialize",
]
