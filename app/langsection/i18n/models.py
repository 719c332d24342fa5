"""Translation models for the i18n system.

Defines the in-memory catalog: language code -> topic name -> section,
where a section maps keys to either plain text or a set of variants
(plural buckets or gender tags).
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

MISSING_TEXT = "Error missing text"
ERROR_MARKER = "error"


@dataclass(frozen=True)
class Text:
    """Plain translated string.

    Attributes:
        value: The translated text, possibly containing ``{{placeholders}}``.
    """

    value: str


@dataclass(frozen=True)
class VariantSet:
    """Keyed set of string variants for one translation key.

    Plural forms use the ``none``/``one``/``many`` buckets; gendered forms
    use free-form tags such as ``masc`` or ``fem``.

    Attributes:
        variants: Mapping of bucket or tag to translated string.
    """

    variants: Mapping[str, str] = field(default_factory=dict)

    def get(self, bucket: str) -> Optional[str]:
        """Return the variant for ``bucket``, or None if absent."""
        return self.variants.get(bucket)


SectionValue = Union[Text, VariantSet]
Section = Mapping[str, SectionValue]


def parse_section_value(raw: Any) -> Optional[SectionValue]:
    """Decide the section value kind from the shape of parsed content.

    A string becomes ``Text``. A mapping becomes ``VariantSet`` keeping only
    its string values. Any other shape yields None and the key is dropped.

    Args:
        raw: Value read from a topic file.

    Returns:
        SectionValue, or None for unsupported shapes.
    """
    if isinstance(raw, str):
        return Text(raw)
    if isinstance(raw, Mapping):
        return VariantSet(
            {
                str(bucket): variant
                for bucket, variant in raw.items()
                if isinstance(variant, str)
            }
        )
    return None


def parse_section(raw: Mapping[str, Any]) -> Dict[str, SectionValue]:
    """Build a section from a flat key -> value mapping.

    Args:
        raw: Top-level content of one topic file.

    Returns:
        Section with unsupported value shapes dropped.
    """
    section: Dict[str, SectionValue] = {}
    for key, value in raw.items():
        parsed = parse_section_value(value)
        if parsed is not None:
            section[str(key)] = parsed
    return section


def error_section() -> Dict[str, SectionValue]:
    """Section holding only the ``error`` marker."""
    return {ERROR_MARKER: Text(ERROR_MARKER)}


@dataclass(frozen=True)
class TranslationCatalog:
    """All loaded translations, organized by language then topic.

    Built once and read-only afterwards.

    Attributes:
        languages: {language_code: {topic: section}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    languages: Mapping[str, Mapping[str, Section]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def __post_init__(self):
        frozen = {
            code: MappingProxyType(
                {topic: MappingProxyType(dict(section)) for topic, section in topics.items()}
            )
            for code, topics in self.languages.items()
        }
        object.__setattr__(self, "languages", MappingProxyType(frozen))

    @classmethod
    def from_dict(
        cls, raw: Mapping[str, Mapping[str, Mapping[str, Any]]]
    ) -> "TranslationCatalog":
        """Build a catalog from plain nested data.

        Args:
            raw: {language_code: {topic: {key: str | {bucket: str}}}}.

        Returns:
            TranslationCatalog with values parsed by ``parse_section``.

        Example:
            catalog = TranslationCatalog.from_dict(
                {"en": {"ui": {"hello": "Hi {{name}}"}}}
            )
        """
        languages = {
            str(code): {str(topic): parse_section(section) for topic, section in topics.items()}
            for code, topics in raw.items()
        }
        return cls(
            languages=languages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    @classmethod
    def degraded(cls) -> "TranslationCatalog":
        """Single-entry catalog used when loading fails.

        Contains language ``error`` with topic ``error`` whose only key maps
        to the ``error`` marker text.
        """
        return cls(
            languages={ERROR_MARKER: {ERROR_MARKER: error_section()}},
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def has_language(self, code: str) -> bool:
        return code in self.languages

    def language_codes(self) -> List[str]:
        return sorted(self.languages)

    def topics(self, code: str) -> List[str]:
        """Topic names available for a language (empty if unknown)."""
        return sorted(self.languages.get(code, {}))

    def get_section(self, code: str, topic: str) -> Optional[Section]:
        """Return the section for ``topic`` in language ``code``.

        Args:
            code: Language code.
            topic: Topic file name (file stem).

        Returns:
            Section, or None if the language or topic is absent.
        """
        return self.languages.get(code, {}).get(topic)
