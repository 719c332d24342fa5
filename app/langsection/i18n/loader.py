"""Translation loading interface and implementations.

Defines the contract for loading a catalog and provides a directory-based
loader reading one folder per language and one file per topic:

    messages/
    ├── en/
    │   ├── menu.json
    │   └── errors.yaml
    └── fr/
        └── menu.json
"""

import json
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List

import structlog
import yaml

from langsection.i18n.locales import is_standard_locale
from langsection.i18n.models import SectionValue, TranslationCatalog, parse_section

logger = structlog.get_logger(component="i18n.loader")

DEFAULT_EXTENSIONS = (".json", ".yml", ".yaml")


class TranslationLoader(ABC):
    """Abstract base for catalog loaders."""

    @abstractmethod
    def load_all(self) -> TranslationCatalog:
        """Load translations for every available language.

        Returns:
            Fully built TranslationCatalog.

        Raises:
            FileNotFoundError: If the translation source is missing.
            ValueError: If a translation file cannot be parsed.
        """

    @abstractmethod
    def discover_languages(self) -> List[str]:
        """Return the language codes available from the source."""


class DirectoryTranslationLoader(TranslationLoader):
    """Loader for a tree of per-language folders of per-topic files.

    JSON and YAML files are supported. The top level of each file must be a
    mapping of key to either a string or a mapping of string to string;
    other value shapes are dropped.

    Attributes:
        messages_dir: Root folder with one subfolder per language.
        extensions: File suffixes treated as topic files.
        validate_locale_codes: Warn about non-standard folder names.
    """

    def __init__(
        self,
        messages_dir: Path,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        validate_locale_codes: bool = True,
    ):
        """Initialize directory loader.

        Args:
            messages_dir: Root folder with one subfolder per language.
            extensions: File suffixes treated as topic files.
            validate_locale_codes: Warn about non-standard folder names.
        """
        self.messages_dir = Path(messages_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.validate_locale_codes = validate_locale_codes

    def discover_languages(self) -> List[str]:
        """List language folders under ``messages_dir``.

        Returns:
            Sorted language codes.

        Raises:
            FileNotFoundError: If ``messages_dir`` is not a directory.
        """
        codes = [folder.name for folder in self._language_dirs()]
        if self.validate_locale_codes:
            for code in codes:
                if not is_standard_locale(code):
                    logger.warning("non_standard_locale_code", locale=code)
        logger.debug("discovered_languages", languages=codes)
        return codes

    def load_all(self) -> TranslationCatalog:
        """Load every topic file of every language folder.

        Returns:
            TranslationCatalog covering all language folders.

        Raises:
            FileNotFoundError: If ``messages_dir`` is not a directory.
            ValueError: If a topic file cannot be parsed.
        """
        languages: Dict[str, Dict[str, Dict[str, SectionValue]]] = {}
        file_count = 0

        for lang_dir in self._language_dirs():
            topics: Dict[str, Dict[str, SectionValue]] = {}
            for topic_file in self._topic_files(lang_dir):
                section = parse_section(self._read_file(topic_file))
                if topic_file.stem in topics:
                    logger.warning(
                        "duplicate_topic_file",
                        language=lang_dir.name,
                        topic=topic_file.stem,
                        file=str(topic_file),
                    )
                    topics[topic_file.stem].update(section)
                else:
                    topics[topic_file.stem] = section
                file_count += 1
            languages[lang_dir.name] = topics

        logger.info(
            "loaded_translations",
            messages_dir=str(self.messages_dir),
            language_count=len(languages),
            file_count=file_count,
        )
        return TranslationCatalog(
            languages=languages,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )

    def find_missing_topics(self) -> Dict[str, List[str]]:
        """Report topic files that some language folders lack.

        Diagnostic only: resolution falls back to the fallback language for
        missing topics anyway.

        Returns:
            {language_code: sorted missing topic names}, only for languages
            with gaps.

        Raises:
            FileNotFoundError: If ``messages_dir`` is not a directory.
        """
        topics_by_language = {
            lang_dir.name: {path.stem for path in self._topic_files(lang_dir)}
            for lang_dir in self._language_dirs()
        }
        all_topics = set().union(*topics_by_language.values()) if topics_by_language else set()

        missing: Dict[str, List[str]] = {}
        for language, topics in sorted(topics_by_language.items()):
            gaps = sorted(all_topics - topics)
            if gaps:
                missing[language] = gaps
                for topic in gaps:
                    logger.warning("missing_topic_file", language=language, topic=topic)
        return missing

    def _language_dirs(self) -> List[Path]:
        if not self.messages_dir.is_dir():
            raise FileNotFoundError(
                f"Messages directory not found: {self.messages_dir}"
            )
        return sorted(
            path
            for path in self.messages_dir.iterdir()
            if path.is_dir() and not path.name.startswith(("_", "."))
        )

    def _topic_files(self, lang_dir: Path) -> List[Path]:
        return sorted(
            path
            for path in lang_dir.iterdir()
            if path.is_file() and path.suffix.lower() in self.extensions
        )

    def _read_file(self, topic_file: Path) -> Dict[str, Any]:
        """Parse one topic file into its top-level mapping.

        Raises:
            ValueError: If the file is not valid JSON/YAML or not UTF-8.
        """
        try:
            with open(topic_file, "r", encoding="utf-8") as f:
                if topic_file.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            logger.error("translation_parse_error", file=str(topic_file), error=str(e))
            raise ValueError(f"Failed to parse {topic_file}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "invalid_topic_format", file=str(topic_file), expected="dict"
            )
            return {}
        return data

