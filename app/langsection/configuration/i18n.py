"""Translation catalog settings."""

from typing import List

from pydantic import Field

from langsection.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Catalog location and language defaults.

    Environment Variables:
        I18N_MESSAGES_DIR: Root folder holding one subfolder per language (default: messages)
        I18N_DEFAULT_LANGUAGE: Language active at startup (default: en)
        I18N_FALLBACK_LANGUAGE: Language consulted for missing topics/keys (default: en)
        I18N_FILE_EXTENSIONS: Topic file extensions to load (default: .json, .yml, .yaml)
        I18N_CHECK_SYMMETRY: Warn about topic files missing from a language (default: True)
        I18N_VALIDATE_LOCALE_CODES: Warn about non-standard language folder names (default: True)

    Example:
        ```python
        from langsection.configuration import settings

        messages_dir = settings.i18n.MESSAGES_DIR
        ```
    """

    MESSAGES_DIR: str = Field(default="messages", alias="I18N_MESSAGES_DIR")
    DEFAULT_LANGUAGE: str = Field(default="en", alias="I18N_DEFAULT_LANGUAGE")
    FALLBACK_LANGUAGE: str = Field(default="en", alias="I18N_FALLBACK_LANGUAGE")
    FILE_EXTENSIONS: List[str] = Field(
        default=[".json", ".yml", ".yaml"], alias="I18N_FILE_EXTENSIONS"
    )
    CHECK_SYMMETRY: bool = Field(default=True, alias="I18N_CHECK_SYMMETRY")
    VALIDATE_LOCALE_CODES: bool = Field(
        default=True, alias="I18N_VALIDATE_LOCALE_CODES"
    )
