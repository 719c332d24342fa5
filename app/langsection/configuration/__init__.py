"""Configuration module - public API.

Centralized configuration for langsection using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Catalog settings class (for testing/overrides)

Example:
    ```python
    from langsection.configuration import settings

    messages_dir = settings.i18n.MESSAGES_DIR
    fallback = settings.i18n.FALLBACK_LANGUAGE
    ```
"""

from langsection.configuration.i18n import I18nSettings
from langsection.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
