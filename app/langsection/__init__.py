"""langsection - per-topic translation catalogs with two-level fallback.

Packages:
- configuration: Pydantic settings (log level, messages directory, languages)
- logging: structlog setup and module loggers
- operations: OperationResult / OperationStatus for recoverable failures
- i18n: catalog model, loader, language state, resolution and formatting
"""
