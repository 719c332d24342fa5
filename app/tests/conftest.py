import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `langsection.i18n`) and `tests.factories` works during pytest
# collection even when pytest is invoked without the pyproject configuration.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from langsection.logging import configure_logging  # noqa: E402

# Act as the host application: configure logging once (silenced under pytest).
configure_logging()
