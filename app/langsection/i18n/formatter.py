"""Placeholder interpolation and plural bucket selection.

Placeholders are double-brace tokens with an optional word identifier,
e.g. ``{{name}}`` or ``{{}}``. The identifier is informative only:
substitution is positional, left to right.
"""

import re
from typing import Any, List, Sequence

PLACEHOLDER_PATTERN = re.compile(r"\{\{\w*\}\}")

PLURAL_NONE = "none"
PLURAL_ONE = "one"
PLURAL_MANY = "many"


def split_placeholders(line: str) -> List[str]:
    """Split ``line`` into the literal segments around placeholders.

    A line with N placeholders always yields N + 1 segments, some of which
    may be empty.

    Args:
        line: Translated string.

    Returns:
        Literal segments in order.
    """
    return PLACEHOLDER_PATTERN.split(line)


def interpolate(line: str, arguments: Sequence[Any]) -> str:
    """Substitute positional arguments into placeholders.

    Each placeholder receives the next argument, stringified. Placeholders
    left without an argument are removed. Extra arguments are ignored.

    Args:
        line: Translated string with ``{{...}}`` placeholders.
        arguments: Values to insert, in placeholder order.

    Returns:
        Interpolated string.
    """
    segments = split_placeholders(line)
    parts = []
    for index, segment in enumerate(segments):
        parts.append(segment)
        if index < len(segments) - 1 and index < len(arguments):
            parts.append(str(arguments[index]))
    return "".join(parts)


def interpolate_first(line: str, value: Any) -> str:
    """Insert ``value`` at the first placeholder only.

    Later placeholders are removed without substitution.
    """
    return interpolate(line, [value])


def plural_bucket(count: int) -> str:
    """Select the plural bucket for ``count``.

    Returns:
        ``none`` for 0, ``one`` for 1, ``many`` for anything else
        (negative counts included).
    """
    if count == 0:
        return PLURAL_NONE
    if count == 1:
        return PLURAL_ONE
    return PLURAL_MANY
