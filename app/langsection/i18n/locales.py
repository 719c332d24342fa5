"""Standard language codes for diagnostic checks on language folder names.

Only used to warn developers about folders such as ``english`` or ``eng``;
resolution never depends on this table.
"""

import re

# ISO 639-1 two-letter language codes
ISO_639_1_CODES = frozenset(
    """
    aa ab ae af ak am an ar as av ay az ba be bg bh bi bm bn bo br bs ca ce
    ch co cr cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr
    fy ga gd gl gn gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is
    it iu ja jv ka kg ki kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln
    lo lt lu lv mg mh mi mk ml mn mr ms mt my na nb nd ne ng nl nn no nr nv
    ny oc oj om or os pa pi pl ps pt qu rm rn ro ru rw sa sc sd se sg si sk
    sl sm sn so sq sr ss st su sv sw ta te tg th ti tk tl tn to tr ts tt tw
    ty ug uk ur uz ve vi vo wa wo xh yi yo za zh zu
    """.split()
)

# language, optional script (Latn, Hant) and/or region (US, 419)
_LOCALE_PATTERN = re.compile(
    r"^(?P<language>[a-z]{2})(?:[-_](?P<script>[A-Z][a-z]{3}))?(?:[-_](?P<region>[A-Z]{2}|\d{3}))?$"
)


def is_standard_locale(code: str) -> bool:
    """Check if ``code`` looks like a standard locale identifier.

    Accepts a bare ISO 639-1 code (``fr``) optionally followed by a script
    and/or region subtag separated by ``-`` or ``_`` (``pt-BR``,
    ``zh_Hant_TW``, ``es-419``).

    Args:
        code: Language folder name.

    Returns:
        True if the language part is a known ISO 639-1 code and any
        subtags are well formed.
    """
    match = _LOCALE_PATTERN.match(code)
    if match is None:
        return False
    return match.group("language") in ISO_639_1_CODES
