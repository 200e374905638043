"""Turkish and Azerbaijani case rules: the dotted and dotless I."""
from ucd_titlecase.mapping import CaseMapping, require_char

LATIN_CAPITAL_I = "I"
LATIN_SMALL_I = "i"
DOTTED_CAPITAL_I = "İ"
DOTLESS_SMALL_I = "ı"


def uppercase_tr_az(c: str) -> CaseMapping:
    """Uppercase c, mapping "i" to "İ" instead of "I"."""
    if require_char(c) == LATIN_SMALL_I:
        c = DOTTED_CAPITAL_I
    return CaseMapping.from_string(c.upper())


def lowercase_tr_az(c: str) -> str:
    """Lowercase c, mapping "I" to "ı" and "İ" to "i".

    Returns a single character rather than a CaseMapping. This holds only
    while U+0130 is the one character whose lowercase form has more than
    one codepoint, and U+0130 is handled here before the fallback. If
    Unicode adds another such character this must return a CaseMapping;
    test_tr_az.py fails when that happens.
    """
    if require_char(c) == LATIN_CAPITAL_I:
        return DOTLESS_SMALL_I
    if c == DOTTED_CAPITAL_I:
        return LATIN_SMALL_I
    return c.lower()[0]


# tr/az only changes case mapping, never case membership.

def is_uppercase_tr_az(c: str) -> bool:
    return require_char(c).isupper()


def is_lowercase_tr_az(c: str) -> bool:
    return require_char(c).islower()
