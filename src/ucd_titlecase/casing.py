"""Single-character titlecase lookups against the embedded UCD table."""
from bisect import bisect_left
from typing import Optional, Tuple

from ucd_titlecase._casing import TITLECASE_TABLE, UNICODE_VERSION
from ucd_titlecase.mapping import NUL, CaseMapping, require_char
from ucd_titlecase.tr_az import DOTTED_CAPITAL_I, LATIN_SMALL_I

_KEYS = tuple(key for key, _ in TITLECASE_TABLE)


def _lookup(c: str) -> Optional[Tuple[str, str, str]]:
    index = bisect_left(_KEYS, c)
    if index < len(_KEYS) and _KEYS[index] == c:
        return TITLECASE_TABLE[index][1]
    return None


def titlecase_default(c: str) -> Tuple[str, str, str]:
    """Return the titlecase mapping of c as three slots padded with NUL.

    Characters missing from the table are their own titlecase.
    """
    mapping = _lookup(require_char(c))
    if mapping is None:
        return (c, NUL, NUL)
    return mapping


def titlecase_tr_az(c: str) -> Tuple[str, str, str]:
    if require_char(c) == LATIN_SMALL_I:
        return (DOTTED_CAPITAL_I, NUL, NUL)
    return titlecase_default(c)


def is_titlecase(c: str) -> bool:
    """True if c is already in titlecase form, in any locale."""
    return _lookup(require_char(c)) is None


def to_titlecase(c: str) -> CaseMapping:
    return CaseMapping.from_table(titlecase_default(c))


def to_titlecase_tr_az(c: str) -> CaseMapping:
    return CaseMapping.from_table(titlecase_tr_az(c))
