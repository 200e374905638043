"""String policies that titlecase the first character of a string."""
from ucd_titlecase.casing import is_titlecase, to_titlecase, to_titlecase_tr_az
from ucd_titlecase.tr_az import lowercase_tr_az


def title_first(s: str) -> str:
    """Titlecase the first character of s and keep the rest unchanged."""
    if not s:
        return ""
    return str(to_titlecase(s[0])) + s[1:]


def title_first_lower_rest(s: str) -> str:
    """Titlecase the first character of s and lowercase each remaining character."""
    if not s:
        return ""
    return str(to_titlecase(s[0])) + "".join(c.lower() for c in s[1:])


def title_first_tr_az(s: str) -> str:
    if not s:
        return ""
    return str(to_titlecase_tr_az(s[0])) + s[1:]


def title_first_lower_rest_tr_az(s: str) -> str:
    if not s:
        return ""
    return str(to_titlecase_tr_az(s[0])) + "".join(lowercase_tr_az(c) for c in s[1:])


def starts_titlecase(s: str) -> bool:
    """True if s is non-empty and its first character is in titlecase form."""
    return bool(s) and is_titlecase(s[0])


def starts_titlecase_rest_lower(s: str) -> bool:
    """True if s starts in titlecase form and every other character is lowercase."""
    return starts_titlecase(s) and all(c.islower() for c in s[1:])
