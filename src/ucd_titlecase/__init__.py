"""Unicode titlecase mapping for characters and strings."""
from ucd_titlecase.casing import (
    UNICODE_VERSION,
    is_titlecase,
    titlecase_default,
    titlecase_tr_az,
    to_titlecase,
    to_titlecase_tr_az,
)
from ucd_titlecase.mapping import NUL, CaseMapping
from ucd_titlecase.strings import (
    starts_titlecase,
    starts_titlecase_rest_lower,
    title_first,
    title_first_lower_rest,
    title_first_lower_rest_tr_az,
    title_first_tr_az,
)
from ucd_titlecase.tr_az import (
    is_lowercase_tr_az,
    is_uppercase_tr_az,
    lowercase_tr_az,
    uppercase_tr_az,
)

__all__ = [
    "UNICODE_VERSION",
    "NUL",
    "CaseMapping",
    "titlecase_default",
    "titlecase_tr_az",
    "is_titlecase",
    "to_titlecase",
    "to_titlecase_tr_az",
    "uppercase_tr_az",
    "lowercase_tr_az",
    "is_uppercase_tr_az",
    "is_lowercase_tr_az",
    "title_first",
    "title_first_lower_rest",
    "title_first_tr_az",
    "title_first_lower_rest_tr_az",
    "starts_titlecase",
    "starts_titlecase_rest_lower",
]
