"""Row schema and invariants for the titlecase table assembly pipeline."""
import pandas as pd

TABLE_COLUMNS = [
    "codepoint",
    "mapping_0",
    "mapping_1",
    "mapping_2",
    "source",
    "line_number",
]

MAPPING_COLUMNS = ["mapping_0", "mapping_1", "mapping_2"]

# Unused trailing mapping slots
SENTINEL = 0

MAX_CODEPOINT = 0x10FFFF
SURROGATE_MIN, SURROGATE_MAX = 0xD800, 0xDFFF


class TableBuildError(ValueError):
    """Raised when UCD input cannot produce a consistent titlecase table."""


def is_scalar_value(cp: int) -> bool:
    return 0 <= cp <= MAX_CODEPOINT and not SURROGATE_MIN <= cp <= SURROGATE_MAX


def format_codepoint(cp: int) -> str:
    return f"U+{int(cp):04X}"


def parse_codepoint(field: str, source: str, line_number: int) -> int:
    """Parse a hex codepoint field, failing with the file and line on bad input."""
    text = field.strip()
    try:
        cp = int(text, 16)
    except ValueError:
        raise TableBuildError(f"{source}:{line_number}: invalid codepoint {text!r}") from None
    if not is_scalar_value(cp):
        raise TableBuildError(f"{source}:{line_number}: {text!r} is not a Unicode scalar value")
    return cp


def empty_dataframe() -> pd.DataFrame:
    """Return an empty DataFrame with the correct schema."""
    return pd.DataFrame(columns=TABLE_COLUMNS)


def make_row(codepoint: int, mapping: list, source: str, line_number: int) -> dict:
    """Create a single row dict, padding the mapping to three slots."""
    if not 1 <= len(mapping) <= 3:
        raise TableBuildError(
            f"{source}:{line_number}: {format_codepoint(codepoint)} maps to "
            f"{len(mapping)} codepoints, expected 1 to 3"
        )
    slots = list(mapping) + [SENTINEL] * (3 - len(mapping))
    return {
        "codepoint": codepoint,
        "mapping_0": slots[0],
        "mapping_1": slots[1],
        "mapping_2": slots[2],
        "source": source,
        "line_number": line_number,
    }


def to_dataframe(rows: list) -> pd.DataFrame:
    if not rows:
        return empty_dataframe()
    df = pd.DataFrame(rows, columns=TABLE_COLUMNS)
    for column in ["codepoint", "line_number"] + MAPPING_COLUMNS:
        df[column] = df[column].astype("int64")
    return df


def validate_table(df: pd.DataFrame) -> pd.DataFrame:
    """Validate that a merged table can be embedded and binary-searched.

    Checks that keys are strictly increasing, that no entry maps to itself,
    that slot 0 is never the sentinel and that a sentinel slot is never
    followed by a real codepoint.

    Raises TableBuildError on the first violation found.
    Returns the DataFrame unchanged if valid.
    """
    missing = set(TABLE_COLUMNS) - set(df.columns)
    if missing:
        raise TableBuildError(f"Missing columns: {missing}")

    keys = df["codepoint"].tolist()
    for prev, cur in zip(keys, keys[1:]):
        if cur <= prev:
            raise TableBuildError(
                f"Table not strictly increasing: {format_codepoint(cur)} follows {format_codepoint(prev)}"
            )

    for row in df.itertuples(index=False):
        cp = format_codepoint(row.codepoint)
        if not is_scalar_value(row.codepoint):
            raise TableBuildError(f"Invalid key {cp}")
        if row.mapping_0 == SENTINEL:
            raise TableBuildError(f"Empty mapping for {cp}")
        if row.mapping_0 == row.codepoint:
            raise TableBuildError(f"Self mapping for {cp}")
        if row.mapping_1 == SENTINEL and row.mapping_2 != SENTINEL:
            raise TableBuildError(f"Gap in mapping for {cp}")

    return df
