"""Source adapter for SpecialCasing.txt: unconditional multi-codepoint titlecase mappings."""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ucd_titlecase.schema import TableBuildError, make_row, parse_codepoint, to_dataframe

log = logging.getLogger(__name__)

FILENAME = "SpecialCasing.txt"

# <code>; <lower>; <title>; <upper>; (<condition_list>;)? # <comment>
_MIN_FIELDS = 4

_VERSION_PATTERN = re.compile(r"^#\s*SpecialCasing-(\d+(?:\.\d+)*)\.txt", re.MULTILINE)


def parse_unicode_version(text: str) -> str:
    """Return the UCD version named in the file header, or "unknown"."""
    match = _VERSION_PATTERN.search(text)
    return match.group(1) if match else "unknown"


def parse_line(line: str, line_number: int) -> Optional[dict]:
    """Parse one record into a table row, or None if it contributes nothing."""
    data = line.split("#", 1)[0]
    if not data.strip():
        return None

    fields = [field.strip() for field in data.split(";")]
    if len(fields) < _MIN_FIELDS:
        raise TableBuildError(
            f"{FILENAME}:{line_number}: expected at least {_MIN_FIELDS} fields, got {len(fields)}"
        )

    codepoint = parse_codepoint(fields[0], FILENAME, line_number)
    conditions = fields[4] if len(fields) > 4 else ""
    if conditions:
        log.debug(f"    Skipping conditional mapping at line {line_number}: {conditions}")
        return None

    title = fields[2].split()
    if not title:
        raise TableBuildError(f"{FILENAME}:{line_number}: empty titlecase field")
    mapping = [parse_codepoint(field, FILENAME, line_number) for field in title]
    if mapping[0] == codepoint:
        return None
    return make_row(codepoint, mapping, FILENAME, line_number)


def parse_text(text: str) -> List[dict]:
    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.startswith("#"):
            continue
        row = parse_line(line, line_number)
        if row is not None:
            rows.append(row)
    return rows


def read_text(data_dir: Path) -> str:
    path = Path(data_dir) / FILENAME
    if not path.exists():
        raise TableBuildError(f"Missing UCD file: {path}")
    return path.read_text(encoding="utf-8")


def load(data_dir: Path = Path("data/ucd"), **kwargs) -> pd.DataFrame:
    """Load unconditional titlecase mappings that differ from their source character.

    The UCD version from the file header is kept in df.attrs["unicode_version"].
    """
    text = read_text(data_dir)
    rows = parse_text(text)
    log.info(f"  {FILENAME}: {len(rows)} titlecase mappings")
    df = to_dataframe(rows)
    df.attrs["unicode_version"] = parse_unicode_version(text)
    return df
