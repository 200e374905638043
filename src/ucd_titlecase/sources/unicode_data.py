"""Source adapter for UnicodeData.txt: simple one-to-one titlecase mappings."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ucd_titlecase.schema import TableBuildError, make_row, parse_codepoint, to_dataframe

log = logging.getLogger(__name__)

FILENAME = "UnicodeData.txt"

# The last field is Simple_Titlecase_Mapping, which UCD fills with the
# uppercase mapping unless the character has a distinct titlecase form.
_FIELD_COUNT = 15


def parse_line(line: str, line_number: int) -> Optional[dict]:
    fields = line.split(";")
    if len(fields) != _FIELD_COUNT:
        raise TableBuildError(
            f"{FILENAME}:{line_number}: expected {_FIELD_COUNT} fields, got {len(fields)}"
        )

    codepoint = parse_codepoint(fields[0], FILENAME, line_number)
    title = fields[-1].strip()
    if not title:
        return None
    mapped = parse_codepoint(title, FILENAME, line_number)
    if mapped == codepoint:
        return None
    return make_row(codepoint, [mapped], FILENAME, line_number)


def parse_text(text: str) -> List[dict]:
    rows = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip() or line.startswith("#"):
            continue
        row = parse_line(line, line_number)
        if row is not None:
            rows.append(row)
    return rows


def load(data_dir: Path = Path("data/ucd"), **kwargs) -> pd.DataFrame:
    """Load simple titlecase mappings that differ from their source character."""
    path = Path(data_dir) / FILENAME
    if not path.exists():
        raise TableBuildError(f"Missing UCD file: {path}")
    rows = parse_text(path.read_text(encoding="utf-8"))
    log.info(f"  {FILENAME}: {len(rows)} titlecase mappings")
    return to_dataframe(rows)
