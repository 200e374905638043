"""Titlecase table assembly: loads the UCD sources, merges, validates and writes the table module."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ucd_titlecase.schema import (
    MAPPING_COLUMNS,
    SENTINEL,
    TableBuildError,
    empty_dataframe,
    format_codepoint,
    validate_table,
)
from ucd_titlecase.sources import SOURCES, load_source

log = logging.getLogger(__name__)

DEFAULT_UCD_DIR = Path("data/ucd")
DEFAULT_OUTPUT = Path(__file__).parent / "_casing.py"

_MODULE_TEMPLATE = '''"""Titlecase exceptions from the Unicode Character Database, version {version}.

AUTO GENERATED! DO NOT EDIT MANUALLY! See ucd_titlecase/assemble.py
"""

UNICODE_VERSION = "{version}"

TITLECASE_TABLE = (
{entries}
)
'''


def _describe_mapping(row) -> str:
    slots = [row.mapping_0, row.mapping_1, row.mapping_2]
    return " ".join(format_codepoint(cp) for cp in slots if cp != SENTINEL)


def merge_sources(frames: List[pd.DataFrame]) -> pd.DataFrame:
    """Merge source rows into one table keyed by codepoint.

    A codepoint listed more than once must carry the same mapping in all
    three slots every time; identical repeats collapse to the first row.
    Raises TableBuildError naming the first conflicting codepoint.
    """
    frames = [df for df in frames if len(df)]
    if not frames:
        return empty_dataframe()

    combined = pd.concat(frames, ignore_index=True)
    distinct = combined.drop_duplicates(subset=["codepoint"] + MAPPING_COLUMNS, keep="first")
    conflicts = distinct[distinct.duplicated(subset=["codepoint"], keep=False)]
    if len(conflicts):
        n_conflicts = conflicts["codepoint"].nunique()
        first = conflicts["codepoint"].min()
        details = "; ".join(
            f"{row.source}:{row.line_number} maps to {_describe_mapping(row)}"
            for row in conflicts[conflicts["codepoint"] == first].itertuples(index=False)
        )
        raise TableBuildError(
            f"Conflicting mappings for {format_codepoint(first)} "
            f"({n_conflicts} conflicting codepoints in total): {details}"
        )

    merged = distinct.sort_values("codepoint", kind="stable").reset_index(drop=True)
    log.info(f"Merged: {len(merged)} entries (collapsed {len(combined) - len(merged)} duplicates)")
    return merged


def _escape(cp: int) -> str:
    cp = int(cp)
    if cp == SENTINEL:
        return "\\0"
    if cp > 0xFFFF:
        return f"\\U{cp:08X}"
    return f"\\u{cp:04X}"


def render_table(df: pd.DataFrame, unicode_version: str = "unknown") -> str:
    """Render a validated table as the source of an importable Python module."""
    lines = []
    for row in df.itertuples(index=False):
        lines.append(
            f'    ("{_escape(row.codepoint)}", ("{_escape(row.mapping_0)}", '
            f'"{_escape(row.mapping_1)}", "{_escape(row.mapping_2)}")),'
        )
    return _MODULE_TEMPLATE.format(version=unicode_version, entries="\n".join(lines))


def run_build(
    data_dir: Path = DEFAULT_UCD_DIR,
    output: Path = DEFAULT_OUTPUT,
    check: bool = False,
) -> Dict:
    """Build the titlecase table from the UCD files in data_dir. Returns stats dict.

    With check=True nothing is written; stats["stale"] tells whether the
    existing output differs from what would be generated.
    """
    data_dir = Path(data_dir)
    output = Path(output)

    log.info(f"Building titlecase table from {data_dir}")

    frames = []
    source_stats = {}
    unicode_version = "unknown"
    for name in SOURCES:
        log.info(f"  Loading {name}...")
        df = load_source(name, data_dir=data_dir)
        source_stats[name] = len(df)
        unicode_version = df.attrs.get("unicode_version", unicode_version)
        log.info(f"    -> {len(df)} rows")
        frames.append(df)

    log.info(f"UCD version: {unicode_version}")
    table = validate_table(merge_sources(frames))
    text = render_table(table, unicode_version)

    stats = {
        "unicode_version": unicode_version,
        "entries": len(table),
        "multi_codepoint_entries": int((table["mapping_1"] != SENTINEL).sum()) if len(table) else 0,
        "source_counts": source_stats,
        "output": str(output),
        "stale": not output.exists() or output.read_text(encoding="utf-8") != text,
    }

    if check:
        state = "stale" if stats["stale"] else "up to date"
        log.info(f"{output} is {state}")
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        log.info(f"Wrote {len(table)} entries to {output}")
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate the Unicode titlecase table")
    parser.add_argument("--ucd-dir", type=str, default=str(DEFAULT_UCD_DIR),
                        help="Directory holding UnicodeData.txt and SpecialCasing.txt")
    parser.add_argument("--output", type=str, default=str(DEFAULT_OUTPUT))
    parser.add_argument("--check", action="store_true",
                        help="Fail if the output is not up to date instead of writing it")
    parser.add_argument("--stats", type=str, default=None,
                        help="Write build stats as JSON to this path")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        stats = run_build(
            data_dir=Path(args.ucd_dir),
            output=Path(args.output),
            check=args.check,
        )
    except TableBuildError as e:
        log.error(f"Build failed: {e}")
        return 1

    if args.stats:
        with open(args.stats, "w") as f:
            json.dump(stats, f, indent=2)

    if args.check and stats["stale"]:
        log.error(f"{args.output} is out of date; rerun without --check")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
