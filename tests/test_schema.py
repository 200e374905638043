import pytest
import pandas as pd
from ucd_titlecase.schema import (
    TABLE_COLUMNS,
    TableBuildError,
    make_row,
    parse_codepoint,
    to_dataframe,
    validate_table,
)


def _table(*rows):
    return to_dataframe([make_row(cp, mapping, "test", i) for i, (cp, mapping) in enumerate(rows, 1)])


def test_make_row_pads_mapping_with_sentinels():
    row = make_row(0xDF, [0x53, 0x73], "SpecialCasing.txt", 7)
    assert row == {
        "codepoint": 0xDF,
        "mapping_0": 0x53,
        "mapping_1": 0x73,
        "mapping_2": 0,
        "source": "SpecialCasing.txt",
        "line_number": 7,
    }


def test_make_row_rejects_long_mapping():
    with pytest.raises(TableBuildError, match="U\\+0041 maps to 4 codepoints"):
        make_row(0x41, [1, 2, 3, 4], "test", 1)


def test_parse_codepoint_reports_file_and_line():
    with pytest.raises(TableBuildError, match="UnicodeData.txt:12: invalid codepoint 'XYZ'"):
        parse_codepoint("XYZ", "UnicodeData.txt", 12)


def test_parse_codepoint_rejects_surrogates():
    with pytest.raises(TableBuildError, match="not a Unicode scalar value"):
        parse_codepoint("D800", "test", 1)


def test_validate_accepts_valid_table():
    df = _table((0x61, [0x41]), (0xDF, [0x53, 0x73]), (0xFB04, [0x46, 0x66, 0x6C]))
    result = validate_table(df)
    assert len(result) == 3


def test_validate_accepts_empty_table():
    assert len(validate_table(to_dataframe([]))) == 0


def test_validate_rejects_missing_column():
    df = pd.DataFrame({"codepoint": [0x61]})
    with pytest.raises(ValueError, match="Missing columns"):
        validate_table(df)


def test_validate_rejects_unsorted_keys():
    df = _table((0x62, [0x42]), (0x61, [0x41]))
    with pytest.raises(TableBuildError, match="U\\+0061 follows U\\+0062"):
        validate_table(df)


def test_validate_rejects_duplicate_keys():
    df = _table((0x61, [0x41]), (0x61, [0x41]))
    with pytest.raises(TableBuildError, match="strictly increasing"):
        validate_table(df)


def test_validate_rejects_self_mapping():
    df = _table((0x41, [0x41]))
    with pytest.raises(TableBuildError, match="Self mapping for U\\+0041"):
        validate_table(df)


def test_validate_rejects_gap_between_slots():
    df = _table((0x61, [0x41]))
    df.loc[0, "mapping_2"] = 0x42
    with pytest.raises(TableBuildError, match="Gap"):
        validate_table(df)


def test_columns_are_integers():
    df = _table((0x61, [0x41]))
    assert list(df.columns) == TABLE_COLUMNS
    assert df["codepoint"].dtype == "int64"
    assert df["mapping_2"].dtype == "int64"
