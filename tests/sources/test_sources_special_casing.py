# tests/sources/test_sources_special_casing.py
import pytest
from ucd_titlecase.assemble import merge_sources
from ucd_titlecase.schema import TableBuildError, validate_table
from ucd_titlecase.sources.special_casing import load, parse_line, parse_unicode_version


def test_load_keeps_unconditional_mappings(ucd_dir):
    df = load(data_dir=ucd_dir)
    assert df["codepoint"].tolist() == [0xDF, 0xFB04, 0x1F80]
    assert df["source"].unique().tolist() == ["SpecialCasing.txt"]


def test_load_expands_multi_codepoint_titlecase(ucd_dir):
    df = load(data_dir=ucd_dir).set_index("codepoint")
    assert df.loc[0xDF, ["mapping_0", "mapping_1", "mapping_2"]].tolist() == [0x53, 0x73, 0]
    assert df.loc[0xFB04, ["mapping_0", "mapping_1", "mapping_2"]].tolist() == [0x46, 0x66, 0x6C]


def test_load_skips_self_titlecase(ucd_dir):
    df = load(data_dir=ucd_dir)
    assert 0x130 not in df["codepoint"].tolist()


def test_load_skips_conditional_mappings(ucd_dir):
    df = load(data_dir=ucd_dir)
    assert 0x69 not in df["codepoint"].tolist()
    assert 0x3A3 not in df["codepoint"].tolist()


def test_load_records_line_numbers(ucd_dir):
    df = load(data_dir=ucd_dir).set_index("codepoint")
    assert df.loc[0xDF, "line_number"] == 6


def test_load_rows_merge_into_valid_table(ucd_dir):
    table = validate_table(merge_sources([load(data_dir=ucd_dir)]))
    assert table["codepoint"].tolist() == [0xDF, 0x1F80, 0xFB04]


def test_load_keeps_unicode_version(ucd_dir):
    assert load(data_dir=ucd_dir).attrs["unicode_version"] == "14.0.0"


def test_load_fails_on_missing_file(tmp_path):
    with pytest.raises(TableBuildError, match="Missing UCD file"):
        load(data_dir=tmp_path)


def test_parse_line_rejects_short_record():
    with pytest.raises(TableBuildError, match="SpecialCasing.txt:3: expected at least 4 fields"):
        parse_line("00DF; 00DF; 0053 0073 # truncated", 3)


def test_parse_line_rejects_empty_titlecase():
    with pytest.raises(TableBuildError, match="empty titlecase field"):
        parse_line("00DF; 00DF; ; 0053 0053; # LATIN SMALL LETTER SHARP S", 9)


def test_parse_line_rejects_bad_codepoint():
    with pytest.raises(TableBuildError, match="invalid codepoint '00G0'"):
        parse_line("00DF; 00DF; 00G0 0073; 0053 0053;", 4)


def test_parse_unicode_version():
    assert parse_unicode_version("# SpecialCasing-15.1.0.txt\n# Date: x\n") == "15.1.0"
    assert parse_unicode_version("00DF; 00DF; 0053 0073; 0053 0053;\n") == "unknown"
