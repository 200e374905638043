# tests/sources/test_sources_unicode_data.py
import pytest
from ucd_titlecase.schema import TableBuildError
from ucd_titlecase.sources.unicode_data import load, parse_line


def test_load_reads_simple_titlecase(ucd_dir):
    df = load(data_dir=ucd_dir)
    assert df["codepoint"].tolist() == [0x61, 0x69, 0x1C4, 0x1C6, 0x1F80]


def test_load_maps_digraphs_to_titlecase_form(ucd_dir):
    df = load(data_dir=ucd_dir).set_index("codepoint")
    assert df.loc[0x1C4, "mapping_0"] == 0x1C5
    assert df.loc[0x1C6, "mapping_0"] == 0x1C5


def test_load_emits_single_codepoints(ucd_dir):
    df = load(data_dir=ucd_dir)
    assert (df["mapping_1"] == 0).all()
    assert (df["mapping_2"] == 0).all()


def test_load_skips_empty_and_self_mappings(ucd_dir):
    codepoints = load(data_dir=ucd_dir)["codepoint"].tolist()
    assert 0x41 not in codepoints
    assert 0x1C5 not in codepoints
    assert 0xDF not in codepoints


def test_load_fails_on_missing_file(tmp_path):
    with pytest.raises(TableBuildError, match="UnicodeData.txt"):
        load(data_dir=tmp_path)


def test_parse_line_rejects_wrong_field_count():
    with pytest.raises(TableBuildError, match="UnicodeData.txt:2: expected 15 fields, got 3"):
        parse_line("0061;LATIN SMALL LETTER A;Ll", 2)


def test_parse_line_rejects_bad_mapping():
    with pytest.raises(TableBuildError, match="invalid codepoint 'zz'"):
        parse_line("0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;zz", 5)


def test_parse_line_returns_row():
    row = parse_line("0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041", 98)
    assert row["codepoint"] == 0x61
    assert row["mapping_0"] == 0x41
    assert row["line_number"] == 98
