# tests/sources/test_registry.py
import pytest
from ucd_titlecase.sources import SOURCES, load_source


def test_sources_are_declared_in_merge_order():
    assert SOURCES == ("special_casing", "unicode_data")


def test_load_source_by_name(ucd_dir):
    df = load_source("unicode_data", data_dir=ucd_dir)
    assert len(df) == 5


def test_load_source_rejects_unknown_modules(ucd_dir):
    with pytest.raises(ValueError, match="Unknown UCD source 'schema'"):
        load_source("schema", data_dir=ucd_dir)
