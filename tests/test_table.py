"""Invariants of the embedded titlecase table."""
from ucd_titlecase._casing import TITLECASE_TABLE, UNICODE_VERSION


def test_table_is_not_empty():
    assert len(TITLECASE_TABLE) > 1000


def test_is_sorted():
    keys = [key for key, _ in TITLECASE_TABLE]
    for prev, cur in zip(keys, keys[1:]):
        assert cur > prev, f"{cur!r} follows {prev!r}"


def test_no_self_mapping():
    for key, mapping in TITLECASE_TABLE:
        assert mapping[0] != key


def test_entries_are_characters():
    for key, mapping in TITLECASE_TABLE:
        assert len(key) == 1
        assert len(mapping) == 3
        assert all(len(c) == 1 for c in mapping)


def test_sentinels_only_trail():
    for key, (first, second, third) in TITLECASE_TABLE:
        assert first != "\0"
        assert not (second == "\0" and third != "\0"), key


def test_unicode_version():
    assert UNICODE_VERSION == "14.0.0"
