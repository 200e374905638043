import pytest
from ucd_titlecase.tr_az import (
    is_lowercase_tr_az,
    is_uppercase_tr_az,
    lowercase_tr_az,
    uppercase_tr_az,
)


class TestUppercase:
    def test_small_i_gets_dot(self):
        assert str(uppercase_tr_az("i")) == "İ"

    def test_dotless_i(self):
        assert str(uppercase_tr_az("ı")) == "I"

    def test_other_characters_use_full_uppercase(self):
        assert str(uppercase_tr_az("a")) == "A"
        assert list(uppercase_tr_az("ß")) == ["S", "S"]
        assert len(uppercase_tr_az("ΐ")) == 3


class TestLowercase:
    def test_capital_i_loses_dot(self):
        assert lowercase_tr_az("I") == "ı"

    def test_dotted_capital_i(self):
        assert lowercase_tr_az("İ") == "i"

    def test_fallback(self):
        assert lowercase_tr_az("A") == "a"
        assert lowercase_tr_az("ı") == "ı"
        assert lowercase_tr_az("Σ") == "σ"

    def test_only_dotted_capital_i_lowercases_to_several_codepoints(self):
        # lowercase_tr_az returns one character; any new entry here breaks it
        expanding = [chr(cp) for cp in range(0x110000) if len(chr(cp).lower()) > 1]
        assert expanding == ["İ"]

    def test_always_single_character(self):
        for cp in range(0x110000):
            assert len(lowercase_tr_az(chr(cp))) == 1


class TestPredicates:
    def test_uppercase(self):
        assert is_uppercase_tr_az("I")
        assert is_uppercase_tr_az("İ")
        assert not is_uppercase_tr_az("ı")
        assert not is_uppercase_tr_az("1")

    def test_lowercase(self):
        assert is_lowercase_tr_az("i")
        assert is_lowercase_tr_az("ı")
        assert not is_lowercase_tr_az("İ")

    def test_match_locale_agnostic_predicates(self):
        for c in "Iıİi aZ9ǅ":
            assert is_uppercase_tr_az(c) == c.isupper()
            assert is_lowercase_tr_az(c) == c.islower()
