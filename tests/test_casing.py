import pytest
from ucd_titlecase._casing import TITLECASE_TABLE
from ucd_titlecase.casing import (
    is_titlecase,
    titlecase_default,
    titlecase_tr_az,
    to_titlecase,
    to_titlecase_tr_az,
)

# BMP and SMP, skipping surrogates
SAMPLE = [chr(cp) for cp in range(0x20000) if not 0xD800 <= cp <= 0xDFFF]
TABLE = dict(TITLECASE_TABLE)


class TestTitlecaseDefault:
    def test_uppercase_is_its_own_titlecase(self):
        assert titlecase_default("A") == ("A", "\0", "\0")

    def test_digraph_maps_to_titlecase_form(self):
        assert titlecase_default("Ǆ") == ("ǅ", "\0", "\0")
        assert titlecase_default("ǆ") == ("ǅ", "\0", "\0")
        assert titlecase_default("ǅ") == ("ǅ", "\0", "\0")

    def test_ligature_expands_to_three(self):
        assert titlecase_default("ﬄ") == ("F", "f", "l")

    def test_sharp_s_expands_to_two(self):
        assert titlecase_default("ß") == ("S", "s", "\0")

    def test_small_i(self):
        assert titlecase_default("i") == ("I", "\0", "\0")

    def test_astral_plane(self):
        assert titlecase_default("\U0001e922") == ("\U0001e900", "\0", "\0")

    def test_absent_characters_map_to_themselves(self):
        for c in SAMPLE:
            if c not in TABLE:
                assert titlecase_default(c) == (c, "\0", "\0")

    def test_rejects_strings(self):
        with pytest.raises(TypeError):
            titlecase_default("ab")
        with pytest.raises(TypeError):
            titlecase_default("")


class TestTitlecaseTrAz:
    def test_small_i_maps_to_dotted_capital(self):
        assert titlecase_tr_az("i") == ("İ", "\0", "\0")

    def test_only_small_i_diverges(self):
        for c in SAMPLE:
            if c != "i":
                assert titlecase_tr_az(c) == titlecase_default(c)


class TestIsTitlecase:
    def test_examples(self):
        assert is_titlecase("A")
        assert is_titlecase("ǅ")
        assert is_titlecase("İ")
        assert is_titlecase("1")
        assert not is_titlecase("a")
        assert not is_titlecase("Ǆ")

    def test_consistent_with_lookup(self):
        for c in SAMPLE:
            assert is_titlecase(c) == (titlecase_default(c)[0] == c)


class TestToTitlecase:
    def test_iterates_expansion(self):
        assert list(to_titlecase("ﬄ")) == ["F", "f", "l"]
        assert str(to_titlecase("ŉ")) == "ʼN"

    def test_tr_az(self):
        assert str(to_titlecase_tr_az("i")) == "İ"
        assert str(to_titlecase_tr_az("ß")) == "Ss"

    def test_length_matches_non_sentinel_slots(self):
        for key, mapping in TITLECASE_TABLE:
            assert len(to_titlecase(key)) == sum(1 for c in mapping if c != "\0")

    def test_reverse_iteration_mirrors_forward(self):
        for key, _ in TITLECASE_TABLE:
            forward = list(to_titlecase(key))
            backward = list(reversed(to_titlecase(key)))
            assert backward == forward[::-1]
