import copy

import pytest
from ucd_titlecase.mapping import NUL, CaseMapping


class TestFromTable:
    def test_one(self):
        mapping = CaseMapping.from_table(("A", NUL, NUL))
        assert mapping.state == "One"
        assert list(mapping) == ["A"]

    def test_two(self):
        mapping = CaseMapping.from_table(("S", "s", NUL))
        assert mapping.state == "Two"
        assert len(mapping) == 2

    def test_three(self):
        mapping = CaseMapping.from_table(("F", "f", "l"))
        assert mapping.state == "Three"
        assert str(mapping) == "Ffl"

    def test_first_slot_is_always_kept(self):
        assert list(CaseMapping.from_table((NUL, NUL, NUL))) == [NUL]


class TestIteration:
    def test_front_consumption_shrinks_state(self):
        mapping = CaseMapping(("F", "f", "l"))
        assert next(mapping) == "F"
        assert mapping.state == "Two"
        assert next(mapping) == "f"
        assert next(mapping) == "l"
        assert mapping.state == "Empty"
        with pytest.raises(StopIteration):
            next(mapping)

    def test_back_consumption(self):
        mapping = CaseMapping(("F", "f", "l"))
        assert mapping.next_back() == "l"
        assert mapping.next_back() == "f"
        assert len(mapping) == 1
        assert mapping.next_back() == "F"
        assert mapping.next_back() is None

    def test_mixed_consumption_meets_in_the_middle(self):
        mapping = CaseMapping(("F", "f", "l"))
        assert next(mapping) == "F"
        assert mapping.next_back() == "l"
        assert list(mapping) == ["f"]
        assert len(mapping) == 0

    def test_reversed(self):
        assert list(reversed(CaseMapping(("\u0399", "\u0308", "\u0301")))) == ["\u0301", "\u0308", "\u0399"]

    def test_len_tracks_remaining(self):
        mapping = CaseMapping(("S", "s"))
        assert len(mapping) == 2
        next(mapping)
        assert len(mapping) == 1

    def test_length_hint(self):
        import operator
        assert operator.length_hint(CaseMapping(("S", "s"))) == 2

    def test_copy_restarts_from_same_position(self):
        mapping = CaseMapping(("F", "f", "l"))
        next(mapping)
        restarted = mapping.copy()
        assert list(mapping) == ["f", "l"]
        assert list(restarted) == ["f", "l"]
        assert list(copy.copy(CaseMapping(("A",)))) == ["A"]


class TestConstruction:
    def test_empty(self):
        mapping = CaseMapping()
        assert mapping.state == "Empty"
        assert str(mapping) == ""

    def test_from_string(self):
        assert list(CaseMapping.from_string("SS")) == ["S", "S"]

    def test_rejects_more_than_three(self):
        with pytest.raises(ValueError, match="at most 3"):
            CaseMapping(("a", "b", "c", "d"))

    def test_rejects_non_characters(self):
        with pytest.raises(TypeError):
            CaseMapping(("ab",))

    def test_repr(self):
        assert repr(CaseMapping(("S", "s"))) == "CaseMapping.Two('S', 's')"

    def test_str_shows_remaining(self):
        mapping = CaseMapping(("F", "f", "l"))
        next(mapping)
        assert str(mapping) == "fl"
