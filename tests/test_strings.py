from ucd_titlecase.strings import (
    starts_titlecase,
    starts_titlecase_rest_lower,
    title_first,
    title_first_lower_rest,
    title_first_lower_rest_tr_az,
    title_first_tr_az,
)


class TestTitleFirst:
    def test_keeps_rest(self):
        assert title_first("hELLO") == "HELLO"

    def test_expands_first_character(self):
        assert title_first("ﬄabc") == "Fflabc"

    def test_digraph(self):
        assert title_first("ǆungla") == "ǅungla"

    def test_already_titlecase(self):
        assert title_first("Hello") == "Hello"

    def test_empty(self):
        assert title_first("") == ""


class TestTitleFirstLowerRest:
    def test_lowercases_rest(self):
        assert title_first_lower_rest("hELLO") == "Hello"

    def test_expands_first_character(self):
        assert title_first_lower_rest("ﬄabc") == "Fflabc"
        assert title_first_lower_rest("ßTRASSE") == "Sstrasse"

    def test_rest_uses_default_lowercase(self):
        assert title_first_lower_rest("iIi\u0130") == "Iiii\u0307"

    def test_rest_is_lowercased_per_character(self):
        assert title_first_lower_rest("xA\u03a3") == "Xa\u03c3"
        assert title_first_lower_rest("xA\u03a3") == title_first_lower_rest_tr_az("xA\u03a3")

    def test_empty(self):
        assert title_first_lower_rest("") == ""


class TestTrAz:
    def test_title_first(self):
        assert title_first_tr_az("istanbul") == "İstanbul"
        assert title_first_tr_az("ıSPARTA") == "ISPARTA"

    def test_title_first_keeps_rest(self):
        assert title_first_tr_az("iIiİ") == "İIiİ"

    def test_title_first_lower_rest(self):
        assert title_first_lower_rest_tr_az("iIiİ") == "İıii"
        assert title_first_lower_rest_tr_az("DİYARBAKIR") == "Diyarbakır"

    def test_empty(self):
        assert title_first_tr_az("") == ""
        assert title_first_lower_rest_tr_az("") == ""


class TestPredicates:
    def test_starts_titlecase(self):
        assert starts_titlecase("Hello")
        assert starts_titlecase("ǅungla")
        assert starts_titlecase("1abc")
        assert not starts_titlecase("hello")
        assert not starts_titlecase("Ǆungla")
        assert not starts_titlecase("")

    def test_starts_titlecase_rest_lower(self):
        assert starts_titlecase_rest_lower("Hello")
        assert starts_titlecase_rest_lower("İ")
        assert not starts_titlecase_rest_lower("HEllo")
        assert not starts_titlecase_rest_lower("hello")
        assert not starts_titlecase_rest_lower("İİ")
        assert not starts_titlecase_rest_lower("")

    def test_rest_must_be_cased_lowercase(self):
        assert not starts_titlecase_rest_lower("Hello world")
