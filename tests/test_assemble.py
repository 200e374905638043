import json

import pytest
from ucd_titlecase.assemble import main, merge_sources, render_table, run_build
from ucd_titlecase.schema import TableBuildError, make_row, to_dataframe

CONFLICTING_UNICODE_DATA = (
    "00DF;LATIN SMALL LETTER SHARP S;Ll;0;L;;;;;N;;;;;1E9E\n"
)


def _frame(source, *rows):
    return to_dataframe([make_row(cp, mapping, source, i) for i, (cp, mapping) in enumerate(rows, 1)])


def _exec_table(text):
    namespace = {}
    exec(compile(text, "_casing.py", "exec"), namespace)
    return namespace


class TestMergeSources:
    def test_collapses_identical_duplicates(self):
        special = _frame("SpecialCasing.txt", (0x1F80, [0x1F88]))
        data = _frame("UnicodeData.txt", (0x61, [0x41]), (0x1F80, [0x1F88]))
        merged = merge_sources([special, data])
        assert merged["codepoint"].tolist() == [0x61, 0x1F80]

    def test_sorts_by_codepoint(self):
        merged = merge_sources([
            _frame("b", (0xFB04, [0x46, 0x66, 0x6C]), (0xDF, [0x53, 0x73])),
            _frame("a", (0x61, [0x41])),
        ])
        assert merged["codepoint"].tolist() == [0x61, 0xDF, 0xFB04]

    def test_rejects_conflicting_mappings(self):
        special = _frame("SpecialCasing.txt", (0xDF, [0x53, 0x73]))
        data = _frame("UnicodeData.txt", (0xDF, [0x1E9E]))
        with pytest.raises(TableBuildError, match="Conflicting mappings for U\\+00DF"):
            merge_sources([special, data])

    def test_conflict_message_names_both_lines(self):
        special = _frame("SpecialCasing.txt", (0xDF, [0x53, 0x73]))
        data = _frame("UnicodeData.txt", (0x61, [0x41]), (0xDF, [0x53]))
        with pytest.raises(TableBuildError) as excinfo:
            merge_sources([special, data])
        message = str(excinfo.value)
        assert "SpecialCasing.txt:1 maps to U+0053 U+0073" in message
        assert "UnicodeData.txt:2 maps to U+0053" in message

    def test_rejects_conflict_in_trailing_slot(self):
        first = _frame("a", (0xFB04, [0x46, 0x66, 0x6C]))
        second = _frame("b", (0xFB04, [0x46, 0x66]))
        with pytest.raises(TableBuildError):
            merge_sources([first, second])

    def test_empty_sources(self):
        assert len(merge_sources([])) == 0
        assert len(merge_sources([to_dataframe([])])) == 0


class TestRenderTable:
    def test_renders_importable_module(self):
        df = merge_sources([_frame("t", (0x61, [0x41]), (0xDF, [0x53, 0x73]), (0x1E922, [0x1E900]))])
        namespace = _exec_table(render_table(df, "14.0.0"))
        assert namespace["UNICODE_VERSION"] == "14.0.0"
        assert namespace["TITLECASE_TABLE"] == (
            ("a", ("A", "\0", "\0")),
            ("ß", ("S", "s", "\0")),
            ("\U0001e922", ("\U0001e900", "\0", "\0")),
        )

    def test_uses_escaped_literals(self):
        df = merge_sources([_frame("t", (0x1C4, [0x1C5]))])
        assert '    ("\\u01C4", ("\\u01C5", "\\0", "\\0")),' in render_table(df)


class TestRunBuild:
    def test_writes_table_module(self, ucd_dir, tmp_path):
        output = tmp_path / "out" / "_casing.py"
        stats = run_build(data_dir=ucd_dir, output=output)
        assert output.exists()
        table = _exec_table(output.read_text(encoding="utf-8"))["TITLECASE_TABLE"]
        assert [key for key, _ in table] == ["a", "i", "ß", "Ǆ", "ǆ", "ᾀ", "ﬄ"]
        assert dict(table)["ﬄ"] == ("F", "f", "l")
        assert stats["entries"] == 7
        assert stats["multi_codepoint_entries"] == 2
        assert stats["unicode_version"] == "14.0.0"
        assert stats["source_counts"] == {"special_casing": 3, "unicode_data": 5}

    def test_check_reports_up_to_date(self, ucd_dir, tmp_path):
        output = tmp_path / "_casing.py"
        run_build(data_dir=ucd_dir, output=output)
        assert run_build(data_dir=ucd_dir, output=output, check=True)["stale"] is False

    def test_check_does_not_write(self, ucd_dir, tmp_path):
        output = tmp_path / "_casing.py"
        stats = run_build(data_dir=ucd_dir, output=output, check=True)
        assert stats["stale"] is True
        assert not output.exists()

    def test_conflict_aborts_without_output(self, write_ucd, tmp_path):
        ucd_dir = write_ucd(unicode_data=CONFLICTING_UNICODE_DATA)
        output = tmp_path / "_casing.py"
        with pytest.raises(TableBuildError, match="U\\+00DF"):
            run_build(data_dir=ucd_dir, output=output)
        assert not output.exists()


class TestMain:
    def test_main_builds_and_writes_stats(self, ucd_dir, tmp_path):
        output = tmp_path / "_casing.py"
        stats_path = tmp_path / "stats.json"
        code = main([
            "--ucd-dir", str(ucd_dir),
            "--output", str(output),
            "--stats", str(stats_path),
        ])
        assert code == 0
        assert json.loads(stats_path.read_text())["entries"] == 7

    def test_main_check_fails_when_stale(self, ucd_dir, tmp_path):
        output = tmp_path / "_casing.py"
        output.write_text("TITLECASE_TABLE = ()\n")
        assert main(["--ucd-dir", str(ucd_dir), "--output", str(output), "--check"]) == 1
        assert output.read_text() == "TITLECASE_TABLE = ()\n"

    def test_main_fails_on_missing_files(self, tmp_path):
        assert main(["--ucd-dir", str(tmp_path / "nowhere"), "--output", str(tmp_path / "o.py")]) == 1
