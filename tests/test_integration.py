# tests/test_integration.py
"""Integration test -- rebuilds the table from real UCD files (no network)."""
import pytest
from pathlib import Path
from ucd_titlecase.assemble import DEFAULT_OUTPUT, run_build
from ucd_titlecase._casing import UNICODE_VERSION


@pytest.mark.integration
def test_rebuild_matches_embedded_table(tmp_path):
    data_dir = Path("data/ucd")
    if not (data_dir / "UnicodeData.txt").exists():
        pytest.skip("UCD files not available")

    output = tmp_path / "_casing.py"
    stats = run_build(data_dir=data_dir, output=output)

    assert stats["entries"] > 1000
    assert stats["multi_codepoint_entries"] > 0
    if stats["unicode_version"] == UNICODE_VERSION:
        assert output.read_text(encoding="utf-8") == DEFAULT_OUTPUT.read_text(encoding="utf-8")
    print(f"\nBuild stats: {stats}")
