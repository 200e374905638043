"""Shared fixtures: small excerpts of the real UCD files for builder tests."""
from pathlib import Path

import pytest

SPECIAL_CASING = """\
# SpecialCasing-14.0.0.txt
# Date: 2021-03-08, 19:35:55 GMT

# Unconditional mappings

00DF; 00DF; 0053 0073; 0053 0053; # LATIN SMALL LETTER SHARP S
0130; 0069 0307; 0130; 0130; # LATIN CAPITAL LETTER I WITH DOT ABOVE
FB04; FB04; 0046 0066 006C; 0046 0046 004C; # LATIN SMALL LIGATURE FFL
1F80; 1F80; 1F88; 1F08 0399; # GREEK SMALL LETTER ALPHA WITH PSILI AND YPOGEGRAMMENI

# Conditional mappings

03A3; 03C2; 03A3; 03A3; Final_Sigma; # GREEK CAPITAL LETTER SIGMA
0069; 0069; 0130; 0130; tr; # LATIN SMALL LETTER I
0049; 0131; 0049; 0049; tr; # LATIN CAPITAL LETTER I
"""

UNICODE_DATA = """\
0041;LATIN CAPITAL LETTER A;Lu;0;L;;;;;N;;;;0061;
0061;LATIN SMALL LETTER A;Ll;0;L;;;;;N;;;0041;;0041
0069;LATIN SMALL LETTER I;Ll;0;L;;;;;N;;;0049;;0049
00DF;LATIN SMALL LETTER SHARP S;Ll;0;L;;;;;N;;;;;
01C4;LATIN CAPITAL LETTER DZ WITH CARON;Lu;0;L;<compat> 0044 017D;;;;N;LATIN CAPITAL LETTER D Z HACEK;;;01C6;01C5
01C5;LATIN CAPITAL LETTER D WITH SMALL LETTER Z WITH CARON;Lt;0;L;<compat> 0044 017E;;;;N;LATIN LETTER CAPITAL D SMALL Z HACEK;;01C4;01C6;01C5
01C6;LATIN SMALL LETTER DZ WITH CARON;Ll;0;L;<compat> 0064 017E;;;;N;LATIN SMALL LETTER D Z HACEK;;01C4;;01C5
1F80;GREEK SMALL LETTER ALPHA WITH PSILI AND YPOGEGRAMMENI;Ll;0;L;1F00 0345;;;;N;;;1F88;;1F88
FB04;LATIN SMALL LIGATURE FFL;Ll;0;L;<compat> 0066 0066 006C;;;;N;;;;;
"""


@pytest.fixture
def write_ucd(tmp_path):
    """Write SpecialCasing.txt and UnicodeData.txt into tmp_path, returning the directory."""
    def _write(special_casing: str = SPECIAL_CASING, unicode_data: str = UNICODE_DATA) -> Path:
        (tmp_path / "SpecialCasing.txt").write_text(special_casing, encoding="utf-8")
        (tmp_path / "UnicodeData.txt").write_text(unicode_data, encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def ucd_dir(write_ucd):
    return write_ucd()
