import pytest

from scoreboard.helpers.errors import MissingFieldsError, StorageError
from scoreboard.helpers.roster import CsvRoster, parse_roster


def test_parse_roster_takes_first_column_and_skips_blanks():
    text = "Alex,Open\n  Bea  \n\n,\n\"Cai, Youth\",U16\n"
    assert parse_roster(text) == ["Alex", "Bea", "Cai, Youth"]


def test_names_reads_file(climbers_csv):
    assert CsvRoster(str(climbers_csv)).names() == ["Alex", "Bea", "Cai"]


def test_names_strips_utf8_bom(tmp_path):
    path = tmp_path / "climbers.csv"
    path.write_bytes("\ufeffAlex\nBea\n".encode("utf-8"))
    assert CsvRoster(str(path)).names() == ["Alex", "Bea"]


def test_missing_roster_raises_storage_error(tmp_path):
    with pytest.raises(StorageError):
        CsvRoster(str(tmp_path / "nope.csv")).names()


def test_replace_swaps_whole_file(climbers_csv):
    roster = CsvRoster(str(climbers_csv))
    count = roster.replace(b"Dana\nEli\n")
    assert count == 2
    assert roster.names() == ["Dana", "Eli"]
    # no temp files left behind
    assert [p.name for p in climbers_csv.parent.iterdir() if p.name.startswith(".climbers-")] == []


def test_replace_creates_missing_roster(tmp_path):
    roster = CsvRoster(str(tmp_path / "climbers.csv"))
    roster.replace(b"Alex\n")
    assert roster.names() == ["Alex"]


def test_replace_rejects_non_utf8(climbers_csv):
    roster = CsvRoster(str(climbers_csv))
    with pytest.raises(MissingFieldsError):
        roster.replace(b"\xff\xfe\x00bad")
    assert roster.names() == ["Alex", "Bea", "Cai"]
