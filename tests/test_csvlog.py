"""Tests for the CSV session log."""

import csv

import pytest

from screen_time.csvlog import append_record, format_record, read_records
from screen_time.models import LogRecord


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "screen_time_log.csv"


def test_format_plain_record():
    record = LogRecord("Firefox", "2024-01-01 10:00:00", 42)

    assert format_record(record) == "Firefox,2024-01-01 10:00:00,42"


def test_format_quotes_title_with_comma():
    record = LogRecord("My, App", "2024-01-01 10:00:00", 7)

    assert format_record(record) == '"My, App",2024-01-01 10:00:00,7'


def test_format_doubles_quotes():
    record = LogRecord('say "hi"', "2024-01-01 10:00:00", 1)

    assert format_record(record) == '"say ""hi""",2024-01-01 10:00:00,1'


def test_append_creates_file_without_header(log_path):
    append_record(log_path, LogRecord("Firefox", "2024-01-01 10:00:00", 42))

    assert log_path.read_text(encoding="utf-8") == "Firefox,2024-01-01 10:00:00,42\n"


def test_append_keeps_existing_lines(log_path):
    log_path.write_text("Old,2023-12-31 23:59:59,5\n", encoding="utf-8")

    append_record(log_path, LogRecord("New", "2024-01-01 00:00:01", 2))

    assert log_path.read_text(encoding="utf-8").splitlines() == [
        "Old,2023-12-31 23:59:59,5",
        "New,2024-01-01 00:00:01,2",
    ]


def test_special_titles_read_back_unchanged(log_path):
    records = [
        LogRecord("My, App", "2024-01-01 10:00:00", 3),
        LogRecord("multi\nline", "2024-01-01 10:00:03", 4),
        LogRecord("Café — naïve ✓", "2024-01-01 10:00:07", 0),
    ]
    for record in records:
        append_record(log_path, record)

    assert read_records(log_path) == records


def test_lines_parse_with_stock_csv_reader(log_path):
    append_record(log_path, LogRecord("My, App", "2024-01-01 10:00:00", 42))

    with open(log_path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))

    assert rows == [["My, App", "2024-01-01 10:00:00", "42"]]


def test_append_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        append_record(
            tmp_path / "nope" / "log.csv",
            LogRecord("A", "2024-01-01 10:00:00", 1),
        )
