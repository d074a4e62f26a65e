from __future__ import annotations

import logging

import pytest

from src.input_reader import (
    InputFormatError,
    available_formats,
    read_csv,
    read_input,
    read_lines,
)

EXPECTED_LINE_OF_BAD_RUNS = 8
EXPECTED_LINE_OF_MISSING_RUNS = 8


def test_read_lines_reference_input(sample_lines_text: str) -> None:
    parsed = read_lines(sample_lines_text.splitlines(), count=4)

    assert [r.id for r in parsed.records] == [1, 2, 3, 4]
    assert parsed.records[3].runs == 10
    assert parsed.records[2].player_type == "bowl"
    assert parsed.player_type == "bat"
    assert parsed.match_type == "T20"


def test_read_lines_strips_whitespace() -> None:
    parsed = read_lines([" 5 ", "  Eve ", "12\t", "bat ", " ODI"], count=1)
    record = parsed.records[0]
    assert (record.id, record.name, record.runs) == (5, "Eve", 12)
    assert (record.player_type, record.match_type) == ("bat", "ODI")


def test_read_lines_without_query_lines() -> None:
    parsed = read_lines(["1", "A", "50", "bat", "T20"], count=1)
    assert parsed.player_type is None
    assert parsed.match_type is None


def test_read_lines_only_player_type_query() -> None:
    parsed = read_lines(["1", "A", "50", "bat", "T20", "bat"], count=1)
    assert parsed.player_type == "bat"
    assert parsed.match_type is None


def test_read_lines_zero_records_reads_queries_only() -> None:
    parsed = read_lines(["bat", "T20"], count=0)
    assert len(parsed.records) == 0
    assert (parsed.player_type, parsed.match_type) == ("bat", "T20")


def test_read_lines_negative_count_rejected() -> None:
    with pytest.raises(ValueError):
        read_lines([], count=-1)


def test_read_lines_non_integer_runs_reports_line(sample_lines_text: str) -> None:
    lines = sample_lines_text.splitlines()
    lines[EXPECTED_LINE_OF_BAD_RUNS - 1] = "thirty"

    with pytest.raises(InputFormatError) as exc_info:
        read_lines(lines, count=4)

    assert exc_info.value.line == EXPECTED_LINE_OF_BAD_RUNS
    assert "runs must be an integer" in str(exc_info.value)


def test_read_lines_truncated_input_reports_missing_field(sample_lines_text: str) -> None:
    lines = sample_lines_text.splitlines()[:7]

    with pytest.raises(InputFormatError) as exc_info:
        read_lines(lines, count=4)

    assert exc_info.value.line == EXPECTED_LINE_OF_MISSING_RUNS
    assert "record 2 of 4" in str(exc_info.value)
    assert "'runs'" in str(exc_info.value)


def test_input_format_error_is_value_error() -> None:
    assert issubclass(InputFormatError, ValueError)


def test_read_lines_warns_about_trailing_lines(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="src.input_reader"):
        parsed = read_lines(["1", "A", "50", "bat", "T20", "bat", "T20", "extra"], count=1)

    assert parsed.match_type == "T20"
    assert any("Ignoring trailing input lines" in r.getMessage() for r in caplog.records)


def test_read_csv_snake_and_camel_headers() -> None:
    snake = read_csv("id,name,runs,player_type,match_type\n3,C,70,bowl,T20\n1,A,50,bat,T20\n")
    camel = read_csv("id,name,runs,playerType,matchType\n3,C,70,bowl,T20\n1,A,50,bat,T20\n")

    assert snake.records == camel.records
    assert [r.id for r in snake.records] == [3, 1]
    assert snake.records[0].runs == 70
    assert snake.player_type is None and snake.match_type is None


def test_read_csv_missing_column() -> None:
    with pytest.raises(InputFormatError, match="match_type"):
        read_csv("id,name,runs,player_type\n1,A,50,bat\n")


def test_read_csv_empty_text() -> None:
    with pytest.raises(InputFormatError, match="header"):
        read_csv("")


def test_read_csv_invalid_value_reports_row_line() -> None:
    with pytest.raises(InputFormatError) as exc_info:
        read_csv("id,name,runs,player_type,match_type\n1,A,50,bat,T20\n2,B,x,bat,ODI\n")

    assert exc_info.value.line == 3
    assert "runs" in str(exc_info.value)


def test_read_input_dispatches_by_format(sample_lines_text: str) -> None:
    parsed = read_input(sample_lines_text, input_format="lines", count=4)
    assert len(parsed.records) == 4

    parsed_csv = read_input("id,name,runs,player_type,match_type\n1,A,5,bat,T20\n", "csv")
    assert len(parsed_csv.records) == 1


def test_read_input_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown input format"):
        read_input("", input_format="xml")


def test_available_formats_sorted() -> None:
    assert available_formats() == ["csv", "lines"]
