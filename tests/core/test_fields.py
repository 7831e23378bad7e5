from __future__ import annotations

from datetime import datetime

import pytest

from scribe_log_parser.core.fields import (
    ExtractionError,
    extract_value,
    parse_thread_id,
    parse_timestamp,
)


def test_extract_value_after_first_colon() -> None:
    assert extract_value("Title: Hello") == "Hello"
    assert extract_value("Message: a: b: c") == "a: b: c"
    assert extract_value("Timestamp: 2020-01-01 12:00:00") == "2020-01-01 12:00:00"


def test_extract_value_trims_spaces_only() -> None:
    assert extract_value("Title:   padded   ") == "padded"
    assert extract_value("Title:\tTabbed\t") == "\tTabbed\t"


def test_extract_value_empty_value() -> None:
    assert extract_value("Title:") == ""
    assert extract_value("Title:    ") == ""


def test_extract_value_without_colon_raises() -> None:
    with pytest.raises(ExtractionError):
        extract_value("no separator here")
    assert issubclass(ExtractionError, ValueError)


def test_parse_timestamp() -> None:
    assert parse_timestamp("2020-01-01 12:00:00") == datetime(2020, 1, 1, 12, 0, 0)
    assert parse_timestamp("1/15/2021 3:04:05 PM") == datetime(2021, 1, 15, 15, 4, 5)


@pytest.mark.parametrize(
    "value",
    ["", "   ", "not a date", "2020-13-45 99:99:99", "2020-01-01 12:00:00 +99:00"],
)
def test_parse_timestamp_invalid(value: str) -> None:
    assert parse_timestamp(value) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("42", 42),
        (" 42 ", 42),
        ("-7", -7),
        ("+5", 5),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_thread_id(value: str, expected: int) -> None:
    assert parse_thread_id(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "",
        "notanumber",
        "4.2",
        "1_000",
        "0x10",
        "2147483648",
        "-2147483649",
        "12 34",
        "9" * 5000,
    ],
)
def test_parse_thread_id_invalid(value: str) -> None:
    assert parse_thread_id(value) is None


def test_parse_timestamp_keeps_valid_offset() -> None:
    ts = parse_timestamp("2020-01-01 12:00:00 +05:00")
    assert ts is not None
    assert ts.isoformat() == "2020-01-01T12:00:00+05:00"
