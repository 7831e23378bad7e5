from __future__ import annotations

import pytest

from scribe_log_parser.core.models import Severity
from scribe_log_parser.core.severity import classify_severity


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("Debug", Severity.DEBUG),
        ("Verbose", Severity.VERBOSE),
        ("Info", Severity.INFO),
        ("Information", Severity.INFO),
        ("Warn", Severity.WARNING),
        ("Warning", Severity.WARNING),
        ("Error", Severity.ERROR),
        ("Trace", Severity.TRACE),
        ("Critical", Severity.UNKNOWN),
        ("", Severity.UNKNOWN),
    ],
)
def test_classify_severity(token: str, expected: Severity) -> None:
    assert classify_severity(token) is expected


def test_verbose_is_debug() -> None:
    assert classify_severity("Verbose") == classify_severity("Debug")
    assert Severity.VERBOSE is Severity.DEBUG


def test_matching_is_case_sensitive() -> None:
    assert classify_severity("WARN") is Severity.UNKNOWN
    assert classify_severity("info") is Severity.UNKNOWN
    assert classify_severity("ERROR") is Severity.UNKNOWN


def test_exact_tokens_do_not_match_substrings() -> None:
    assert classify_severity("Errors") is Severity.UNKNOWN
    assert classify_severity("Debugging") is Severity.UNKNOWN
    assert classify_severity("StackTrace") is Severity.UNKNOWN


def test_substring_tokens_match_anywhere() -> None:
    assert classify_severity("SysInfo") is Severity.INFO
    assert classify_severity("PreWarn") is Severity.WARNING


def test_severity_ordering() -> None:
    assert Severity.DEBUG < Severity.INFO < Severity.WARNING < Severity.ERROR
    assert Severity.ERROR < Severity.TRACE < Severity.UNKNOWN
    assert sorted([Severity.ERROR, Severity.VERBOSE, Severity.INFO]) == [
        Severity.DEBUG,
        Severity.INFO,
        Severity.ERROR,
    ]
