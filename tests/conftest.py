from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

DELIM = "-" * 40


def entry_lines(
    *,
    timestamp: str = "2020-01-01 12:00:00",
    severity: str = "Info",
    title: str = "Hello",
    thread_id: str = "42",
    message: str = "line one",
    continuation: tuple[str, ...] = (),
) -> list[str]:
    return [
        DELIM,
        f"Timestamp: {timestamp}",
        f"Severity: {severity}",
        f"Title: {title}",
        f"Win32 ThreadID: {thread_id}",
        f"Message: {message}",
        *continuation,
        DELIM,
    ]


@pytest.fixture
def write_scribe_log() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def sample_log_lines() -> list[str]:
    return [
        *entry_lines(continuation=("continuation line",)),
        "",
        *entry_lines(
            timestamp="2020-01-01 12:00:05",
            severity="Warning",
            title="Retry",
            thread_id="7",
            message="upstream slow",
        ),
        *entry_lines(
            timestamp="2020-01-01 12:00:09",
            severity="Error",
            title="Boom",
            thread_id="7",
            message="failed",
        ),
    ]


@pytest.fixture
def scribe_entry() -> Callable[..., list[str]]:
    return entry_lines
