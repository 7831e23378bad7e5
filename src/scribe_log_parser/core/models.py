"""Core data models for parsed Scribe log entries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any

# Entries are bounded by this exact line (40 hyphens).
DELIMITER = "-" * 40

# Joins the physical lines of a multi-line message.
LINE_BREAK = "\r\n"

MIN_TIMESTAMP = datetime.min


class Severity(IntEnum):
    """Scribe severities; the ordinal is meaningful for sorting and comparison."""

    DEBUG = 0
    VERBOSE = 0  # alias: the UI shows "Debug", the file says "Verbose"
    INFO = 1
    WARNING = 2
    ERROR = 3
    TRACE = 4
    UNKNOWN = 5

    @property
    def label(self) -> str:
        """Display name, e.g. 'Info'."""
        return self.name.capitalize()


@dataclass(frozen=True, slots=True)
class ScribeRecord:
    """One completed log entry."""

    timestamp: datetime
    severity: Severity
    title: str
    thread_id: int
    message: str

    def _columns(self, message: str) -> list[str]:
        return [
            self.timestamp.isoformat(sep=" "),
            self.severity.label,
            self.title,
            str(self.thread_id),
            message,
        ]

    def render(self, delimiter: str = "\t") -> str:
        """Render as Timestamp, Severity, Title, ThreadId, Message joined by delimiter."""
        return delimiter.join(self._columns(self.message))

    def render_single_line(self, replacement: str, delimiter: str = "\t") -> str:
        """Like render(), with every line break in the message replaced.

        Intended for single-line display contexts such as spreadsheet export.
        """
        return delimiter.join(self._columns(self.message.replace(LINE_BREAK, replacement)))

    def to_dict(self) -> dict[str, Any]:
        """Convert into a JSON-serializable dict."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.label,
            "title": self.title,
            "thread_id": self.thread_id,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.render()
