"""Mutable accumulator for the entry currently being parsed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .fields import ExtractionError, extract_value, parse_thread_id, parse_timestamp
from .models import LINE_BREAK, MIN_TIMESTAMP, ScribeRecord, Severity
from .severity import classify_severity

# Fixed field order of an entry; the cursor indexes into this tuple.
FIELD_ORDER: tuple[str, ...] = ("timestamp", "severity", "title", "thread_id", "message")
FIELD_COUNT = len(FIELD_ORDER)


@dataclass(slots=True)
class RecordBuilder:
    """In-progress entry plus a field cursor.

    Lives only inside a single parse call; callers see ScribeRecord values produced
    by build(), never the builder itself.
    """

    timestamp: datetime = MIN_TIMESTAMP
    severity: Severity = Severity.UNKNOWN
    title: str = ""
    thread_id: int = 0
    message: str = ""
    cursor: int = 0
    tainted: bool = False
    _continuation: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Restore every field to its zero value."""
        self.timestamp = MIN_TIMESTAMP
        self.severity = Severity.UNKNOWN
        self.title = ""
        self.thread_id = 0
        self.message = ""
        self.cursor = 0
        self.tainted = False
        self._continuation.clear()

    def advance(self) -> None:
        self.cursor += 1

    @property
    def fields_done(self) -> bool:
        """True once all five fields are set and further lines extend the message."""
        return self.cursor >= FIELD_COUNT

    def apply_field(self, line: str) -> bool:
        """Assign the field at the cursor from a 'Label: value' line.

        Returns False (and taints the entry) when the line cannot be converted.
        """
        try:
            value = extract_value(line)
        except ExtractionError:
            self.tainted = True
            return False

        name = FIELD_ORDER[self.cursor]
        if name == "timestamp":
            ts = parse_timestamp(value)
            if ts is None:
                self.tainted = True
                return False
            self.timestamp = ts
        elif name == "severity":
            self.severity = classify_severity(value)
        elif name == "title":
            self.title = value
        elif name == "thread_id":
            tid = parse_thread_id(value)
            if tid is None:
                self.tainted = True
                return False
            self.thread_id = tid
        else:
            self.message = value

        self.advance()
        return True

    def append_continuation(self, line: str) -> None:
        """Append a raw line to the message body."""
        self._continuation.append(line)

    def build(self) -> ScribeRecord:
        message = self.message
        if self._continuation:
            message = LINE_BREAK.join([message, *self._continuation])
        return ScribeRecord(
            timestamp=self.timestamp,
            severity=self.severity,
            title=self.title,
            thread_id=self.thread_id,
            message=message,
        )
