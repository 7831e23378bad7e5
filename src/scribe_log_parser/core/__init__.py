"""Scribe log parsing core.

Parses the vendor's Scribe text logs into ScribeRecord values.
"""

from __future__ import annotations

from .builder import FIELD_ORDER, RecordBuilder
from .config import ParseConfig, resolve_parse_config
from .fields import ExtractionError, extract_value, parse_thread_id, parse_timestamp
from .models import DELIMITER, LINE_BREAK, MIN_TIMESTAMP, ScribeRecord, Severity
from .parser import (
    EntryStateMachine,
    ParseResult,
    parse_lines,
    parse_log_file,
    parse_log_file_async,
    parse_log_file_detailed,
)
from .severity import classify_severity

__all__ = [
    "DELIMITER",
    "FIELD_ORDER",
    "LINE_BREAK",
    "MIN_TIMESTAMP",
    "EntryStateMachine",
    "ExtractionError",
    "ParseConfig",
    "ParseResult",
    "RecordBuilder",
    "ScribeRecord",
    "Severity",
    "classify_severity",
    "extract_value",
    "parse_lines",
    "parse_log_file",
    "parse_log_file_async",
    "parse_log_file_detailed",
    "parse_thread_id",
    "parse_timestamp",
    "resolve_parse_config",
]
