"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from scribe_log_parser.core.models import ScribeRecord, Severity
from scribe_log_parser.core.parser import ParseResult, parse_log_file_async

DEFAULT_LIMIT = 500
HARD_LIMIT = 10_000
ALL_SEVERITIES = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "TRACE", "UNKNOWN"]


class ParsedRecordOut(BaseModel):
    timestamp: str = Field(
        description="ISO-8601 timestamp; carries an offset only when the log line had one.",
    )
    severity: str = Field(description="Severity label: Debug, Info, Warning, Error, Trace or Unknown.")
    title: str = Field(description="Entry title.")
    thread_id: int = Field(description="Win32 thread id of the writer.")
    message: str = Field(description="Message body; continuation lines are joined with CRLF.")
    line: str | None = Field(
        default=None,
        description="Tab-delimited single-line rendering, present when requested.",
    )


def _parse_severities(severities: Sequence[str] | None) -> set[Severity] | None:
    """Parse user-supplied severity names into Severity enums."""
    if not severities:
        return None
    out: set[Severity] = set()
    for s in severities:
        name = s.strip().upper()
        if not name:
            continue
        try:
            out.add(Severity[name])
        except KeyError as e:
            valid = ", ".join(ALL_SEVERITIES)
            raise ValueError(
                f"Unknown severity '{s}'. Valid values: {valid}. "
                "Tip: severities are case-insensitive (e.g., 'error', 'Warning')."
            ) from e
    return out or None


def _record_to_dict(record: ScribeRecord, *, single_line: str | None) -> dict[str, Any]:
    """Convert a ScribeRecord into a JSON-serializable dict."""
    d = record.to_dict()
    if single_line is not None:
        d["line"] = record.render_single_line(single_line)
    return ParsedRecordOut(**d).model_dump(exclude_none=True)


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


def summarize_result(
    result: ParseResult,
    *,
    severities: Sequence[str] | None = None,
    limit: int | None = None,
    single_line: str | None = None,
) -> dict[str, Any]:
    """Filter, cap and serialize a ParseResult."""
    allowed = _parse_severities(severities)
    cap = _resolve_limit(limit)

    records = result.records
    if allowed is not None:
        records = [r for r in records if r.severity in allowed]

    out = records[:cap]
    return {
        "count": len(out),
        "total": len(records),
        "skipped": result.skipped,
        "unterminated": result.unterminated,
        "ok": result.ok,
        "error": str(result.error) if result.error is not None else None,
        "records": [_record_to_dict(r, single_line=single_line) for r in out],
    }


async def parse_scribe_log_impl(
    *,
    log_path: str | Path,
    severities: Sequence[str] | None = None,
    limit: int | None = None,
    single_line: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_scribe_log` MCP tool.

    Notes
    -----
    - A missing file is an error here, unlike the core parser which reports it
      in the result.
    - severities filters by name; DEBUG and VERBOSE select the same records.
    - Records keep file order; `total` counts matches before the limit is applied.
    """
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")

    # Validate arguments before reading the file.
    _parse_severities(severities)
    _resolve_limit(limit)

    result = await parse_log_file_async(path)
    return summarize_result(result, severities=severities, limit=limit, single_line=single_line)
