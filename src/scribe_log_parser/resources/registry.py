"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from scribe_log_parser.core.models import DELIMITER
from scribe_log_parser.core.parser import parse_log_file_async
from scribe_log_parser.tools.parse import ParsedRecordOut, summarize_result

ALLOWED_FILE_SUFFIXES = {".log", ".txt"}
BASE_DIR_ENV = "SCRIBE_LOG_BASE_DIR"

SAMPLE_LOG = "\n".join(
    [
        DELIMITER,
        "Timestamp: 2020-01-01 12:00:00",
        "Severity: Information",
        "Title: Startup",
        "Win32 ThreadID: 42",
        "Message: service started",
        DELIMITER,
        DELIMITER,
        "Timestamp: 2020-01-01 12:00:05",
        "Severity: Warning",
        "Title: Retry",
        "Win32 ThreadID: 42",
        "Message: upstream slow: retrying",
        "attempt 2 of 3",
        DELIMITER,
    ]
) + "\n"


def _base_dir() -> Path:
    return Path(os.getenv(BASE_DIR_ENV, os.getcwd())).resolve()


def resolve_log_path(path: str | Path) -> Path:
    """Resolve a log path under SCRIBE_LOG_BASE_DIR and check it is an allowed log file.

    Relative paths are taken from the base directory; `.gz` is accepted on top of an
    allowed suffix (e.g. `app.log.gz`).
    """
    base = _base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if p != base and base not in p.parents:
        raise ValueError("Path escapes base dir")
    if not p.is_file():
        raise FileNotFoundError(f"File not found: {p}")

    inner = p.with_suffix("") if p.suffix.lower() == ".gz" else p
    if inner.suffix.lower() not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return p


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://scribe-log/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        base = _base_dir()
        return (
            "Resources:\n"
            "- app://scribe-log/help\n"
            "- app://scribe-log/examples/sample-log\n"
            "- app://scribe-log/schemas/record\n"
            f"- scribe://{{path}} (parsed records; restricted to {BASE_DIR_ENV}; "
            f"allowed: {allowed}, .gz)\n"
            f"\nBase directory: {base}\n"
        )

    @mcp.resource("app://scribe-log/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny sample Scribe log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://scribe-log/schemas/record")
    def record_schema() -> dict[str, Any]:
        """Return the JSON schema for parsed records."""
        return ParsedRecordOut.model_json_schema()

    @mcp.resource("scribe://{path}")
    async def parsed_log(path: str) -> dict[str, Any]:
        """Parse a Scribe log from within SCRIBE_LOG_BASE_DIR."""
        p = resolve_log_path(path)
        return summarize_result(await parse_log_file_async(p))
