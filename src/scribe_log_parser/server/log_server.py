"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (parse a Scribe log file)
- Resources: addressable data blobs (help, sample log, record schema, parsed files)

Run locally (stdio):
    python -m scribe_log_parser
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from scribe_log_parser.resources.registry import register_resources, resolve_log_path
from scribe_log_parser.tools.parse import parse_scribe_log_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("SCRIBE_LOG_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("scribe-log", json_response=True)

register_resources(mcp)


@mcp.tool()
async def parse_scribe_log(
    log_path: str,
    severities: Sequence[str] | None = None,
    limit: int | None = None,
    single_line: str | None = None,
) -> dict[str, Any]:
    """Parse a Scribe log file into structured records.

    Parameters
    ----------
    log_path:
        Path to a Scribe log (.log/.txt, optionally .gz), resolved under SCRIBE_LOG_BASE_DIR.
    severities:
        Keep only these severities (e.g., ["error", "warning"]). Case-insensitive.
    limit:
        Maximum number of records returned (hard-capped in the implementation).
    single_line:
        When set, each record also carries a tab-delimited "line" whose message
        line breaks are replaced by this string.

    Returns
    -------
    dict:
        {"count", "total", "skipped", "unterminated", "ok", "error", "records"}
    """
    path = resolve_log_path(log_path)
    return await parse_scribe_log_impl(
        log_path=path,
        severities=severities,
        limit=limit,
        single_line=single_line,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
