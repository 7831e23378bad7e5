"""Parse configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

ENCODING_ENV = "SCRIBE_LOG_ENCODING"
DECODE_ERRORS_ENV = "SCRIBE_LOG_DECODE_ERRORS"

DECODE_ERROR_HANDLERS = ("strict", "replace", "ignore", "backslashreplace", "surrogateescape")


@dataclass(frozen=True, slots=True)
class ParseConfig:
    # utf-8-sig drops a leading byte order mark
    encoding: str = "utf-8-sig"
    # "strict" turns undecodable bytes into a read failure
    decode_errors: str = "replace"


def resolve_parse_config(cfg: ParseConfig | None) -> ParseConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = ParseConfig()

    encoding = os.getenv(ENCODING_ENV)
    if encoding:
        cfg = replace(cfg, encoding=encoding)

    errors = os.getenv(DECODE_ERRORS_ENV)
    if errors:
        if errors not in DECODE_ERROR_HANDLERS:
            allowed = ", ".join(DECODE_ERROR_HANDLERS)
            raise ValueError(f"{DECODE_ERRORS_ENV} must be one of: {allowed}")
        cfg = replace(cfg, decode_errors=errors)

    return cfg
