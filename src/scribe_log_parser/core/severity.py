"""Severity token classification."""

from __future__ import annotations

from .models import Severity


def classify_severity(token: str) -> Severity:
    """Map a raw severity token to a Severity.

    Matching is case-sensitive. Debug, Verbose, Error and Trace must match exactly;
    Info and Warn match as substrings so that variants such as "Information" and
    "Warning" are accepted. Anything else is UNKNOWN.
    """
    if token == "Debug":
        return Severity.DEBUG
    if token == "Verbose":
        return Severity.VERBOSE
    if "Info" in token:
        return Severity.INFO
    if "Warn" in token:
        return Severity.WARNING
    if token == "Error":
        return Severity.ERROR
    if token == "Trace":
        return Severity.TRACE
    return Severity.UNKNOWN
