"""Scribe log parsing.

Entries look like::

    ----------------------------------------
    Timestamp: 2020-01-01 12:00:00
    Severity: Info
    Title: Hello
    Win32 ThreadID: 42
    Message: line one
    continuation line
    ----------------------------------------

The five labeled fields always come in the same order; the label text itself is not
checked. Any line after the message line, blank or not, extends the message until the
closing delimiter. An entry with a field that fails to convert is discarded without
affecting its neighbours, and an entry the file never closes is not emitted.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterable, Iterable, Iterator
from contextlib import asynccontextmanager, contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO

import aiofiles
from aiofiles.threadpool import wrap

from .builder import RecordBuilder
from .config import ParseConfig, resolve_parse_config
from .models import DELIMITER, ScribeRecord

logger = logging.getLogger(__name__)

# Whole-file failures that are reported instead of raised. LookupError covers an unknown codec.
READ_ERRORS: tuple[type[BaseException], ...] = (OSError, EOFError, UnicodeDecodeError, LookupError)

LineSource = str | Path | Iterable[str]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing one source.

    `records` holds every entry completed before `error` (if any) occurred.
    """

    records: list[ScribeRecord] = field(default_factory=list)
    skipped: int = 0  # entries discarded because a field failed to convert
    unterminated: bool = False  # the source ended inside an entry
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EntryStateMachine:
    """Consume lines one at a time and emit completed entries."""

    def __init__(self) -> None:
        self._builder = RecordBuilder()
        self._inside = False
        self._line_no = 0
        self._entry_start = 0
        self.skipped = 0

    @property
    def open_entry(self) -> bool:
        """True while an opening delimiter has not yet been closed."""
        return self._inside

    def feed(self, line: str) -> ScribeRecord | None:
        """Process one line (without its line terminator).

        Returns a record when this line closes an untainted entry.
        """
        self._line_no += 1

        if line == DELIMITER:
            if self._inside:
                return self._close()
            self._inside = True
            self._entry_start = self._line_no
            return None

        # Outside an entry, stray text is ignored; a tainted entry only waits for its delimiter.
        if not self._inside or self._builder.tainted:
            return None

        if self._builder.fields_done:
            self._builder.append_continuation(line)
            return None

        if not line.strip():
            return None

        if not self._builder.apply_field(line):
            logger.debug(
                "Entry starting at line %s tainted by line %s: %r",
                self._entry_start,
                self._line_no,
                line,
            )
        return None

    def _close(self) -> ScribeRecord | None:
        record: ScribeRecord | None = None
        if self._builder.tainted:
            self.skipped += 1
            logger.debug("Discarding entry starting at line %s", self._entry_start)
        else:
            record = self._builder.build()
        self._builder.reset()
        self._inside = False
        return record


def _strip_eol(line: str) -> str:
    return line.rstrip("\r\n")


def _collect(
    lines: Iterable[str],
    machine: EntryStateMachine,
    records: list[ScribeRecord],
) -> None:
    for line in lines:
        record = machine.feed(_strip_eol(line))
        if record is not None:
            records.append(record)


def parse_lines(lines: Iterable[str]) -> list[ScribeRecord]:
    """Parse an iterable of text lines into completed records."""
    records: list[ScribeRecord] = []
    _collect(lines, EntryStateMachine(), records)
    return records


@contextmanager
def _open_text(path: Path, cfg: ParseConfig) -> Iterator[IO[str]]:
    """Open a log file for text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=cfg.encoding, errors=cfg.decode_errors)
    else:
        f = path.open(encoding=cfg.encoding, errors=cfg.decode_errors)
    with f:
        yield f


@asynccontextmanager
async def _open_text_async(path: Path, cfg: ParseConfig):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=cfg.encoding, errors=cfg.decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=cfg.encoding, errors=cfg.decode_errors) as f:
            yield f


def _finish(
    machine: EntryStateMachine,
    records: list[ScribeRecord],
    error: BaseException | None,
) -> ParseResult:
    if machine.open_entry:
        logger.debug("Source ended inside an entry; dropping it")
    return ParseResult(
        records=records,
        skipped=machine.skipped,
        unterminated=machine.open_entry,
        error=error,
    )


def _read_handle(
    source: Iterable[str],
    machine: EntryStateMachine,
    records: list[ScribeRecord],
) -> None:
    """Read a caller-supplied handle, reporting a closed or unusable one as a read failure."""
    try:
        _collect(source, machine, records)
    except UnicodeDecodeError:
        raise
    except ValueError as exc:
        # e.g. "I/O operation on closed file"
        raise OSError(f"cannot read source: {exc}") from exc


def parse_log_file_detailed(
    source: LineSource,
    *,
    config: ParseConfig | None = None,
) -> ParseResult:
    """Parse a path or an open text source, reporting read failures in the result."""
    machine = EntryStateMachine()
    records: list[ScribeRecord] = []
    try:
        if isinstance(source, (str, Path)):
            cfg = resolve_parse_config(config)
            with _open_text(Path(source), cfg) as f:
                _collect(f, machine, records)
        else:
            _read_handle(source, machine, records)
    except READ_ERRORS as exc:
        logger.warning("Parsing aborted after %s records: %s", len(records), exc)
        return _finish(machine, records, exc)
    return _finish(machine, records, None)


def parse_log_file(
    source: LineSource,
    *,
    config: ParseConfig | None = None,
) -> list[ScribeRecord]:
    """Parse a Scribe log and return all completed records in file order.

    Never raises for unreadable input: a source that cannot be opened or read
    yields an empty list. Use parse_log_file_detailed() to tell that apart from
    a file with no valid entries.
    """
    result = parse_log_file_detailed(source, config=config)
    if not result.ok:
        return []
    return result.records


async def _collect_async(
    lines: AsyncIterable[str],
    machine: EntryStateMachine,
    records: list[ScribeRecord],
) -> None:
    async for line in lines:
        record = machine.feed(_strip_eol(line))
        if record is not None:
            records.append(record)


async def parse_log_file_async(
    log_path: str | Path,
    *,
    config: ParseConfig | None = None,
) -> ParseResult:
    """Async counterpart of parse_log_file_detailed() for a file path."""
    cfg = resolve_parse_config(config)
    machine = EntryStateMachine()
    records: list[ScribeRecord] = []
    try:
        async with _open_text_async(Path(log_path), cfg) as f:
            await _collect_async(f, machine, records)
    except READ_ERRORS as exc:
        logger.warning("Parsing aborted after %s records: %s", len(records), exc)
        return _finish(machine, records, exc)
    return _finish(machine, records, None)
