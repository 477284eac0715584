"""
Append-only log files.

Every operation opens the file, does its work and closes it again; no handle
outlives a single append or replay. Existing lines are never rewritten.

Two flavours share that contract:

- DelimitedLog: one comma-separated line per record, replayed into records
  through a RecordCodec. Short or unparsable lines are skipped.
- TextLog: labeled free-text lines, replayed verbatim.
"""

from __future__ import annotations

import abc
import csv
import io
from pathlib import Path
from typing import Callable, Generic, Iterator, List, Protocol, Sequence, TextIO, TypeVar

from quwatro.errors import LogNotFound, ReadError, WriteError
from quwatro.utils.logging import get_logger

log = get_logger(__name__)

R = TypeVar("R")
T = TypeVar("T")


class RecordCodec(Protocol[R]):
    """Maps a record to and from the fields of one delimited line."""

    field_count: int

    def encode(self, record: R) -> List[str]:
        ...

    def decode(self, fields: Sequence[str]) -> R:
        ...


class AppendOnlyLog(abc.ABC, Generic[R, T]):
    """
    Base class for logs that accept records of type R and replay items of type T.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def append(self, record: R) -> None:
        """
        Append one record. Raises WriteError if the file cannot be written.
        """
        text = self._render(record)
        if not text.endswith("\n"):
            text += "\n"
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as exc:
            log.error("Log append failed", extra={"path": str(self._path), "error": str(exc)})
            raise WriteError(f"Error saving to {self._path.name}: {exc.strerror or exc}") from exc
        log.debug("Log entry appended", extra={"path": str(self._path)})

    def read_all(self) -> Iterator[T]:
        """
        Replay the whole log from the start.

        Raises LogNotFound when nothing has been logged yet. The returned
        iterator opens the file on first use and closes it when exhausted;
        OSError while reading surfaces as ReadError.
        """
        if not self.exists():
            raise LogNotFound(str(self._path))
        return self._replay()

    def _replay(self) -> Iterator[T]:
        try:
            with self._path.open("r", encoding="utf-8", newline="") as f:
                yield from self._parse(f)
        except OSError as exc:
            log.error("Log replay failed", extra={"path": str(self._path), "error": str(exc)})
            raise ReadError(f"Error reading {self._path.name}: {exc.strerror or exc}") from exc

    @abc.abstractmethod
    def _render(self, record: R) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def _parse(self, handle: TextIO) -> Iterator[T]:  # pragma: no cover - interface only
        raise NotImplementedError


class DelimitedLog(AppendOnlyLog[R, R]):
    """Comma-delimited log of records."""

    def __init__(self, path: Path | str, codec: RecordCodec[R]) -> None:
        super().__init__(path)
        self.codec = codec

    def _render(self, record: R) -> str:
        buffer = io.StringIO()
        csv.writer(buffer, lineterminator="\n").writerow(self.codec.encode(record))
        return buffer.getvalue()

    def _parse(self, handle: TextIO) -> Iterator[R]:
        for line_no, fields in enumerate(csv.reader(handle), start=1):
            if len(fields) < self.codec.field_count:
                if fields:
                    log.warning(
                        "Skipping short log line",
                        extra={"path": str(self._path), "line": line_no, "fields": len(fields)},
                    )
                continue
            try:
                yield self.codec.decode(fields)
            except ValueError as exc:
                log.warning(
                    "Skipping malformed log line",
                    extra={"path": str(self._path), "line": line_no, "error": str(exc)},
                )


class TextLog(AppendOnlyLog[R, str]):
    """Free-text log; each record is rendered by formatter and replayed as raw lines."""

    def __init__(self, path: Path | str, formatter: Callable[[R], str]) -> None:
        super().__init__(path)
        self._formatter = formatter

    def _render(self, record: R) -> str:
        return self._formatter(record)

    def _parse(self, handle: TextIO) -> Iterator[str]:
        for line in handle:
            yield line.rstrip("\r\n")


__all__ = [
    "RecordCodec",
    "AppendOnlyLog",
    "DelimitedLog",
    "TextLog",
]
