# topmark:header:start
#
#   project      : APIStub
#   file         : writer.py
#   file_relpath : src/apistub/writer.py
#   license      : MIT
#   copyright    : (c) 2025 APIStub contributors
#
# topmark:header:end

"""Output sinks for the generated script.

Sinks
-----
- FileSystemSink: atomic replace of the destination file.
- StdoutSink: writes the script to a text stream.
- NullSink: no-op (check / dry-run).

The file sink writes to a temporary file in the destination directory and
moves it into place with `os.replace`, so the destination either keeps its old
content or receives the complete new content.
"""

from __future__ import annotations

import os
import sys
import tempfile
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol, TextIO

from apistub.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from apistub.config.logging import ApistubLogger

logger: ApistubLogger = get_logger(__name__)


class WriteStatus(Enum):
    """Result of handing the generated text to a sink."""

    WRITTEN = "written"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    status: WriteStatus
    bytes_written: int = 0


class WriteSink(Protocol):
    """Protocol for output sinks."""

    def write(self, text: str) -> WriteResult:
        """Commit ``text`` to the sink."""
        ...


def read_existing(path: Path) -> str | None:
    """Return the current content of ``path``.

    Returns:
        str | None: The decoded text, or None if the file does not exist or is
            not valid UTF-8 (it is then simply out of date).
    """
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as exc:
        logger.warning("%s is not valid UTF-8 (%s); treating it as out of date", path, exc.reason)
        return None


def matches_existing(path: Path, data: bytes) -> bool:
    """Return True if ``path`` exists and holds exactly ``data``."""
    try:
        return path.read_bytes() == data
    except FileNotFoundError:
        return False


def write_atomic(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` via a temp file and `os.replace`.

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        OSError: If the temp file cannot be created or written, or the replace
            fails; no partial output is left behind.
    """
    data: bytes = text.encode("utf-8")
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        logger.debug("Removing temp file %s after failed write", tmp_name)
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)


class FileSystemSink:
    """Atomic file sink; skips the write when the content is unchanged."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def write(self, text: str) -> WriteResult:
        """Replace the destination with ``text`` unless it already matches."""
        if matches_existing(self.path, text.encode("utf-8")):
            logger.info("%s is up to date", self.path)
            return WriteResult(status=WriteStatus.UNCHANGED)
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=write_atomic(self.path, text))


class StdoutSink:
    """Standard-output sink."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def write(self, text: str) -> WriteResult:
        """Emit ``text`` to the stream (``sys.stdout`` by default)."""
        stream = self.stream or sys.stdout
        stream.write(text)
        stream.flush()
        return WriteResult(status=WriteStatus.WRITTEN, bytes_written=len(text.encode("utf-8")))


class NullSink:
    """Dry-run sink: does not write anything."""

    def write(self, text: str) -> WriteResult:
        """No-op write."""
        return WriteResult(status=WriteStatus.SKIPPED)
