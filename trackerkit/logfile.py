"""A size-capped log file with one backup, and a hex dump formatter."""

from __future__ import annotations

import codecs
import os
from pathlib import Path
from typing import Callable, Iterator

from .commands import CommandRegistry

LOG_FILE_NAME = "log.txt"
LOG_FILE_BAK = "log.old"
MAX_LOGFILE_SIZE = 4 * 1024
MAX_LOG_MESSAGE = 1023
READ_BUFFER_LENGTH = 512


def format_hex(data: bytes) -> str:
    """Render ``data`` as rows of 16 hex bytes followed by their printable text."""
    data = bytes(data)
    parts = ["    "]
    parts.extend("%X  " % column for column in range(16))
    parts.append("    ")
    parts.extend("%X" % column for column in range(16))
    parts.append("\r\n")
    for start in range(0, len(data), 16):
        row = data[start:start + 16]
        parts.append("%02d  " % (start // 16 + 1))
        parts.extend("%02x " % byte for byte in row)
        parts.append("   " * (16 - len(row)))
        parts.append("    ")
        parts.extend(chr(byte) if 32 <= byte < 127 else "." for byte in row)
        parts.append("\r\n")
    return "".join(parts)


class LogFile:
    """Appends lines to ``log.txt``; once it reaches ``max_size`` it moves to ``log.old``."""

    def __init__(self, directory: str | os.PathLike[str], max_size: int = MAX_LOGFILE_SIZE) -> None:
        self.directory = Path(directory)
        self.max_size = max_size
        self.path = self.directory / LOG_FILE_NAME
        self.backup_path = self.directory / LOG_FILE_BAK

    def _rotate_if_needed(self) -> None:
        try:
            size = self.path.stat().st_size
        except FileNotFoundError:
            return
        if size < self.max_size:
            return
        self.backup_path.unlink(missing_ok=True)
        self.path.rename(self.backup_path)

    def write(self, message: str) -> None:
        """Append ``message`` (cut to 1023 characters) and a CR LF."""
        line = message[:MAX_LOG_MESSAGE] + "\r\n"
        self._rotate_if_needed()
        with self.path.open("ab") as handle:
            handle.write(line.encode("utf-8", errors="replace"))

    def read_chunks(self, chunk_size: int = READ_BUFFER_LENGTH) -> Iterator[bytes]:
        """Yield the log's content in chunks; raise FileNotFoundError if there is none."""
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        with self.path.open("rb") as handle:
            while True:
                chunk = handle.read(chunk_size)
                if not chunk:
                    return
                yield chunk
                if len(chunk) < chunk_size:
                    return

    def register(self, registry: CommandRegistry, output: Callable[[str], object]) -> None:
        """Add a "catlog" command that sends the log's content to ``output``."""

        def catlog(line: str) -> int:
            output("cat log file begin:")
            decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
            try:
                for chunk in self.read_chunks():
                    text = decoder.decode(chunk)
                    if text:
                        output(text)
            except FileNotFoundError:
                output("log file not exists.")
                return -1
            tail = decoder.decode(b"", final=True)
            if tail:
                output(tail)
            return 0

        registry.register("catlog", catlog)