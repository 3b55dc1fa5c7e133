"""Debug shell commands for the device file system: ls, rm, cat and tail."""

from __future__ import annotations

import logging
import os
import shutil
import time
from pathlib import Path
from typing import Callable

from .commands import CommandRegistry
from .textutil import bypass, trim_left, trim_right

CMD_STRING_LS = "ls"
CMD_STRING_RM = "rm"
CMD_STRING_CAT = "cat"
CMD_STRING_TAIL = "tail"

MAX_TAIL_SIZE = 1024

logger = logging.getLogger(__name__)


def _decode(data: bytes) -> str:
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


class FileShell:
    """File commands working inside ``root``, printing through ``output``."""

    def __init__(self, root: str | os.PathLike[str], output: Callable[[str], object]) -> None:
        self.root = Path(root)
        self.output = output

    @staticmethod
    def _argument(line: str, command: str) -> str:
        rest = bypass(line, command) or ""
        return trim_right(trim_left(rest))

    def _entry_line(self, path: Path) -> str:
        info = path.stat()
        is_dir = path.is_dir()
        flags = "".join((
            "D" if is_dir else "-",
            "-" if os.access(path, os.W_OK) else "R",
            "H" if path.name.startswith(".") else "-",
            "-",
            "-" if is_dir else "A",
        ))
        stamp = time.gmtime(info.st_mtime)
        size = 0 if is_dir else info.st_size
        return "%-16s\t %d\t %s\t %d-%d-%d %d:%d:%d\r\n" % (
            path.name, size, flags,
            stamp.tm_year, stamp.tm_mon, stamp.tm_mday,
            stamp.tm_hour, stamp.tm_min, stamp.tm_sec,
        )

    def ls(self, line: str = "") -> int:
        """List the files with size, attributes and date, then the free space."""
        try:
            entries = sorted(self.root.iterdir(), key=lambda entry: entry.name)
        except OSError:
            entries = []
        for entry in entries:
            self.output(self._entry_line(entry))
        try:
            size = self.free_size()
        except OSError as exc:
            self.output(f"\r\n\t free disk size:---(error:{exc.errno})\r\n")
        else:
            self.output(f"\r\n\t free disk size:{size}\r\n")
        return 0

    def rm(self, line: str) -> int:
        """Delete the file named after the command; wildcards are not supported."""
        name = self._argument(line, CMD_STRING_RM)
        if not name:
            logger.info("parameter not correct")
            return 0
        try:
            (self.root / name).unlink()
        except FileNotFoundError:
            self.output(f"file {name} not found")
            return -1
        except OSError as exc:
            self.output(f"delete file {name} fail, return code is {exc.errno}")
            return -1
        self.output("delete file Success")
        return 0

    def cat(self, line: str) -> int:
        """Print the whole content of the file named after the command."""
        name = self._argument(line, CMD_STRING_CAT)
        if not name:
            self.output("parameter not correct")
            return 0
        try:
            data = (self.root / name).read_bytes()
        except FileNotFoundError:
            self.output(f"file {name} not found")
            return -1
        except OSError as exc:
            self.output(f"open file failed: {exc.errno}")
            return -1
        self.output(_decode(data))
        return 0

    def tail(self, line: str) -> int:
        """Print the last 1024 bytes of the file named after the command."""
        name = self._argument(line, CMD_STRING_TAIL)
        if not name:
            self.output("parameter not correct")
            return 0
        path = self.root / name
        try:
            with path.open("rb") as handle:
                size = os.fstat(handle.fileno()).st_size
                handle.seek(max(size - MAX_TAIL_SIZE, 0))
                data = handle.read(MAX_TAIL_SIZE)
        except FileNotFoundError:
            self.output("log file not exists.")
            return -1
        except OSError as exc:
            self.output(f"open file failed: {exc.errno}")
            return -1
        self.output(_decode(data) + "\n")
        return 0

    def free_size(self) -> int:
        """Free space, in bytes, on the disk holding ``root``."""
        return shutil.disk_usage(self.root).free

    def register(self, registry: CommandRegistry) -> None:
        """Add the ls, rm, cat and tail commands to ``registry``."""
        registry.register(CMD_STRING_LS, self.ls)
        registry.register(CMD_STRING_RM, self.rm)
        registry.register(CMD_STRING_CAT, self.cat)
        registry.register(CMD_STRING_TAIL, self.tail)