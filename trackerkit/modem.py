"""AT commands sent to the cellular modem and checks on its responses."""

from __future__ import annotations

from typing import Callable

MODEM_TEST_CMD = "=?"
MODEM_READ_CMD = "?"
MODEM_WRITE_CMD = "="

CR = "\r"
LF = "\n"

AT_CGATT = "AT+CGATT"
AT_CENG = "AT+CENG"
AT_CGNSINF = "AT+CGNSINF"
AT_CCID = "AT+CCID"

_MAX_COMMAND_LENGTH = 31


class ModemError(IOError):
    """Raised when the modem does not take a whole command."""


def is_call_ready(response: str) -> bool:
    """True if the modem reports that it is ready for calls."""
    return "Call Ready" in response


def is_ccid_ok(response: str) -> bool:
    """True if the response echoes the CCID query."""
    return AT_CCID in response


def engineering_mode_command(mode: int, ncell: int) -> str:
    """The command switching engineering mode to ``mode`` with neighbour-cell flag ``ncell``."""
    command = f"{AT_CENG}{MODEM_WRITE_CMD}{mode},{ncell}{CR}"
    return command[:_MAX_COMMAND_LENGTH]


class Modem:
    """Sends AT commands through ``writer``, which returns how many bytes it took."""

    def __init__(self, writer: Callable[[bytes], int]) -> None:
        self.writer = writer

    def send(self, command: str) -> None:
        """Write ``command``; raise ModemError unless all of it was written."""
        data = command.encode("ascii")
        written = self.writer(data)
        if written != len(data):
            raise ModemError(f"modem write failed: should be {len(data)}, but {written}")

    def switch_engineering_mode(self, mode: int, ncell: int) -> None:
        self.send(engineering_mode_command(mode, ncell))

    def read_cell_info(self) -> None:
        self.send(AT_CENG + MODEM_READ_CMD + CR)

    def read_ccid(self) -> None:
        self.send(AT_CCID + CR)

    def gnss(self) -> None:
        self.send(AT_CGNSINF + CR)