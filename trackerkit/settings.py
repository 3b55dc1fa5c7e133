"""Device settings: server address, timers and auto-lock, stored as JSON."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from .json_node import JsonNode, JsonType, create_object
from .json_text import JsonParseError, parse, render
from .textutil import trim_left

MAX_DOMAIN_NAME_LEN = 32
DEFAULT_DOMAIN = "www.xiaoan110.com"
DEFAULT_PORT = 9880

TAG_SERVER = "SERVER"
TAG_ADDR_TYPE = "ADDR_TYPE"
TAG_ADDR = "ADDR"
TAG_PORT = "PORT"
TAG_AUTOLOCK = "autolock"
TAG_LOCK = "lock"
TAG_PERIOD = "period"

_IP_RE = re.compile(
    r"\s*([+-]?\d+)\.\s*([+-]?\d+)\.\s*([+-]?\d+)\.\s*([+-]?\d+)"
)
_SERVER_RE = re.compile(r"([^:]+):\s*([+-]?\d+)")

logger = logging.getLogger(__name__)


class AddrType(IntEnum):
    """How the server address is given."""

    IP = 0
    DOMAIN = 1


class SettingsError(ValueError):
    """Raised when settings text or a server specification is malformed."""


def _member(node: JsonNode, name: str) -> JsonNode:
    child = node.get(name)
    if child is None:
        raise SettingsError(f"no {name} entry in settings")
    return child


@dataclass
class Settings:
    """The tracker's configuration with its factory defaults."""

    addr_type: AddrType = AddrType.DOMAIN
    domain: str = DEFAULT_DOMAIN
    ipaddr: tuple[int, int, int, int] = (0, 0, 0, 0)
    port: int = DEFAULT_PORT
    main_loop_timer_period: int = 5000
    vibration_timer_period: int = 1000
    seek_timer_period: int = 2000
    timeupdate_timer_period: int = 24 * 60 * 60 * 1000
    gps_send_period: int = 30 * 1000
    is_vibrate_fixed: bool = False
    is_autodefend_fixed: bool = True
    autodefend_period: int = 5

    def to_json(self) -> str:
        """Render the stored part of the settings as formatted JSON."""
        root = create_object()
        address = create_object()
        address.add_number(TAG_ADDR_TYPE, int(self.addr_type))
        if self.addr_type == AddrType.DOMAIN:
            address.add_string(TAG_ADDR, self.domain)
        else:
            server = ".".join(str(part) for part in self.ipaddr)
            address.add_string(TAG_ADDR, server[:MAX_DOMAIN_NAME_LEN - 1])
        address.add_number(TAG_PORT, self.port)
        root.add(TAG_SERVER, address)

        autolock = create_object()
        autolock.add_bool(TAG_LOCK, self.is_autodefend_fixed)
        autolock.add_number(TAG_PERIOD, self.autodefend_period)
        root.add(TAG_AUTOLOCK, autolock)
        return render(root, True)

    @classmethod
    def from_json(cls, text: str | bytes) -> Settings:
        """Build settings from JSON text; fields it does not hold keep their defaults."""
        try:
            conf = parse(text)
        except JsonParseError as exc:
            raise SettingsError(f"setting file format error: {exc}") from exc

        settings = cls()
        server = _member(conf, TAG_SERVER)
        raw_type = _member(server, TAG_ADDR_TYPE).value_int
        try:
            settings.addr_type = AddrType(raw_type)
        except ValueError as exc:
            raise SettingsError(f"unknown address type {raw_type}") from exc

        address = _member(server, TAG_ADDR)
        if address.type is not JsonType.STRING or address.value_string is None:
            raise SettingsError("server address is not a string")
        if settings.addr_type == AddrType.DOMAIN:
            settings.domain = address.value_string[:MAX_DOMAIN_NAME_LEN]
        else:
            match = _IP_RE.match(address.value_string)
            if match is None:
                raise SettingsError(f"bad ip address {address.value_string!r}")
            settings.ipaddr = tuple(int(part) & 0xFF for part in match.groups())

        settings.port = _member(server, TAG_PORT).value_int & 0xFFFF

        autolock = _member(conf, TAG_AUTOLOCK)
        settings.is_autodefend_fixed = bool(_member(autolock, TAG_LOCK).value_int)
        settings.autodefend_period = _member(autolock, TAG_PERIOD).value_int & 0xFF
        return settings

    def change_server(self, spec: str) -> None:
        """Set the server from ``host:port``, where host is an IPv4 address or a domain."""
        spec = trim_left(spec)
        match = _SERVER_RE.match(spec)
        if match is None:
            raise SettingsError(
                "format not correct, should be like '10.11.12.23:9876' or 'server.example.com:9876'"
            )
        address, port_text = match.groups()
        port = int(port_text) & 0xFFFF

        ip_match = _IP_RE.match(address)
        if ip_match is not None:
            parts = [int(part) for part in ip_match.groups()]
            if any(part > 255 for part in parts):
                raise SettingsError(f"ip address format not correct: {address!r}")
            self.addr_type = AddrType.IP
            self.ipaddr = tuple(part & 0xFF for part in parts)
        else:
            self.addr_type = AddrType.DOMAIN
            self.domain = address[:MAX_DOMAIN_NAME_LEN]
        self.port = port


def load_settings(path: str | os.PathLike[str]) -> Settings:
    """Read settings from ``path``; a missing file gives the defaults."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("setting file not exists.")
        return Settings()
    return Settings.from_json(text)


def save_settings(settings: Settings, path: str | os.PathLike[str]) -> None:
    """Write ``settings`` to ``path`` as JSON."""
    Path(path).write_text(settings.to_json(), encoding="utf-8")