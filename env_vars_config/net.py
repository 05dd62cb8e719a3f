"""Socket address type for ``host:port`` environment values."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_MAX_PORT = 65535


@dataclass(frozen=True)
class SocketAddress:
    """An IP address and a port, written ``1.2.3.4:80`` or ``[::1]:80``.

    Hostnames are rejected; only literal IPv4/IPv6 addresses are accepted.
    """

    ip: ipaddress.IPv4Address | ipaddress.IPv6Address
    port: int

    def __post_init__(self) -> None:
        if not 0 <= self.port <= _MAX_PORT:
            raise ValueError(f"port {self.port} out of range 0-{_MAX_PORT}")

    @classmethod
    def parse(cls, text: str) -> SocketAddress:
        text = text.strip()
        if text.startswith("["):
            host, sep, port = text[1:].partition("]:")
            if not sep:
                raise ValueError(f"invalid socket address {text!r}")
            ip: ipaddress.IPv4Address | ipaddress.IPv6Address = ipaddress.IPv6Address(host)
        else:
            host, sep, port = text.rpartition(":")
            if not sep:
                raise ValueError(f"invalid socket address {text!r}: missing port")
            ip = ipaddress.IPv4Address(host)
        if not port.isascii() or not port.isdigit():
            raise ValueError(f"invalid port {port!r} in socket address {text!r}")
        return cls(ip, int(port))

    @classmethod
    def _validate(cls, value: Any) -> SocketAddress:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, tuple) and len(value) == 2:
            host, port = value
            return cls(ipaddress.ip_address(host), int(port))
        raise ValueError(f"cannot build a socket address from {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    def __str__(self) -> str:
        if self.ip.version == 6:
            return f"[{self.ip}]:{self.port}"
        return f"{self.ip}:{self.port}"


__all__ = ["SocketAddress"]
