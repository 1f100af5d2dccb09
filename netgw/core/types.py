"""
Public result type and the closed sets of address families, platforms and runtimes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from netgw.core.errors import PrefixLengthNotValidError


class AddressFamily(Enum):
    IPV4 = "IPv4"
    IPV6 = "IPv6"

    @property
    def max_prefix_length(self) -> int:
        return 32 if self is AddressFamily.IPV4 else 128


class Platform(Enum):
    LINUX = "linux"
    MACOS = "darwin"
    WINDOWS = "windows"


class Runtime(Enum):
    ASYNCIO = "asyncio"
    THREAD = "thread"


@dataclass(frozen=True)
class NetworkDefaultGateway:
    """The host's default gateway for one address family."""

    ip: str
    gateway: str
    interface: str
    prefix_length: int

    def as_dict(self) -> Dict[str, Any]:
        """Return the record with its stable public key names."""
        return {
            "ip": self.ip,
            "gateway": self.gateway,
            "interface": self.interface,
            "prefixLength": self.prefix_length,
        }


def validate_prefix_length(value: Any, family: AddressFamily) -> int:
    """Coerce *value* to an int and check it against the family's bit width.

    Raises :class:`PrefixLengthNotValidError` instead of clamping.
    """
    if isinstance(value, bool):
        raise PrefixLengthNotValidError()
    try:
        prefix_length = int(value)
    except (TypeError, ValueError):
        raise PrefixLengthNotValidError() from None
    if isinstance(value, float) and value != prefix_length:
        raise PrefixLengthNotValidError()
    if not 0 <= prefix_length <= family.max_prefix_length:
        raise PrefixLengthNotValidError()
    return prefix_length
