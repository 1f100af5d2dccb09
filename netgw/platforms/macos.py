"""
macOS default gateway lookup built on ``route``, ``ifconfig``, ``grep`` and ``awk``.

Scalar fields are pulled out of key/value text by piping it through
``grep <key>`` and ``awk '{print $2}'``, the same spawn-then-extract shape
the other platforms use.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from netgw.core.errors import (
    CommandExecutionError,
    DefaultGatewayNotAvailableError,
    DefaultInterfaceNotFoundError,
    DeviceIpNotFoundError,
    NetmaskNotFoundError,
    PrefixLengthNotFoundError,
    PrefixLengthNotValidError,
)
from netgw.core.executor import Executor
from netgw.core.types import AddressFamily, NetworkDefaultGateway, validate_prefix_length
from netgw.platforms.base import GatewayParser

logger = logging.getLogger(__name__)

UNIX_FAMILY = {
    AddressFamily.IPV4: "inet",
    AddressFamily.IPV6: "inet6",
}

# Trailing space keeps "inet " from matching the inet6 rows
GREP_FAMILY = {
    AddressFamily.IPV4: "inet ",
    AddressFamily.IPV6: "inet6",
}

STATUS_ACTIVE = "active"

# grep exits 1 when no line matched
GREP_NO_MATCH = 1


def default_route_command(family: AddressFamily) -> List[str]:
    flag = "-inet" if family is AddressFamily.IPV4 else "-inet6"
    return ["route", "-n", "get", flag, "default"]


def interface_details_command(interface: str) -> List[str]:
    return ["ifconfig", interface]


def grep_command(pattern: str) -> List[str]:
    return ["grep", pattern]


AWK_SECOND_FIELD = ["awk", "{print $2}"]


async def grep(executor: Executor, text: str, pattern: str) -> Optional[str]:
    """Return the rows of *text* containing *pattern*, or None if there are none."""
    try:
        return await executor.execute(grep_command(pattern), text)
    except CommandExecutionError as exc:
        if exc.returncode == GREP_NO_MATCH:
            return None
        raise


async def value_from_row_key(executor: Executor, text: str, key: str) -> Optional[str]:
    """Second whitespace-separated field of the first row of *text* containing *key*."""
    rows = await grep(executor, text, key)
    if not rows:
        return None
    output = await executor.execute(AWK_SECOND_FIELD, rows)
    values = output.splitlines()
    return values[0].strip() if values else None


def value_from_key(text: str, key: str) -> Optional[str]:
    """Return the token following *key* in *text*, or None if *key* is absent.

    >>> value_from_key("inet 192.168.1.15 netmask 0xffffff00", "netmask")
    '0xffffff00'
    """
    parts = text.split()
    try:
        index = parts.index(key)
    except ValueError:
        return None
    if index + 1 < len(parts):
        return parts[index + 1]
    return None


def netmask_to_prefix_length(netmask: str) -> int:
    """Count the set bits of a hexadecimal netmask (``0xffffff00`` -> 24)."""
    try:
        bits = bin(int(netmask, 16))
    except ValueError:
        raise PrefixLengthNotValidError() from None
    prefix_length = bits.count("1")
    if prefix_length > 32:
        raise PrefixLengthNotValidError()
    return prefix_length


async def prefix_length_and_ip(executor: Executor, interface_output: str, family: AddressFamily) -> Tuple[str, int]:
    """Extract the device address and prefix length for *family* from ``ifconfig`` output."""
    status = await value_from_row_key(executor, interface_output, "status")
    if status != STATUS_ACTIVE:
        logger.debug("interface status is %r", status)
        raise DefaultInterfaceNotFoundError()

    rows = await grep(executor, interface_output, GREP_FAMILY[family]) or ""
    ip = value_from_key(rows, UNIX_FAMILY[family])
    if not ip:
        raise DeviceIpNotFoundError()

    if family is AddressFamily.IPV4:
        # ifconfig reports IPv4 as a netmask, not a prefix length
        netmask = value_from_key(rows, "netmask")
        if not netmask:
            raise NetmaskNotFoundError()
        prefix_length = netmask_to_prefix_length(netmask)
    else:
        prefixlen = value_from_key(rows, "prefixlen")
        if not prefixlen:
            raise PrefixLengthNotFoundError()
        prefix_length = validate_prefix_length(prefixlen, family)

    return ip, prefix_length


class MacOSParser(GatewayParser):
    async def _default_route(self, family: AddressFamily) -> str:
        try:
            return await self.run(default_route_command(family))
        except CommandExecutionError as exc:
            # route(8) exits non-zero with "not in table" when there is no default route
            if exc.returncode is None:
                raise
            raise DefaultGatewayNotAvailableError() from exc

    async def default_gateway(self, family: AddressFamily) -> NetworkDefaultGateway:
        route_output = await self._default_route(family)
        if not route_output:
            raise DefaultGatewayNotAvailableError()

        gateway = await value_from_row_key(self.executor, route_output, "gateway")
        if not gateway:
            raise DefaultGatewayNotAvailableError()
        interface = await value_from_row_key(self.executor, route_output, "interface")
        if not interface:
            raise DefaultInterfaceNotFoundError()

        interface_output = await self.run(interface_details_command(interface))
        ip, prefix_length = await prefix_length_and_ip(self.executor, interface_output, family)
        logger.info("selected default interface %s", interface)
        return NetworkDefaultGateway(
            ip=ip,
            gateway=gateway,
            interface=interface,
            prefix_length=prefix_length,
        )
