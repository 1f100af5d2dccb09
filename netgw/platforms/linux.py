"""
Linux default gateway lookup built on iproute2's JSON output.

Runs ``ip -4|-6 -j route show default``, then ``ip -j addr show <dev>`` for
every device carrying a default route (concurrently), joins both outputs on
the device name and selects the lowest-metric ``UP`` address.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from netgw.core.errors import DefaultGatewayNotAvailableError, JSONParsingError
from netgw.core.selector import select_default
from netgw.core.types import AddressFamily, NetworkDefaultGateway, validate_prefix_length
from netgw.platforms.base import GatewayParser, load_json_rows

logger = logging.getLogger(__name__)

# AddressFamily -> "family" value in ``ip addr`` addr_info
UNIX_FAMILY = {
    AddressFamily.IPV4: "inet",
    AddressFamily.IPV6: "inet6",
}

OPERSTATE_UP = "UP"


def ip_default_route_command(family: AddressFamily) -> List[str]:
    flag = "-4" if family is AddressFamily.IPV4 else "-6"
    return ["ip", flag, "-j", "route", "show", "default"]


def ip_interface_details_command(device: str) -> List[str]:
    return ["ip", "-j", "addr", "show", device]


@dataclass(frozen=True)
class LinuxInterface:
    """One default route joined with one address of its device."""

    dst: str
    gateway: str
    dev: str
    protocol: str
    metric: int
    ifname: str
    operstate: str
    family: str
    local: str
    prefixlen: Any

    @classmethod
    def from_raw(cls, route: Dict[str, Any], link: Dict[str, Any], addr: Dict[str, Any]) -> "LinuxInterface":
        try:
            return cls(
                dst=route.get("dst", ""),
                gateway=route.get("gateway", ""),
                dev=route["dev"],
                protocol=route.get("protocol", ""),
                metric=int(route.get("metric", 0)),
                ifname=link["ifname"],
                operstate=link.get("operstate", ""),
                family=addr.get("family", ""),
                local=addr.get("local", ""),
                prefixlen=addr.get("prefixlen"),
            )
        except (KeyError, TypeError, ValueError, AttributeError):
            raise JSONParsingError() from None


def merge_routes_with_addresses(routes: List[Dict[str, Any]], links: List[Dict[str, Any]]) -> List[LinuxInterface]:
    """Emit one candidate per (route, address) pair sharing a device name."""
    interfaces: list[LinuxInterface] = []
    try:
        for route in routes:
            for link in links:
                if link.get("ifname") != route.get("dev"):
                    continue
                for addr in link.get("addr_info") or []:
                    interfaces.append(LinuxInterface.from_raw(route, link, addr))
    except (AttributeError, TypeError):
        raise JSONParsingError() from None
    return interfaces


def default_interface_by_family(interfaces: List[LinuxInterface], family: AddressFamily) -> LinuxInterface:
    # Linux reports a missing family and a down device as the same failure
    return select_default(
        interfaces,
        in_family=lambda i: i.family == UNIX_FAMILY[family],
        usable=lambda i: i.operstate == OPERSTATE_UP,
        metric=lambda i: i.metric,
    )


class LinuxParser(GatewayParser):
    async def _json(self, argv: List[str]) -> List[Any]:
        raw = await self.run(argv)
        if not raw:
            return []
        return load_json_rows(raw)

    async def default_gateway(self, family: AddressFamily) -> NetworkDefaultGateway:
        routes = await self._json(ip_default_route_command(family))
        if not routes:
            raise DefaultGatewayNotAvailableError()

        devices: list[str] = []
        for route in routes:
            dev = route.get("dev") if isinstance(route, dict) else None
            if dev and dev not in devices:
                devices.append(dev)

        # One query per device, no ordering between them; any failure aborts all
        details = await asyncio.gather(*(self._json(ip_interface_details_command(d)) for d in devices))
        links = [link for rows in details for link in rows]

        interfaces = merge_routes_with_addresses(routes, links)
        selected = default_interface_by_family(interfaces, family)
        return NetworkDefaultGateway(
            ip=selected.local,
            gateway=selected.gateway,
            interface=selected.ifname,
            prefix_length=validate_prefix_length(selected.prefixlen, family),
        )
