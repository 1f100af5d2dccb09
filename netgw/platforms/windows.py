"""
Windows default gateway lookup built on PowerShell's ``Get-NetRoute`` and
``Get-NetIPAddress`` cmdlets, both emitted as JSON.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

from netgw.core.errors import JSONParsingError, NoAvailableNetworkError
from netgw.core.selector import select_default
from netgw.core.types import AddressFamily, NetworkDefaultGateway, validate_prefix_length
from netgw.platforms.base import GatewayParser, load_json_rows

logger = logging.getLogger(__name__)

DESTINATION_PREFIX = {
    AddressFamily.IPV4: "0.0.0.0/0",
    AddressFamily.IPV6: "::/0",
}

# System.Net.Sockets.AddressFamily codes
WINDOWS_FAMILY = {
    AddressFamily.IPV4: 2,
    AddressFamily.IPV6: 23,
}

# MSFT_NetIPAddress AddressState codes
ADDRESS_STATE_PREFERRED = 4

# PowerShell 7 may serialise enums by name
_FAMILY_NAMES = {"ipv4": 2, "ipv6": 23}
_STATE_NAMES = {"invalid": 0, "tentative": 1, "duplicate": 2, "deprecated": 3, "preferred": 4}


def _enum_code(value: Any, names: Dict[str, int]) -> Any:
    if isinstance(value, str):
        return names.get(value.lower(), value)
    return value


def net_route_command(family: AddressFamily) -> List[str]:
    return [
        "powershell",
        f'Get-NetRoute | Where-Object {{ $_.DestinationPrefix -eq "{DESTINATION_PREFIX[family]}" }} '
        "| Select-Object -Property ifIndex, NextHop, InterfaceMetric | ConvertTo-Json",
    ]


def net_ip_address_command(ids: Sequence[int]) -> List[str]:
    return [
        "powershell",
        f"Get-NetIPAddress | Where-Object {{ @({','.join(str(i) for i in ids)}) -contains $_.InterfaceIndex }} "
        "| Select-Object -Property ifIndex, IPAddress, InterfaceAlias, AddressFamily, PrefixLength, AddressState "
        "| ConvertTo-Json",
    ]


@dataclass(frozen=True)
class WindowsInterface:
    """A ``Get-NetRoute`` row joined with a ``Get-NetIPAddress`` row on ifIndex."""

    if_index: int
    next_hop: str
    interface_metric: int
    ip_address: str
    interface_alias: str
    address_family: Any
    prefix_length: Any
    address_state: Any

    @classmethod
    def from_raw(cls, route: Dict[str, Any], address: Dict[str, Any]) -> "WindowsInterface":
        try:
            return cls(
                if_index=route["ifIndex"],
                next_hop=route.get("NextHop") or "",
                interface_metric=int(route.get("InterfaceMetric") or 0),
                ip_address=address.get("IPAddress") or "",
                interface_alias=address.get("InterfaceAlias") or "",
                address_family=_enum_code(address.get("AddressFamily"), _FAMILY_NAMES),
                prefix_length=address.get("PrefixLength"),
                address_state=_enum_code(address.get("AddressState"), _STATE_NAMES),
            )
        except (KeyError, TypeError, ValueError, AttributeError):
            raise JSONParsingError() from None


def merge_routes_with_addresses(routes: List[Dict[str, Any]], addresses: List[Dict[str, Any]]) -> List[WindowsInterface]:
    """Cross-join route and address rows sharing an interface index."""
    try:
        return [
            WindowsInterface.from_raw(route, address)
            for route in routes
            for address in addresses
            if address.get("ifIndex") == route.get("ifIndex")
        ]
    except AttributeError:
        raise JSONParsingError() from None


def default_interface_by_family(interfaces: List[WindowsInterface], family: AddressFamily) -> WindowsInterface:
    return select_default(
        interfaces,
        in_family=lambda i: i.address_family == WINDOWS_FAMILY[family],
        usable=lambda i: i.address_state == ADDRESS_STATE_PREFERRED,
        metric=lambda i: i.interface_metric,
        unusable_error=NoAvailableNetworkError,
    )


class WindowsParser(GatewayParser):
    async def _json(self, argv: List[str]) -> List[Any]:
        return load_json_rows(await self.run(argv))

    async def default_gateway(self, family: AddressFamily) -> NetworkDefaultGateway:
        routes = await self._json(net_route_command(family))

        ids: list[Any] = []
        for route in routes:
            if_index = route.get("ifIndex") if isinstance(route, dict) else None
            if if_index is None:
                raise JSONParsingError()
            if if_index not in ids:
                ids.append(if_index)

        addresses = await self._json(net_ip_address_command(ids))

        interfaces = merge_routes_with_addresses(routes, addresses)
        selected = default_interface_by_family(interfaces, family)
        return NetworkDefaultGateway(
            ip=selected.ip_address,
            gateway=selected.next_hop,
            interface=selected.interface_alias,
            prefix_length=validate_prefix_length(selected.prefix_length, family),
        )
