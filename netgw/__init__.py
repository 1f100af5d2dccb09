"""
netgw: discover the host's default network gateway from the OS's own tools.
"""

from netgw.core.errors import (
    CommandExecutionError,
    DefaultGatewayNotAvailableError,
    DefaultInterfaceNotFoundError,
    DeviceIpNotFoundError,
    GatewayError,
    JSONParsingError,
    NetmaskNotFoundError,
    NoAvailableNetworkError,
    PlatformNotSupportedError,
    PrefixLengthNotFoundError,
    PrefixLengthNotValidError,
    RuntimeNotSupportedError,
)
from netgw.core.resolver import resolve_default_gateway, v4_default_gateway, v6_default_gateway
from netgw.core.types import AddressFamily, NetworkDefaultGateway, Platform, Runtime

__app_name__ = "Network Default Gateway"
__version__ = "1.0.1"

__all__ = [
    "AddressFamily",
    "CommandExecutionError",
    "DefaultGatewayNotAvailableError",
    "DefaultInterfaceNotFoundError",
    "DeviceIpNotFoundError",
    "GatewayError",
    "JSONParsingError",
    "NetmaskNotFoundError",
    "NetworkDefaultGateway",
    "NoAvailableNetworkError",
    "Platform",
    "PlatformNotSupportedError",
    "PrefixLengthNotFoundError",
    "PrefixLengthNotValidError",
    "Runtime",
    "RuntimeNotSupportedError",
    "resolve_default_gateway",
    "v4_default_gateway",
    "v6_default_gateway",
]
