"""
Per-OS gateway parsers, keyed by platform family.
"""

from typing import Dict, Type

from netgw.core.types import Platform
from netgw.platforms.base import GatewayParser
from netgw.platforms.linux import LinuxParser
from netgw.platforms.macos import MacOSParser
from netgw.platforms.windows import WindowsParser

PARSERS: Dict[Platform, Type[GatewayParser]] = {
    Platform.LINUX: LinuxParser,
    Platform.MACOS: MacOSParser,
    Platform.WINDOWS: WindowsParser,
}

__all__ = [
    "PARSERS",
    "GatewayParser",
    "LinuxParser",
    "MacOSParser",
    "WindowsParser",
]
