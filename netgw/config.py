"""
Centralised runtime configuration and OS-detection helpers.

Nothing here is cached: every resolution maps the OS name to its family
again.  :class:`PlatformInfo` also scans PATH for tools and is only built for
``netgw info``.
"""

from __future__ import annotations

import os
import platform
import shutil
from dataclasses import dataclass, field
from typing import Dict, Optional

from netgw.core.errors import PlatformNotSupportedError, RuntimeNotSupportedError
from netgw.core.types import Platform, Runtime

# Environment overrides
ENV_PLATFORM = "NETGW_PLATFORM"
ENV_RUNTIME = "NETGW_RUNTIME"
ENV_LOG_LEVEL = "NETGW_LOG_LEVEL"

DEFAULT_RUNTIME = Runtime.ASYNCIO
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_DIR_NAME = "netgw_logs"

# platform.system() value -> platform family
_SYSTEM_NAMES: Dict[str, Platform] = {
    "linux": Platform.LINUX,
    "darwin": Platform.MACOS,
    "macos": Platform.MACOS,
    "windows": Platform.WINDOWS,
}

TOOL_NAMES = ("ip", "route", "ifconfig", "grep", "awk", "powershell")


def _detected_system() -> str:
    return os.environ.get(ENV_PLATFORM) or platform.system()


def platform_family(system: str, runtime: Runtime = DEFAULT_RUNTIME) -> Platform:
    """Map a ``platform.system()`` name to its family, or raise if the OS is unknown."""
    try:
        return _SYSTEM_NAMES[system.lower()]
    except KeyError:
        raise PlatformNotSupportedError(runtime.value, system) from None


@dataclass(frozen=True)
class PlatformInfo:
    """Immutable snapshot of the host OS and available external tools."""

    system: str = field(default_factory=_detected_system)  # Windows | Linux | Darwin
    release: str = field(default_factory=platform.release)

    # Paths to external tools (None if not found on PATH)
    ip: Optional[str] = None
    route: Optional[str] = None
    ifconfig: Optional[str] = None
    grep: Optional[str] = None
    awk: Optional[str] = None
    powershell: Optional[str] = None

    def __post_init__(self) -> None:
        for tool_name in TOOL_NAMES:
            object.__setattr__(self, tool_name, shutil.which(tool_name))

    @property
    def tools(self) -> Dict[str, Optional[str]]:
        return {name: getattr(self, name) for name in TOOL_NAMES}

    def family(self, runtime: Runtime = DEFAULT_RUNTIME) -> Platform:
        """Return the supported platform family, or raise if the OS is unknown."""
        return platform_family(self.system, runtime)


def current_platform(runtime: Runtime = DEFAULT_RUNTIME) -> Platform:
    """Detect the platform family of the running host."""
    return platform_family(_detected_system(), runtime)


def current_runtime(name: Optional[str] = None) -> Runtime:
    """Resolve a runtime name (argument, then ``NETGW_RUNTIME``, then default)."""
    name = name or os.environ.get(ENV_RUNTIME)
    if not name:
        return DEFAULT_RUNTIME
    try:
        return Runtime(name.strip().lower())
    except ValueError:
        raise RuntimeNotSupportedError() from None


def default_log_level() -> str:
    return os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
