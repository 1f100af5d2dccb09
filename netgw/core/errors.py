"""
Failure taxonomy for default-gateway resolution.

Every error is terminal: the resolution call is aborted and nothing is
retried.  Catch :class:`GatewayError` to handle all of them at once.
"""

from __future__ import annotations

from typing import Optional, Sequence


class GatewayError(Exception):
    """Base class for every failure raised while resolving a gateway."""

    default_message = "Gateway resolution failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


# ── Environment ───────────────────────────────────────────────────────────────


class RuntimeNotSupportedError(GatewayError):
    default_message = "Runtime not supported"


class PlatformNotSupportedError(GatewayError):
    def __init__(self, runtime: str, system: str) -> None:
        self.runtime = runtime
        self.system = system
        super().__init__(f"{runtime} {system} platform not supported")


class CommandExecutionError(GatewayError):
    """A child process could not be started or exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: Optional[int] = None, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        rc = "not started" if returncode is None else returncode
        message = f"Command failed ({rc}): {' '.join(self.argv)}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


# ── Route / interface lookup ──────────────────────────────────────────────────


class DefaultGatewayNotAvailableError(GatewayError):
    default_message = "Default gateway not available"


class DefaultInterfaceNotFoundError(GatewayError):
    default_message = "Default interface not found"


class NoAvailableNetworkError(GatewayError):
    default_message = "Device has no available network"


class JSONParsingError(GatewayError):
    default_message = "Failed to parse command output as JSON"


# ── Text extraction (macOS) ───────────────────────────────────────────────────


class DeviceIpNotFoundError(GatewayError):
    default_message = "Default ip not found"


class NetmaskNotFoundError(GatewayError):
    default_message = "Netmask not found"


class PrefixLengthNotFoundError(GatewayError):
    default_message = "Prefix length not found"


class PrefixLengthNotValidError(GatewayError):
    default_message = "Prefix length not valid"
