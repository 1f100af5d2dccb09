"""Smoke test against the real host; skipped where the OS tools are unavailable."""

import asyncio
import ipaddress

import pytest

import netgw

LOOKUP_FAILURES = (
    netgw.DefaultGatewayNotAvailableError,
    netgw.DefaultInterfaceNotFoundError,
    netgw.NoAvailableNetworkError,
)


@pytest.mark.live
@pytest.mark.parametrize(
    "entry,family,version",
    [
        (netgw.v4_default_gateway, netgw.AddressFamily.IPV4, 4),
        (netgw.v6_default_gateway, netgw.AddressFamily.IPV6, 6),
    ],
)
def test_host_default_gateway(entry, family, version):
    try:
        result = asyncio.run(entry())
    except (netgw.CommandExecutionError, netgw.PlatformNotSupportedError) as exc:
        pytest.skip(f"host tools unavailable: {exc}")
    except LOOKUP_FAILURES:
        return

    assert result.interface
    assert ipaddress.ip_address(result.ip.split("%")[0]).version == version
    assert ipaddress.ip_address(result.gateway.split("%")[0]).version == version
    assert 0 <= result.prefix_length <= family.max_prefix_length
