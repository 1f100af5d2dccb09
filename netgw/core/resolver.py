"""
Default gateway resolution: pick the parser for this host and run it.

The platform and runtime are looked up on every call; nothing is cached and
no failure is retried.
"""

from __future__ import annotations

import logging
from typing import Optional

from netgw.config import DEFAULT_RUNTIME, current_platform, current_runtime
from netgw.core.executor import Executor, executor_for
from netgw.core.types import AddressFamily, NetworkDefaultGateway, Platform, Runtime
from netgw.platforms import PARSERS

logger = logging.getLogger(__name__)


async def resolve_default_gateway(
    family: AddressFamily,
    executor: Optional[Executor] = None,
    platform: Optional[Platform] = None,
    runtime: Optional[Runtime] = None,
) -> NetworkDefaultGateway:
    """Resolve the default gateway of *family* for the current host.

    *executor* and *platform* default to the detected runtime and OS; pass
    them explicitly to drive a specific parser.
    """
    if executor is None:
        runtime = runtime or current_runtime()
        executor = executor_for(runtime)
    platform = platform or current_platform(runtime or DEFAULT_RUNTIME)

    parser = PARSERS[platform](executor)
    logger.debug("resolving %s gateway with %s", family.value, type(parser).__name__)
    return await parser.default_gateway(family)


async def v4_default_gateway() -> NetworkDefaultGateway:
    """Resolve the IPv4 default gateway of the current host."""
    return await resolve_default_gateway(AddressFamily.IPV4)


async def v6_default_gateway() -> NetworkDefaultGateway:
    """Resolve the IPv6 default gateway of the current host."""
    return await resolve_default_gateway(AddressFamily.IPV6)
