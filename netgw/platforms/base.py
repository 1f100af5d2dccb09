"""
Common contract for the per-OS gateway parsers.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional, Sequence

from netgw.core.errors import DefaultGatewayNotAvailableError, JSONParsingError
from netgw.core.executor import Executor
from netgw.core.types import AddressFamily, NetworkDefaultGateway

logger = logging.getLogger(__name__)


class GatewayParser:
    """Builds the OS commands, runs them through *executor* and normalises the output."""

    def __init__(self, executor: Executor) -> None:
        self.executor = executor

    async def run(self, argv: Sequence[str], stdin: Optional[str] = None) -> str:
        return await self.executor.execute(argv, stdin)

    async def default_gateway(self, family: AddressFamily) -> NetworkDefaultGateway:
        raise NotImplementedError


def load_json_rows(raw: str) -> List[Any]:
    """Decode structured command output into a list of records.

    Empty output means there is nothing to route through.  A lone object is
    wrapped into a one-element list.
    """
    if not raw:
        raise DefaultGatewayNotAvailableError()
    try:
        output = json.loads(raw)
    except ValueError:
        logger.debug("undecodable output: %r", raw[:200])
        raise JSONParsingError() from None
    if isinstance(output, list):
        return output
    if isinstance(output, dict):
        return [output]
    raise JSONParsingError()
