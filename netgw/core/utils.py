"""
Shared presentation helpers: result container and Rich rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from netgw.core.errors import (
    DefaultGatewayNotAvailableError,
    DefaultInterfaceNotFoundError,
    GatewayError,
    NoAvailableNetworkError,
)
from netgw.core.types import AddressFamily, NetworkDefaultGateway

console = Console()
err_console = Console(stderr=True)


# ── Result types ──────────────────────────────────────────────────────────────


class Status(Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    ERROR = "error"


@dataclass
class LookupResult:
    """Outcome of one gateway lookup, ready for display or logging."""

    title: str
    status: Status
    family: str = ""
    summary: str = ""
    details: List[str] = field(default_factory=list)
    gateway: Optional[NetworkDefaultGateway] = None
    error: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now().strftime("%Y-%m-%d %H:%M:%S"))

    def as_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "status": self.status.value,
            "family": self.family,
            "summary": self.summary,
            "details": self.details,
            "gateway": self.gateway.as_dict() if self.gateway else None,
            "error": self.error,
            "timestamp": self.timestamp,
        }


def gateway_result(family: AddressFamily, gateway: NetworkDefaultGateway) -> LookupResult:
    return LookupResult(
        title=f"{family.value} Default Gateway",
        status=Status.SUCCESS,
        family=family.value,
        summary=f"Default route via {gateway.gateway} on {gateway.interface}.",
        details=[
            f"IP address    : {gateway.ip}",
            f"Gateway       : {gateway.gateway}",
            f"Interface     : {gateway.interface}",
            f"Prefix length : /{gateway.prefix_length}",
        ],
        gateway=gateway,
    )


def error_result(family: AddressFamily, exc: GatewayError) -> LookupResult:
    # Missing routes are an answer; anything else is a tool or parsing error
    lookup_failed = (DefaultGatewayNotAvailableError, DefaultInterfaceNotFoundError, NoAvailableNetworkError)
    return LookupResult(
        title=f"{family.value} Default Gateway",
        status=Status.FAILURE if isinstance(exc, lookup_failed) else Status.ERROR,
        family=family.value,
        summary=str(exc),
        error=type(exc).__name__,
    )


# ── Pretty printing ──────────────────────────────────────────────────────────


_STATUS_CONFIG = {
    Status.SUCCESS: {"icon": "✔", "badge": "PASS", "style": "bold green", "border": "green", "bar": "green"},
    Status.FAILURE: {"icon": "✘", "badge": "FAIL", "style": "bold red", "border": "red", "bar": "red"},
    Status.ERROR:   {"icon": "⊘", "badge": "ERR",  "style": "bold red", "border": "red", "bar": "red"},
}


def print_result(result: LookupResult, target: Optional[Console] = None) -> None:
    """Render a *LookupResult* to the terminal via Rich."""
    out = target or console
    cfg = _STATUS_CONFIG[result.status]
    out.print()

    title_text = Text()
    title_text.append(f"  {cfg['icon']}  ", style=cfg["style"])
    title_text.append(result.title, style="bold white")

    status_tag = Text(f" {cfg['badge']} ", style=f"bold white on {cfg['bar']}")

    body = Text()
    if result.summary:
        body.append("  ")
        body.append(result.summary, style=cfg["style"])
        body.append("\n")

    if result.details:
        body.append("\n")
        for d in result.details:
            body.append("    ")
            body.append("› ", style=f"dim {cfg['bar']}")
            body.append(f"{d}\n")

    header = Text()
    header.append_text(status_tag)
    header.append("  ")
    header.append_text(title_text)

    out.print(
        Panel(
            body,
            title=header,
            title_align="left",
            subtitle=f"[dim italic]⏱  {result.timestamp}[/dim italic]",
            subtitle_align="right",
            border_style=cfg["border"],
            box=box.ROUNDED,
            expand=True,
            padding=(0, 1),
        )
    )
