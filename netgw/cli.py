"""
CLI entry-point for netgw.

  • ``netgw v4`` / ``netgw v6``: resolve one default gateway
  • ``netgw info``:              show detected platform, runtime and tools
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler
from rich.table import Table

from netgw import __app_name__, __version__
from netgw.config import DEFAULT_LOG_DIR_NAME, PlatformInfo, current_runtime, default_log_level
from netgw.core.errors import GatewayError
from netgw.core.resolver import resolve_default_gateway
from netgw.core.session_log import SessionLogger
from netgw.core.types import AddressFamily
from netgw.core.utils import console, err_console, error_result, gateway_result, print_result

FAMILIES = {
    "v4": AddressFamily.IPV4,
    "v6": AddressFamily.IPV6,
}


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="netgw",
        description=f"{__app_name__}: discover this host's default gateway.",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    p.add_argument("--runtime", choices=["asyncio", "thread"], help="How child processes are spawned")
    p.add_argument("--log", action="store_true", help=f"Append each lookup to a JSON-lines session log in ./{DEFAULT_LOG_DIR_NAME}")
    p.add_argument("--log-dir", default="", help="Like --log, but write the session log here")

    sub = p.add_subparsers(dest="command")

    # ── v4 / v6 ───────────────────────────────────────────────────────────
    for name, family in FAMILIES.items():
        sp = sub.add_parser(name, help=f"Resolve the {family.value} default gateway")
        sp.add_argument("--json", action="store_true", help="Print the result as JSON")

    # ── info ──────────────────────────────────────────────────────────────
    sub.add_parser("info", help="Show detected platform, runtime and external tools")

    return p


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity == 1:
        level = "INFO"
    else:
        level = default_log_level()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _lookup(args: argparse.Namespace) -> int:
    family = FAMILIES[args.command]
    runtime = current_runtime(args.runtime)
    log_dir = args.log_dir or (DEFAULT_LOG_DIR_NAME if args.log else "")
    session = SessionLogger(log_dir) if log_dir else None

    try:
        gateway = asyncio.run(resolve_default_gateway(family, runtime=runtime))
    except GatewayError as exc:
        result = error_result(family, exc)
        code = 1
    else:
        result = gateway_result(family, gateway)
        code = 0

    if session:
        session.log(result)
        err_console.print(f"[dim]{session.summary()}[/dim]")

    if args.json:
        payload = result.gateway.as_dict() if result.gateway else {"error": result.error, "message": result.summary}
        console.print_json(json.dumps(payload))
    else:
        print_result(result)
    return code


def _info(args: argparse.Namespace) -> int:
    info = PlatformInfo()
    table = Table(title=f"{__app_name__} {__version__}", show_header=False)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("System", f"{info.system} {info.release}")
    try:
        table.add_row("Platform", info.family().value)
    except GatewayError as exc:
        table.add_row("Platform", f"[red]{exc}[/red]")
    table.add_row("Runtime", current_runtime(args.runtime).value)
    for name, path in info.tools.items():
        table.add_row(name, path or "[dim]not found[/dim]")
    console.print(table)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry-point called by the ``netgw`` console script or ``python -m netgw``."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if not args.command:
        args.command = "v4"
        args.json = False

    try:
        if args.command == "info":
            code = _info(args)
        else:
            code = _lookup(args)
    except GatewayError as exc:
        err_console.print(f"[bold red]✘[/bold red] {exc}")
        code = 1
    except KeyboardInterrupt:
        err_console.print("\nAborted.")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
