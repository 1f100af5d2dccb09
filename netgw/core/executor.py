"""
Command executors: run an argv list, optionally feed stdin, return trimmed stdout.

Two interchangeable implementations are provided, one per :class:`Runtime`:

* :class:`AsyncioExecutor` spawns through ``asyncio.create_subprocess_exec``.
* :class:`ThreadExecutor` runs a blocking ``subprocess.run`` on a worker thread.

Both raise :class:`CommandExecutionError` when the process cannot be started
or exits non-zero; no partial output is ever returned.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
import sys
from typing import Any, Dict, Optional, Protocol, Sequence, Type

from netgw.core.errors import CommandExecutionError
from netgw.core.types import Runtime

logger = logging.getLogger(__name__)


class Executor(Protocol):
    async def execute(self, argv: Sequence[str], stdin: Optional[str] = None) -> str:
        ...


def _decode(data: Optional[bytes]) -> str:
    # Windows tools may write in the OEM codepage; decode leniently.
    return data.decode("utf-8", errors="replace") if data else ""


def _platform_kwargs() -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    if sys.platform == "win32":
        # Hide the console window that powershell tries to spawn
        si = subprocess.STARTUPINFO()  # type: ignore[attr-defined]
        si.dwFlags |= subprocess.STARTF_USESHOWWINDOW  # type: ignore[attr-defined]
        kwargs["startupinfo"] = si
    return kwargs


def _check(argv: Sequence[str], returncode: Optional[int], stdout: bytes, stderr: bytes) -> str:
    if returncode != 0:
        raise CommandExecutionError(argv, returncode, _decode(stderr).strip())
    return _decode(stdout).strip()


class AsyncioExecutor:
    """Spawn child processes on the running event loop."""

    async def execute(self, argv: Sequence[str], stdin: Optional[str] = None) -> str:
        logger.debug("exec %s%s", list(argv), " (stdin)" if stdin is not None else "")
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                **_platform_kwargs(),
            )
        except OSError as exc:
            raise CommandExecutionError(argv, None, str(exc)) from exc

        # communicate() writes the input and closes stdin before waiting
        stdout, stderr = await proc.communicate(stdin.encode("utf-8") if stdin is not None else None)
        return _check(argv, proc.returncode, stdout, stderr)


class ThreadExecutor:
    """Run ``subprocess.run`` on a worker thread so the event loop is never blocked."""

    def run(self, argv: Sequence[str], stdin: Optional[str] = None) -> str:
        logger.debug("exec %s%s", list(argv), " (stdin)" if stdin is not None else "")
        try:
            proc = subprocess.run(
                list(argv),
                input=stdin.encode("utf-8") if stdin is not None else None,
                stdin=None if stdin is not None else subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                **_platform_kwargs(),
            )
        except OSError as exc:
            raise CommandExecutionError(argv, None, str(exc)) from exc
        return _check(argv, proc.returncode, proc.stdout, proc.stderr)

    async def execute(self, argv: Sequence[str], stdin: Optional[str] = None) -> str:
        return await asyncio.to_thread(self.run, argv, stdin)


EXECUTORS: Dict[Runtime, Type[Any]] = {
    Runtime.ASYNCIO: AsyncioExecutor,
    Runtime.THREAD: ThreadExecutor,
}


def executor_for(runtime: Runtime) -> Executor:
    """Instantiate the executor bound to *runtime*."""
    return EXECUTORS[runtime]()
