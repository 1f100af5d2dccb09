"""
Session logger: records every lookup outcome to a JSON-lines file.

Enabled from the CLI with ``--log-dir``.  Each session gets its own
timestamped file under that directory.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime

from netgw.core.utils import LookupResult, Status

logger = logging.getLogger(__name__)


class SessionLogger:
    """Append-only JSON-lines logger for a single CLI session."""

    def __init__(self, log_dir: str) -> None:
        self._log_dir = log_dir
        os.makedirs(self._log_dir, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        self._log_path = os.path.join(self._log_dir, f"session_{ts}.jsonl")
        self._results: list[LookupResult] = []

    @property
    def log_path(self) -> str:
        return self._log_path

    def log(self, result: LookupResult) -> None:
        """Append a result to the in-memory list and flush it to disk."""
        self._results.append(result)
        try:
            with open(self._log_path, "a", encoding="utf-8") as fh:
                fh.write(json.dumps(result.as_dict(), ensure_ascii=False) + "\n")
        except OSError as exc:
            logger.warning("could not write session log %s: %s", self._log_path, exc)

    def summary(self) -> str:
        """Return a one-line summary of the current session."""
        total = len(self._results)
        if total == 0:
            return "No lookups in this session."
        resolved = sum(1 for r in self._results if r.status == Status.SUCCESS)
        return f"Session: {total} lookup(s), {resolved} resolved.  Log: {self._log_path}"
