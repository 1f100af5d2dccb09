from __future__ import annotations

import json
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pytest

from netgw.core.errors import CommandExecutionError


class FakeExecutor:
    """Replays canned command output keyed by argv.

    ``grep`` and ``awk '{print $2}'`` are emulated on their piped input so
    the macOS parser runs unmodified.
    """

    def __init__(self, outputs: Optional[Dict[Tuple[str, ...], Union[str, Exception]]] = None) -> None:
        self.outputs = dict(outputs or {})
        self.calls: List[Tuple[Tuple[str, ...], Optional[str]]] = []

    def add(self, argv: Sequence[str], output: Union[str, Exception, list, dict]) -> None:
        if isinstance(output, (list, dict)):
            output = json.dumps(output)
        self.outputs[tuple(argv)] = output

    def commands(self) -> List[Tuple[str, ...]]:
        return [argv for argv, _ in self.calls]

    async def execute(self, argv: Sequence[str], stdin: Optional[str] = None) -> str:
        argv = tuple(argv)
        self.calls.append((argv, stdin))
        if argv[0] == "grep":
            rows = [line for line in (stdin or "").splitlines() if argv[1] in line]
            if not rows:
                raise CommandExecutionError(argv, 1)
            return "\n".join(rows).strip()
        if argv == ("awk", "{print $2}"):
            fields = [line.split() for line in (stdin or "").splitlines()]
            return "\n".join(f[1] if len(f) > 1 else "" for f in fields).strip()
        if argv not in self.outputs:
            raise CommandExecutionError(argv, 127, "unexpected command")
        output = self.outputs[argv]
        if isinstance(output, Exception):
            raise output
        return output.strip()


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor()
