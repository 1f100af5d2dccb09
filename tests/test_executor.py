import asyncio
import sys

import pytest

from netgw import CommandExecutionError
from netgw.core.executor import AsyncioExecutor, ThreadExecutor


@pytest.fixture(params=[AsyncioExecutor, ThreadExecutor], ids=["asyncio", "thread"])
def real_executor(request):
    return request.param()


def run(executor, argv, stdin=None):
    return asyncio.run(executor.execute(argv, stdin))


def test_stdout_is_trimmed(real_executor):
    assert run(real_executor, [sys.executable, "-c", "print('  hello  ')"]) == "hello"


def test_stdin_is_piped(real_executor):
    script = "import sys; print(sys.stdin.read().upper())"

    assert run(real_executor, [sys.executable, "-c", script], "gateway: 10.0.0.1\n") == "GATEWAY: 10.0.0.1"


def test_non_zero_exit(real_executor):
    script = "import sys; print('partial'); sys.stderr.write('bad'); sys.exit(3)"

    with pytest.raises(CommandExecutionError) as excinfo:
        run(real_executor, [sys.executable, "-c", script])

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "bad"


def test_missing_executable(real_executor):
    with pytest.raises(CommandExecutionError) as excinfo:
        run(real_executor, ["netgw-no-such-binary-xyz"])

    assert excinfo.value.returncode is None
