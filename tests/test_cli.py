import json

import pytest

from netgw import DefaultGatewayNotAvailableError, NetworkDefaultGateway
from netgw import cli

GATEWAY = NetworkDefaultGateway(ip="192.168.1.15", gateway="192.168.1.1", interface="eth0", prefix_length=24)


@pytest.fixture
def resolved(monkeypatch):
    calls = []

    async def fake_resolve(family, runtime=None):
        calls.append((family, runtime))
        return GATEWAY

    monkeypatch.setattr(cli, "resolve_default_gateway", fake_resolve)
    return calls


@pytest.fixture
def unavailable(monkeypatch):
    async def fake_resolve(family, runtime=None):
        raise DefaultGatewayNotAvailableError()

    monkeypatch.setattr(cli, "resolve_default_gateway", fake_resolve)


def run_cli(*argv):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(list(argv))
    return excinfo.value.code


def test_json_output(resolved, capsys):
    assert run_cli("v4", "--json") == 0

    assert json.loads(capsys.readouterr().out) == {
        "ip": "192.168.1.15",
        "gateway": "192.168.1.1",
        "interface": "eth0",
        "prefixLength": 24,
    }


def test_panel_output(resolved, capsys):
    assert run_cli("--runtime", "thread", "v6") == 0

    out = capsys.readouterr().out
    assert "IPv6 Default Gateway" in out
    assert "192.168.1.1" in out
    assert resolved[0][1].value == "thread"


def test_defaults_to_v4(resolved):
    assert run_cli() == 0
    assert resolved[0][0].value == "IPv4"


def test_failure_exit_code(unavailable, capsys):
    assert run_cli("v4", "--json") == 1

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"error": "DefaultGatewayNotAvailableError", "message": "Default gateway not available"}


def test_session_log(resolved, tmp_path):
    assert run_cli("--log-dir", str(tmp_path), "v4") == 0

    logs = list(tmp_path.glob("session_*.jsonl"))
    assert len(logs) == 1
    entry = json.loads(logs[0].read_text(encoding="utf-8").splitlines()[0])
    assert entry["status"] == "success"
    assert entry["gateway"]["prefixLength"] == 24


def test_info(monkeypatch, capsys):
    monkeypatch.setenv("NETGW_PLATFORM", "Linux")

    assert run_cli("info") == 0
    assert "linux" in capsys.readouterr().out


def test_session_summary_on_stderr(resolved, tmp_path, capsys):
    assert run_cli("--log-dir", str(tmp_path), "v4") == 0

    assert "1 lookup(s), 1 resolved" in capsys.readouterr().err


def test_log_flag_uses_default_dir(resolved, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert run_cli("--log", "v6") == 0
    assert len(list((tmp_path / "netgw_logs").glob("session_*.jsonl"))) == 1
