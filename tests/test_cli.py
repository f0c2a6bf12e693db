from __future__ import annotations

import io
import json

import pytest
from rich.console import Console

from node_discover import cli
from node_discover.help import GLOBAL_HELP

pytestmark = pytest.mark.unit


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(out: io.StringIO) -> Console:
    return Console(file=out, width=120, color_system=None)


class TestHelp:
    def test_no_arguments_prints_full_help(self, console: Console, out: io.StringIO):
        assert cli.main([], console) == 0
        text = out.getvalue()
        assert GLOBAL_HELP.splitlines()[0] in text
        assert "Amazon AWS:" in text
        assert "DigitalOcean:" in text

    def test_help_for_provider(self, console: Console, out: io.StringIO):
        assert cli.main(["help", "digitalocean"], console) == 0
        text = out.getvalue()
        assert "DigitalOcean:" in text
        assert "Amazon AWS:" not in text

    def test_unknown_command_prints_help(self, console: Console, out: io.StringIO):
        assert cli.main(["whatever"], console) == 0
        assert "Amazon AWS:" in out.getvalue()


class TestAddrs:
    def test_prints_addresses_as_json(self, console: Console, out: io.StringIO, monkeypatch: pytest.MonkeyPatch):
        seen: list[str] = []

        async def fake_get_addresses(args: str) -> list[str]:
            seen.append(args)
            return ["10.0.0.1", "10.0.0.2"]

        monkeypatch.setattr(cli, "get_addresses", fake_get_addresses)

        code = cli.main(["addrs", "provider=aws", "tag_key=Name", "tag_value=web"], console)

        assert code == 0
        assert seen == ["provider=aws tag_key=Name tag_value=web"]
        assert json.loads(out.getvalue()) == ["10.0.0.1", "10.0.0.2"]

    def test_empty_result(self, console: Console, out: io.StringIO, monkeypatch: pytest.MonkeyPatch):
        async def fake_get_addresses(_: str) -> list[str]:
            return []

        monkeypatch.setattr(cli, "get_addresses", fake_get_addresses)
        assert cli.main(["addrs", "provider=aws", "tag_key=a", "tag_value=b"], console) == 0
        assert json.loads(out.getvalue()) == []

    def test_error_is_logged_not_raised(self, console: Console, out: io.StringIO):
        assert cli.main(["addrs", "provider=aws"], console) == 1
        assert out.getvalue() == ""

    def test_provider_timeout_exits_with_error(self, console: Console, out: io.StringIO, stalled_digitalocean: str):
        code = cli.main(["addrs", "provider=digitalocean", "tag_name=consul", "api_token=t"], console)
        assert code == 1
        assert out.getvalue() == ""

    def test_garbage_arguments(self, console: Console):
        assert cli.main(["addrs", "garbage"], console) == 1

    def test_no_arguments_after_addrs(self, console: Console):
        assert cli.main(["addrs"], console) == 1


class TestLogLevel:
    def test_default(self):
        assert cli._log_level(0) == "WARNING"

    @pytest.mark.parametrize(("verbose", "level"), [(1, "INFO"), (2, "DEBUG"), (5, "DEBUG")])
    def test_verbose_flag(self, verbose: int, level: str):
        assert cli._log_level(verbose) == level

    def test_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NODE_DISCOVER_LOG_LEVEL", "debug")
        assert cli._log_level(0) == "DEBUG"

    def test_invalid_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NODE_DISCOVER_LOG_LEVEL", "loud")
        assert cli._log_level(0) == "WARNING"
