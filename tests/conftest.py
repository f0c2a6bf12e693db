from __future__ import annotations

import socket
from collections.abc import Callable, Iterator
from contextlib import asynccontextmanager
from typing import Any

import aiohttp
import pytest

from node_discover.providers.digitalocean import provider as do_provider
from node_discover.providers.digitalocean.client import DigitalOceanClient


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the host's AWS profile and DigitalOcean token out of tests."""
    for var in ("AWS_REGION", "AWS_DEFAULT_REGION", "AWS_PROFILE", "API_TOKEN", "NODE_DISCOVER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))


class FakeEC2:
    """Stands in for an aioboto3 EC2 client and records every query."""

    def __init__(self, response: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.response = response or {"Reservations": []}
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def describe_instances(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response

    def factory(self) -> Callable[[], Any]:
        @asynccontextmanager
        async def open_client():
            yield self

        return open_client


@pytest.fixture
def fake_ec2() -> Callable[..., FakeEC2]:
    return FakeEC2


def _droplet(
    id: int,
    *,
    region: str = "lon1",
    private: tuple[str, ...] = (),
    public: tuple[str, ...] = (),
    v6: tuple[str, ...] = (),
) -> dict[str, Any]:
    v4 = [
        {"ip_address": ip, "netmask": "255.255.240.0", "gateway": "10.0.0.1", "type": "private"}
        for ip in private
    ] + [
        {"ip_address": ip, "netmask": "255.255.240.0", "gateway": "203.0.113.1", "type": "public"}
        for ip in public
    ]
    return {
        "id": id,
        "name": f"node-{id}",
        "region": {"slug": region, "name": region},
        "networks": {
            "v4": v4,
            "v6": [{"ip_address": ip, "netmask": 64, "gateway": "::1", "type": "public"} for ip in v6],
        },
    }


@pytest.fixture
def make_droplet() -> Callable[..., dict[str, Any]]:
    return _droplet


@pytest.fixture
def silent_server() -> Iterator[str]:
    """Base URL of a socket that accepts connections and never answers."""
    with socket.create_server(("127.0.0.1", 0)) as sock:
        host, port = sock.getsockname()[:2]
        yield f"http://{host}:{port}"


@pytest.fixture
def stalled_digitalocean(monkeypatch: pytest.MonkeyPatch, silent_server: str) -> str:
    """Point every DOProvider at ``silent_server`` with a short client timeout."""

    def client(api_token: str, *, base_url: str) -> DigitalOceanClient:
        return DigitalOceanClient(
            api_token, base_url=silent_server, timeout=aiohttp.ClientTimeout(total=0.2)
        )

    monkeypatch.setattr(do_provider, "DigitalOceanClient", client)
    return silent_server
