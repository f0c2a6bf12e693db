"""DigitalOcean droplet address discovery."""

from __future__ import annotations

from collections.abc import Iterable
from typing import override

from loguru import logger

from node_discover.args import ProviderKind
from node_discover.constants import DIGITALOCEAN_API_BASE
from node_discover.errors import ProviderRequestFailed
from node_discover.providers.base import Provider

from .client import DigitalOceanClient
from .config import DOConfig
from .types import DropletResponse

HELP = """\
DigitalOcean:

    provider:   "digitalocean"
    region:     The DigitalOcean region to filter on
    tag_name:   The tag name to filter on
    api_token:  The DigitalOcean API token to use. Defaults to the API_TOKEN
                environment variable.
"""


class DOProvider(Provider):
    """Discovers private IPv4 addresses of tagged droplets.

    Only ``private`` v4 networks are returned; public v4 and v6 addresses
    are ignored.
    """

    def __init__(self, config: DOConfig, *, base_url: str = DIGITALOCEAN_API_BASE) -> None:
        self.config = config
        self._base_url = base_url
        self._log = logger.bind(provider="digitalocean")

    @property
    @override
    def kind(self) -> ProviderKind:
        return ProviderKind.DIGITALOCEAN

    @staticmethod
    @override
    def help() -> str:
        return HELP

    def _in_region(self, droplet: DropletResponse) -> bool:
        return self.config.region is None or droplet["region"]["slug"] == self.config.region

    def _private_addrs(self, droplets: Iterable[DropletResponse]) -> list[str]:
        addrs: list[str] = []
        for droplet in droplets:
            if not self._in_region(droplet):
                continue
            for network in droplet["networks"]["v4"]:
                if network["type"] == "private":
                    self._log.info(
                        "Found droplet {name} ({id}) with private IP: {ip}",
                        name=droplet["name"], id=droplet["id"], ip=network["ip_address"],
                    )
                    addrs.append(network["ip_address"])
        return addrs

    @override
    async def addrs(self) -> list[str]:
        if self.config.region is not None:
            self._log.debug(
                "Using region={region} tag_name={tag}",
                region=self.config.region, tag=self.config.tag_name,
            )
        else:
            self._log.debug("Using tag_name={tag}", tag=self.config.tag_name)

        async with DigitalOceanClient(self.config.api_token, base_url=self._base_url) as client:
            droplets = await client.list_droplets(self.config.tag_name)
        self._log.debug("Found {n} droplets", n=len(droplets))

        try:
            addrs = self._private_addrs(droplets)
        except (KeyError, TypeError) as e:
            raise ProviderRequestFailed(f"Unexpected droplet record: {e!r}") from e
        self._log.debug("Found ip addresses: {addrs}", addrs=addrs)
        return addrs
