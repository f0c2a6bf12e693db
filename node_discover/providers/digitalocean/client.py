"""Async HTTP client for the DigitalOcean API."""

from __future__ import annotations

from typing import Any

import aiohttp
from loguru import logger

from node_discover.constants import DIGITALOCEAN_API_BASE, DROPLETS_PER_PAGE
from node_discover.errors import ProviderRequestFailed
from node_discover.infra.http import BearerAuth, HttpClient, HttpError

from .types import DropletListResponse, DropletResponse


class DigitalOceanClient:
    """Async client for the droplet listing endpoint."""

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DIGITALOCEAN_API_BASE,
        per_page: int = DROPLETS_PER_PAGE,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        self.per_page = per_page
        self._http = HttpClient(base_url, BearerAuth(api_token), timeout=timeout)
        self._log = logger.bind(provider="digitalocean", component="client")

    async def __aenter__(self) -> DigitalOceanClient:
        await self._http.__aenter__()
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._http.close()

    async def _droplets_page(self, tag_name: str, page: int) -> list[DropletResponse]:
        params = {"page": page, "per_page": self.per_page, "tag_name": tag_name}
        try:
            resp = await self._http.get("/droplets", params=params, response_type=DropletListResponse)
            return list(resp.data["droplets"])
        except HttpError as e:
            raise ProviderRequestFailed(str(e)) from e
        except (ValueError, KeyError, TypeError) as e:
            raise ProviderRequestFailed(f"Unexpected droplet listing response: {e!r}") from e

    async def list_droplets(self, tag_name: str) -> list[DropletResponse]:
        """All droplets carrying ``tag_name``.

        Pages are fetched one after another until a page holds fewer than
        ``per_page`` droplets. When the total is an exact multiple of
        ``per_page`` the last request returns an empty page.
        """
        droplets: list[DropletResponse] = []
        page = 1

        while True:
            batch = await self._droplets_page(tag_name, page)
            self._log.debug("Page {page} returned {n} droplets", page=page, n=len(batch))
            droplets.extend(batch)
            page += 1

            if len(batch) < self.per_page:
                break

        return droplets
