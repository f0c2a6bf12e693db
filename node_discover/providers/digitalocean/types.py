"""DigitalOcean API response types.

TypedDicts for the droplet listing - no conversion needed.
"""

from __future__ import annotations

from typing import Literal, NotRequired, TypedDict


class NetworkResponse(TypedDict):
    ip_address: str
    netmask: NotRequired[str | int]
    gateway: NotRequired[str]
    type: Literal["public", "private"] | str


class NetworksResponse(TypedDict):
    v4: list[NetworkResponse]
    v6: list[NetworkResponse]


class RegionResponse(TypedDict):
    slug: str
    name: NotRequired[str]


class DropletResponse(TypedDict):
    id: int
    name: str
    region: RegionResponse
    networks: NetworksResponse
    tags: NotRequired[list[str]]


class DropletListResponse(TypedDict):
    droplets: list[DropletResponse]
