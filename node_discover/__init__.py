"""Discover IP addresses of cluster nodes from cloud provider inventories.

Example:
    from node_discover import get_addresses

    addrs = await get_addresses(
        "provider=aws region=eu-west-1 tag_key=Name tag_value=web addr_type=private_v4"
    )
"""

from loguru import logger

from node_discover.args import ParsedArgs, ProviderKind, parse_args
from node_discover.discover import build_provider, get_addresses
from node_discover.errors import (
    DiscoverError,
    DuplicateArgument,
    MalformedArgument,
    MissingArgument,
    ProviderRequestFailed,
    UnexpectedArgument,
    UnsupportedProvider,
)
from node_discover.providers import AddrType, AWSConfig, AWSProvider, DOConfig, DOProvider, Provider

logger.disable("node_discover")

__all__ = [
    "AWSConfig",
    "AWSProvider",
    "AddrType",
    "DOConfig",
    "DOProvider",
    "DiscoverError",
    "DuplicateArgument",
    "MalformedArgument",
    "MissingArgument",
    "ParsedArgs",
    "Provider",
    "ProviderKind",
    "ProviderRequestFailed",
    "UnexpectedArgument",
    "UnsupportedProvider",
    "build_provider",
    "get_addresses",
    "parse_args",
]
