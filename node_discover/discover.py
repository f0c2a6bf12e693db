"""Address discovery entry point."""

from __future__ import annotations

from loguru import logger

from node_discover.args import ProviderKind, RawArgs, parse_args
from node_discover.providers.aws import AWSConfig
from node_discover.providers.base import Provider
from node_discover.providers.digitalocean import DOConfig


def build_provider(raw: RawArgs) -> Provider:
    """Parse ``raw`` and build the provider it selects.

    Raises:
        DiscoverError: The arguments are invalid for the selected provider.
    """
    args = parse_args(raw)
    match args.provider:
        case ProviderKind.AWS:
            return AWSConfig.from_args(args).create_provider()
        case ProviderKind.DIGITALOCEAN:
            return DOConfig.from_args(args).create_provider()


async def get_addresses(args: RawArgs) -> list[str]:
    """Discover node addresses described by ``args``.

    Example:
        >>> await get_addresses("provider=digitalocean region=lon1 tag_name=cool-tag")
        ['10.110.0.2', '10.110.0.3']

    Args:
        args: ``key=value`` arguments as one string or as separate tokens.

    Returns:
        Addresses in provider response order. May be empty.

    Raises:
        DiscoverError: Invalid arguments or a failed provider request.
    """
    provider = build_provider(args)
    logger.bind(provider=provider.kind).debug("Discovering addresses")
    return await provider.addrs()
