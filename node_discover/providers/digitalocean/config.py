"""DigitalOcean provider configuration."""

from __future__ import annotations

import os
import typing
from dataclasses import dataclass, field

from node_discover.args import ParsedArgs, ProviderKind, RawArgs, parse_args
from node_discover.constants import API_TOKEN_ENV, DIGITALOCEAN_API_BASE
from node_discover.errors import MalformedArgument, MissingArgument, UnexpectedArgument

if typing.TYPE_CHECKING:
    from node_discover.providers.digitalocean.provider import DOProvider


@dataclass(frozen=True, slots=True)
class DOConfig:
    """DigitalOcean discovery configuration.

    Args:
        tag_name: Droplet tag to filter on (server side).
        api_token: API token. Falls back to the ``API_TOKEN`` environment
            variable when not given as an argument.
        region: Region slug to keep (client side). None keeps every region.
    """

    tag_name: str
    api_token: str = field(repr=False)
    region: str | None = None

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.DIGITALOCEAN

    @classmethod
    def from_args(cls, args: ParsedArgs) -> DOConfig:
        """Build a config from parsed arguments.

        Raises:
            UnexpectedArgument: A key other than the DigitalOcean keys was given.
            MissingArgument: ``tag_name`` is missing, or ``api_token`` is in
                neither the arguments nor the environment.
        """
        tag_name: str | None = None
        region: str | None = None
        api_token: str | None = None

        for key, value in args:
            match key:
                case "tag_name":
                    tag_name = value
                case "region":
                    region = value
                case "api_token":
                    api_token = value
                case "provider":
                    pass
                case _:
                    raise UnexpectedArgument(key)

        if tag_name is None:
            raise MissingArgument("tag_name")

        api_token = api_token or os.environ.get(API_TOKEN_ENV)
        if not api_token:
            raise MissingArgument("api_token")

        return cls(tag_name=tag_name, api_token=api_token, region=region)

    @classmethod
    def parse(cls, raw: RawArgs) -> DOConfig:
        """Parse raw arguments that must select ``provider=digitalocean``."""
        args = parse_args(raw)
        if args.provider is not ProviderKind.DIGITALOCEAN:
            raise MalformedArgument(
                f"provider={args.provider}", "Expected provider=digitalocean"
            )
        return cls.from_args(args)

    def create_provider(self, base_url: str = DIGITALOCEAN_API_BASE) -> DOProvider:
        from node_discover.providers.digitalocean.provider import DOProvider

        return DOProvider(self, base_url=base_url)
