"""AWS provider configuration.

Immutable configuration built from parsed discovery arguments.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass, field
from enum import StrEnum

from node_discover.args import ParsedArgs, ProviderKind, RawArgs, parse_args
from node_discover.errors import MalformedArgument, MissingArgument, UnexpectedArgument
from node_discover.providers.aws.regions import ambient_region, is_known_region

if typing.TYPE_CHECKING:
    from node_discover.providers.aws.clients import EC2ClientFactory
    from node_discover.providers.aws.provider import AWSProvider


class AddrType(StrEnum):
    PRIVATE_V4 = "private_v4"
    PUBLIC_V4 = "public_v4"
    PUBLIC_V6 = "public_v6"

    @classmethod
    def from_arg(cls, value: str) -> AddrType:
        try:
            return cls(value)
        except ValueError:
            raise MalformedArgument(f"addr_type={value}", "Invalid addr_type") from None


def _validate_region(value: str) -> str:
    if not is_known_region(value):
        raise MalformedArgument(f"region={value}", "The value is not a valid AWS Region")
    return value


@dataclass(frozen=True, slots=True)
class AWSConfig:
    """AWS discovery configuration.

    Example:
        >>> config = AWSConfig.parse("provider=aws tag_key=Name tag_value=web")
        >>> config.addr_type
        <AddrType.PRIVATE_V4: 'private_v4'>

    Args:
        tag_key: Tag key instances must carry.
        tag_value: Value of ``tag_key`` to match.
        region: Region to query. Default: the SDK's ambient region.
        addr_type: Which address of each instance to return.
    """

    tag_key: str
    tag_value: str
    region: str = field(default_factory=ambient_region)
    addr_type: AddrType = AddrType.PRIVATE_V4

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.AWS

    @classmethod
    def from_args(cls, args: ParsedArgs) -> AWSConfig:
        """Build a config from parsed arguments.

        Raises:
            UnexpectedArgument: A key other than the AWS keys was given.
            MalformedArgument: ``region`` or ``addr_type`` is invalid.
            MissingArgument: ``tag_key`` or ``tag_value`` is missing.
        """
        tag_key: str | None = None
        tag_value: str | None = None
        region: str | None = None
        addr_type = AddrType.PRIVATE_V4

        for key, value in args:
            match key:
                case "tag_key":
                    tag_key = value
                case "tag_value":
                    tag_value = value
                case "region":
                    region = _validate_region(value)
                case "addr_type":
                    addr_type = AddrType.from_arg(value)
                case "provider":
                    pass
                case _:
                    raise UnexpectedArgument(key)

        if tag_key is None:
            raise MissingArgument("tag_key")
        if tag_value is None:
            raise MissingArgument("tag_value")

        return cls(
            tag_key=tag_key,
            tag_value=tag_value,
            region=region or ambient_region(),
            addr_type=addr_type,
        )

    @classmethod
    def parse(cls, raw: RawArgs) -> AWSConfig:
        """Parse raw arguments that must select ``provider=aws``."""
        args = parse_args(raw)
        if args.provider is not ProviderKind.AWS:
            raise MalformedArgument(f"provider={args.provider}", "Expected provider=aws")
        return cls.from_args(args)

    def create_provider(self, client_factory: EC2ClientFactory | None = None) -> AWSProvider:
        from node_discover.providers.aws.provider import AWSProvider

        return AWSProvider(self, client_factory=client_factory)
