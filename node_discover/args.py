"""Parsing of ``key=value key=value ...`` discovery arguments.

Example:
    >>> args = parse_args("provider=aws tag_key=Name tag_value=web")
    >>> args.provider
    <ProviderKind.AWS: 'aws'>
    >>> args.get("tag_key")
    'Name'
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from node_discover.constants import EXPECTED_FORMAT
from node_discover.errors import (
    DuplicateArgument,
    MalformedArgument,
    MissingArgument,
    UnsupportedProvider,
)

type RawArgs = str | Sequence[str]


class ProviderKind(StrEnum):
    """Providers that can be selected with ``provider=<kind>``."""

    AWS = "aws"
    DIGITALOCEAN = "digitalocean"


@dataclass(frozen=True, slots=True)
class ParsedArgs:
    """Validated arguments plus the provider they select.

    Iteration yields ``(key, value)`` pairs in the order they were given,
    ``provider`` included.
    """

    values: Mapping[str, str]
    provider: ProviderKind

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.values.items())

    def __len__(self) -> int:
        return len(self.values)


def _tokens(raw: RawArgs) -> list[str]:
    if isinstance(raw, str):
        stripped = raw.strip()
        # An empty string is still one (malformed) argument.
        return stripped.split() if stripped else [""]
    return list(raw)


def _split_token(token: str) -> tuple[str, str]:
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedArgument(token, EXPECTED_FORMAT)
    if not value:
        raise MalformedArgument(key, EXPECTED_FORMAT)
    return key, value


def _resolve_provider(value: str) -> ProviderKind:
    try:
        return ProviderKind(value.lower())
    except ValueError:
        raise UnsupportedProvider(value) from None


def parse_args(raw: RawArgs) -> ParsedArgs:
    """Parse discovery arguments.

    Args:
        raw: Whitespace separated ``key=value`` tokens, or the tokens
            already split.

    Returns:
        ParsedArgs holding every given key and the selected provider.

    Raises:
        MalformedArgument: A token is not ``key=value`` or has an empty value.
        DuplicateArgument: A key is given more than once.
        MissingArgument: No ``provider`` key was given.
        UnsupportedProvider: The ``provider`` value is unknown.
    """
    values: dict[str, str] = {}

    for token in _tokens(raw):
        key, value = _split_token(token)
        if key in values:
            raise DuplicateArgument(key)
        values[key] = value

    match values.get("provider"):
        case None:
            raise MissingArgument("provider")
        case name:
            provider = _resolve_provider(name)

    return ParsedArgs(values=MappingProxyType(values), provider=provider)


__all__ = ["ParsedArgs", "ProviderKind", "RawArgs", "parse_args"]
