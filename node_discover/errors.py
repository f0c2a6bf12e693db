"""Errors raised while discovering node addresses.

Every failure surfaced by the library is a ``DiscoverError`` subclass, so
callers can catch the whole family or match on a single kind.
"""

from __future__ import annotations

from dataclasses import dataclass, fields


class DiscoverError(Exception):
    """Base class for all discovery failures.

    Subclasses are dataclasses; their fields are mirrored into ``args`` so
    the errors pickle like regular exceptions.
    """

    def __post_init__(self) -> None:
        Exception.__init__(self, *(getattr(self, f.name) for f in fields(self)))


@dataclass(slots=True, unsafe_hash=True)
class MalformedArgument(DiscoverError):
    key: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid argument: `{self.key}`. Error message: `{self.reason}`"


@dataclass(slots=True, unsafe_hash=True)
class DuplicateArgument(DiscoverError):
    key: str

    def __str__(self) -> str:
        return f"Duplicate argument with key: `{self.key}`"


@dataclass(slots=True, unsafe_hash=True)
class UnexpectedArgument(DiscoverError):
    key: str

    def __str__(self) -> str:
        return f"Argument with key: `{self.key}` was not expected"


@dataclass(slots=True, unsafe_hash=True)
class MissingArgument(DiscoverError):
    key: str

    def __str__(self) -> str:
        return f"Argument with key: `{self.key}` is required"


@dataclass(slots=True, unsafe_hash=True)
class UnsupportedProvider(DiscoverError):
    value: str

    def __str__(self) -> str:
        return (
            f"Unsupported provider `{self.value}`. "
            "Either the provider is not supported or it is not enabled."
        )


@dataclass(slots=True, unsafe_hash=True)
class ProviderRequestFailed(DiscoverError):
    detail: str

    def __str__(self) -> str:
        return f"Unable to retrieve data from provider. Error message: `{self.detail}`"


__all__ = [
    "DiscoverError",
    "DuplicateArgument",
    "MalformedArgument",
    "MissingArgument",
    "ProviderRequestFailed",
    "UnexpectedArgument",
    "UnsupportedProvider",
]
