"""Provider contracts.

A provider config validates the arguments for one provider kind and builds
the provider that performs the discovery.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from node_discover.args import ProviderKind


@runtime_checkable
class Provider(Protocol):
    @property
    def kind(self) -> ProviderKind: ...

    async def addrs(self) -> list[str]:
        """Query the provider and return the discovered addresses."""
        ...

    @staticmethod
    def help() -> str:
        """Usage text: accepted keys, their values and defaults."""
        ...


@runtime_checkable
class ProviderConfig[P: Provider](Protocol):
    @property
    def kind(self) -> ProviderKind: ...

    def create_provider(self) -> P: ...
