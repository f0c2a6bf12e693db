"""EC2 client factories.

The provider receives a factory rather than a client so tests can hand it a
fake, and so every ``addrs()`` call opens and closes its own client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any

import aioboto3

if TYPE_CHECKING:
    from types_aiobotocore_ec2 import EC2Client

type EC2ClientFactory = Callable[[], AbstractAsyncContextManager[Any]]
"""Factory that returns an async context manager yielding an EC2 client."""


def ec2_client_factory(region: str, session: aioboto3.Session | None = None) -> EC2ClientFactory:
    """EC2 client factory for ``region``.

    Credentials are resolved by the SDK's default chain (environment,
    shared config, instance profile); none are passed explicitly.
    """
    session = session or aioboto3.Session()

    @asynccontextmanager
    async def factory() -> AsyncIterator[EC2Client]:
        async with session.client("ec2", region_name=region) as client:
            yield client

    return factory


__all__ = ["EC2ClientFactory", "ec2_client_factory"]
