"""AWS region lookup backed by botocore's bundled endpoint data."""

from __future__ import annotations

import os
from functools import cache

from botocore.session import get_session

from node_discover.constants import DEFAULT_AWS_REGION


@cache
def known_regions() -> frozenset[str]:
    """Every EC2 region identifier botocore knows, across all partitions."""
    session = get_session()
    return frozenset(
        region
        for partition in session.get_available_partitions()
        for region in session.get_available_regions("ec2", partition_name=partition)
    )


def is_known_region(region: str) -> bool:
    return region in known_regions()


def ambient_region() -> str:
    """Region the SDK would pick on its own.

    ``AWS_DEFAULT_REGION`` and the shared config profile come first, then
    ``AWS_REGION``, then ``us-east-1``.
    """
    configured = get_session().get_config_variable("region")
    return configured or os.environ.get("AWS_REGION") or DEFAULT_AWS_REGION
