"""AWS EC2 provider.

Example:
    from node_discover.providers.aws import AWSConfig

    config = AWSConfig.parse("provider=aws tag_key=consul tag_value=server")
    addrs = await config.create_provider().addrs()
"""

from node_discover.providers.aws.config import AddrType, AWSConfig
from node_discover.providers.aws.provider import AWSProvider

__all__ = ["AWSConfig", "AWSProvider", "AddrType"]
