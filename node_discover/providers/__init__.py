from node_discover.providers.aws import AddrType, AWSConfig, AWSProvider
from node_discover.providers.base import Provider, ProviderConfig
from node_discover.providers.digitalocean import DOConfig, DOProvider

__all__ = [
    "AWSConfig",
    "AWSProvider",
    "AddrType",
    "DOConfig",
    "DOProvider",
    "Provider",
    "ProviderConfig",
]
