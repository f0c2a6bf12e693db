"""DigitalOcean droplet provider.

Example:
    from node_discover.providers.digitalocean import DOConfig

    config = DOConfig.parse("provider=digitalocean tag_name=consul region=lon1")
    addrs = await config.create_provider().addrs()
"""

from node_discover.providers.digitalocean.config import DOConfig
from node_discover.providers.digitalocean.provider import DOProvider

__all__ = ["DOConfig", "DOProvider"]
