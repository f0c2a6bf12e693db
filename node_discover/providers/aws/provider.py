"""AWS EC2 address discovery."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, override

from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger

from node_discover.args import ProviderKind
from node_discover.constants import RUNNING_STATE
from node_discover.errors import ProviderRequestFailed
from node_discover.providers.aws.clients import EC2ClientFactory, ec2_client_factory
from node_discover.providers.aws.config import AddrType, AWSConfig
from node_discover.providers.base import Provider

HELP = """\
Amazon AWS:

    provider:   "aws"
    region:     The AWS region. Defaults to the region of the instance.
    tag_key:    The tag key to filter on
    tag_value:  The tag value to filter on
    addr_type:  "private_v4", "public_v4" or "public_v6". Defaults to "private_v4".

    Credentials are resolved by the AWS SDK credential chain (environment
    variables, shared credentials file, instance profile). The only required
    IAM permission is 'ec2:DescribeInstances'. When running on an EC2
    instance an IAM role is recommended, otherwise use a dedicated IAM user
    and access key used only for discovery.
"""


class AWSProvider(Provider):
    """Discovers running EC2 instances by tag.

    Example:
        >>> config = AWSConfig.parse("provider=aws tag_key=consul tag_value=server")
        >>> addrs = await AWSProvider(config).addrs()
    """

    def __init__(self, config: AWSConfig, client_factory: EC2ClientFactory | None = None) -> None:
        self.config = config
        self._client_factory = client_factory or ec2_client_factory(config.region)
        self._log = logger.bind(provider="aws", region=config.region)

    @property
    @override
    def kind(self) -> ProviderKind:
        return ProviderKind.AWS

    @staticmethod
    @override
    def help() -> str:
        return HELP

    def filters(self) -> list[dict[str, Any]]:
        return [
            {"Name": f"tag:{self.config.tag_key}", "Values": [self.config.tag_value]},
            {"Name": "instance-state-name", "Values": [RUNNING_STATE]},
        ]

    async def _describe_instances(self) -> dict[str, Any]:
        self._log.debug(
            "Using region={region} tag_key={key} tag_value={value} addr_type={addr_type}",
            region=self.config.region,
            key=self.config.tag_key,
            value=self.config.tag_value,
            addr_type=self.config.addr_type,
        )
        try:
            async with self._client_factory() as ec2:
                return await ec2.describe_instances(Filters=self.filters())
        except (ClientError, BotoCoreError) as e:
            self._log.error("Provider request failed: {error}", error=e)
            raise ProviderRequestFailed(str(e)) from e

    def _instance_addrs(self, instance: dict[str, Any]) -> Iterator[str]:
        instance_id = instance["InstanceId"]
        self._log.debug("Found instance {id}", id=instance_id)

        match self.config.addr_type:
            case AddrType.PRIVATE_V4:
                if addr := instance.get("PrivateIpAddress"):
                    self._log.info("Instance {id} has private ip {addr}", id=instance_id, addr=addr)
                    yield addr
                else:
                    self._log.debug("Instance {id} has no private ip", id=instance_id)
            case AddrType.PUBLIC_V4:
                if addr := instance.get("PublicIpAddress"):
                    self._log.info("Instance {id} has public ip {addr}", id=instance_id, addr=addr)
                    yield addr
                else:
                    self._log.debug("Instance {id} has no public ip", id=instance_id)
            case AddrType.PUBLIC_V6:
                interfaces = instance.get("NetworkInterfaces", [])
                self._log.debug(
                    "Instance {id} has {n} network interfaces", id=instance_id, n=len(interfaces)
                )
                for interface in interfaces:
                    yield from self._interface_ipv6(instance_id, interface)

    def _interface_ipv6(self, instance_id: str, interface: dict[str, Any]) -> Iterator[str]:
        interface_id = interface.get("NetworkInterfaceId")
        ipv6_addresses = interface.get("Ipv6Addresses", [])
        if not ipv6_addresses:
            self._log.debug(
                "Instance {id} has no IPv6 on network interface {eni}",
                id=instance_id, eni=interface_id,
            )
        for entry in ipv6_addresses:
            if addr := entry.get("Ipv6Address"):
                self._log.info(
                    "Instance {id} has IPv6 {addr} on network interface {eni}",
                    id=instance_id, addr=addr, eni=interface_id,
                )
                yield addr

    @override
    async def addrs(self) -> list[str]:
        response = await self._describe_instances()
        reservations = response.get("Reservations", [])
        self._log.debug("Found {n} reservations", n=len(reservations))

        addrs: list[str] = []
        for reservation in reservations:
            reservation_id = reservation["ReservationId"]
            instances = reservation.get("Instances", [])
            self._log.debug(
                "Reservation {id} has {n} instances", id=reservation_id, n=len(instances)
            )
            for instance in instances:
                addrs.extend(self._instance_addrs(instance))

        return addrs
