"""
plugins/ip_finder/probes/ec2.py - ENI / EC2 인스턴스 프로브

두 프로브 모두 describe_* 호출에 private-ip-address 필터를 적용하고,
응답에서 주소를 다시 비교합니다 (필터는 보조 IP도 매칭하므로 전체 주소 목록 비교).
"""

from __future__ import annotations

from typing import Any

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext, extract_fields, unique

ENI_FIELDS: FieldSpec = (
    ("NetworkInterfaceId", "NetworkInterfaceId"),
    ("PrivateIpAddress", "PrivateIpAddress"),
    ("Description", "Description"),
    ("Status", "Status"),
    ("AttachmentId", "Attachment.AttachmentId"),
    ("InstanceId", "Attachment.InstanceId"),
    ("InstanceOwnerId", "Attachment.InstanceOwnerId"),
    ("AttachTime", "Attachment.AttachTime"),
    ("InterfaceType", "InterfaceType"),
    ("SubnetId", "SubnetId"),
    ("VpcId", "VpcId"),
    ("AvailabilityZone", "AvailabilityZone"),
    ("Groups", "Groups"),
)

# ENI에 연결된 인스턴스 (부가 리소스)
ATTACHED_INSTANCE_FIELDS: FieldSpec = (
    ("InstanceId", "InstanceId"),
    ("InstanceType", "InstanceType"),
    ("State", "State.Name"),
    ("LaunchTime", "LaunchTime"),
    ("Tags", "Tags"),
)

INSTANCE_FIELDS: FieldSpec = (
    ("InstanceId", "InstanceId"),
    ("InstanceType", "InstanceType"),
    ("State", "State.Name"),
    ("PrivateIpAddress", "PrivateIpAddress"),
    ("PublicIpAddress", "PublicIpAddress"),
    ("LaunchTime", "LaunchTime"),
    ("SubnetId", "SubnetId"),
    ("VpcId", "VpcId"),
    ("Tags", "Tags"),
)


def private_ip_filter(ip: str) -> list[dict[str, Any]]:
    return [{"Name": "private-ip-address", "Values": [ip]}]


def interface_addresses(eni: dict[str, Any]) -> list[str]:
    """ENI의 모든 사설 IPv4 주소 (Primary 먼저)"""
    return unique(
        [eni.get("PrivateIpAddress")]
        + [entry.get("PrivateIpAddress") for entry in eni.get("PrivateIpAddresses", [])]
    )


def instance_addresses(instance: dict[str, Any]) -> list[str]:
    """인스턴스의 모든 사설 IPv4 주소 (Primary 먼저)"""
    addresses: list[str | None] = [instance.get("PrivateIpAddress")]
    for eni in instance.get("NetworkInterfaces", []):
        addresses.extend(interface_addresses(eni))
    return unique(addresses)


def describe_instance(ctx: ProbeContext, instance_id: str) -> dict[str, Any] | None:
    """인스턴스 ID로 단일 인스턴스 조회 (실패/없음 시 None)"""

    def _describe() -> dict[str, Any] | None:
        response = ctx.client("ec2").describe_instances(InstanceIds=[instance_id])
        for reservation in response.get("Reservations", []):
            for instance in reservation.get("Instances", []):
                return instance
        return None

    return ctx.call("ec2", "describe_instances", _describe, default=None, resource_id=instance_id)


class NetworkInterfaceProbe(Probe):
    """[1/8] ENI - 가장 포괄적인 단계

    매칭된 ENI가 인스턴스에 연결되어 있으면 해당 인스턴스 정보를 부가 리소스로 첨부합니다.
    """

    category = ResourceCategory.NETWORK_INTERFACE
    step = "1"
    service = "ec2"
    fields = ENI_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        interfaces = ctx.paginate(
            "ec2",
            "describe_network_interfaces",
            "NetworkInterfaces",
            Filters=private_ip_filter(ctx.ip),
        )

        for eni in interfaces:
            if ctx.ip not in interface_addresses(eni):
                continue

            secondary = None
            instance_id = (eni.get("Attachment") or {}).get("InstanceId")
            if instance_id:
                instance = describe_instance(ctx, instance_id)
                if instance:
                    secondary = ProbeResult(
                        category=ResourceCategory.EC2_INSTANCE,
                        details=extract_fields(instance, ATTACHED_INSTANCE_FIELDS),
                        region=ctx.region,
                    )

            return self.build_result(ctx, eni, secondary=secondary)

        return None


class InstanceProbe(Probe):
    """[2/8] EC2 인스턴스"""

    category = ResourceCategory.EC2_INSTANCE
    step = "2"
    service = "ec2"
    fields = INSTANCE_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        reservations = ctx.paginate(
            "ec2",
            "describe_instances",
            "Reservations",
            Filters=private_ip_filter(ctx.ip),
        )

        for reservation in reservations:
            for instance in reservation.get("Instances", []):
                if ctx.ip in instance_addresses(instance):
                    return self.build_result(ctx, instance)

        return None
