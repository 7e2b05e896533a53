"""
plugins/ip_finder/probes/elb.py - 로드밸런서 프로브 (ALB/NLB/GWLB, Classic)

ELBv2는 타겟 그룹에 등록된 타겟 ID(IP 타입 타겟이면 IP 자체)를 비교하고,
Classic LB는 등록된 인스턴스의 Primary 사설 IP를 비교합니다.
"""

from __future__ import annotations

from typing import Any

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext
from .ec2 import describe_instance

ELBV2_FIELDS: FieldSpec = (
    ("LoadBalancerName", "LoadBalancerName"),
    ("Type", "Type"),
    ("Scheme", "Scheme"),
    ("State", "State.Code"),
    ("DNSName", "DNSName"),
    ("VpcId", "VpcId"),
)

CLB_FIELDS: FieldSpec = (
    ("LoadBalancerName", "LoadBalancerName"),
    ("DNSName", "DNSName"),
    ("Scheme", "Scheme"),
    ("VPCId", "VPCId"),
)


class LoadBalancerProbe(Probe):
    """[4/8] ELBv2 로드밸런서

    LB → 타겟 그룹 → 타겟 헬스 순으로 조회합니다.
    """

    category = ResourceCategory.LOAD_BALANCER
    step = "4"
    service = "elbv2"
    fields = ELBV2_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        load_balancers = ctx.paginate("elbv2", "describe_load_balancers", "LoadBalancers")

        for lb in load_balancers:
            lb_arn = lb.get("LoadBalancerArn")
            if not lb_arn:
                continue

            target_groups = ctx.paginate(
                "elbv2",
                "describe_target_groups",
                "TargetGroups",
                LoadBalancerArn=lb_arn,
            )
            for tg in target_groups:
                tg_arn = tg.get("TargetGroupArn")
                if tg_arn and self._has_target(ctx, tg_arn):
                    return self.build_result(ctx, lb, extras={"TargetGroupArn": tg_arn})

        return None

    def _has_target(self, ctx: ProbeContext, tg_arn: str) -> bool:
        def _describe() -> list[dict[str, Any]]:
            response = ctx.client("elbv2").describe_target_health(TargetGroupArn=tg_arn)
            return response.get("TargetHealthDescriptions", [])

        descriptions = ctx.call("elbv2", "describe_target_health", _describe, default=[], resource_id=tg_arn)
        return any(ctx.matches((d.get("Target") or {}).get("Id")) for d in descriptions)


class ClassicLoadBalancerProbe(Probe):
    """[4b/8] Classic 로드밸런서

    같은 인스턴스가 여러 CLB에 등록된 경우가 많아 인스턴스 IP 조회 결과를 메모합니다.
    """

    category = ResourceCategory.CLASSIC_LOAD_BALANCER
    step = "4b"
    service = "elb"
    fields = CLB_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        descriptions = ctx.paginate("elb", "describe_load_balancers", "LoadBalancerDescriptions")
        instance_ips: dict[str, str | None] = {}

        for clb in descriptions:
            for registered in clb.get("Instances", []):
                instance_id = registered.get("InstanceId")
                if not instance_id:
                    continue
                if instance_id not in instance_ips:
                    instance = describe_instance(ctx, instance_id)
                    instance_ips[instance_id] = instance.get("PrivateIpAddress") if instance else None
                if ctx.matches(instance_ips[instance_id]):
                    return self.build_result(ctx, clb, extras={"InstanceId": instance_id})

        return None
