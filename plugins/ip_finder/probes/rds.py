"""
plugins/ip_finder/probes/rds.py - RDS 인스턴스 프로브

엔드포인트 호스트명을 DNS로 해석한 첫 번째 주소와 비교합니다.
"""

from __future__ import annotations

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext, get_path

RDS_FIELDS: FieldSpec = (
    ("DBInstanceIdentifier", "DBInstanceIdentifier"),
    ("DBInstanceClass", "DBInstanceClass"),
    ("Engine", "Engine"),
    ("DBInstanceStatus", "DBInstanceStatus"),
    ("Endpoint", "Endpoint"),
    ("AllocatedStorage", "AllocatedStorage"),
    ("VpcId", "DBSubnetGroup.VpcId"),
)


class DBInstanceProbe(Probe):
    """[3/8] RDS 인스턴스"""

    category = ResourceCategory.RDS_INSTANCE
    step = "3"
    service = "rds"
    fields = RDS_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        instances = ctx.paginate("rds", "describe_db_instances", "DBInstances")

        for instance in instances:
            # 생성 중인 인스턴스는 Endpoint가 없음
            hostname = get_path(instance, "Endpoint.Address")
            if not hostname:
                continue
            if ctx.matches(ctx.resolver.resolve_first(hostname)):
                return self.build_result(ctx, instance)

        return None
