"""
plugins/ip_finder/probes/redshift.py - Redshift 클러스터 프로브
"""

from __future__ import annotations

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext, get_path

REDSHIFT_FIELDS: FieldSpec = (
    ("ClusterIdentifier", "ClusterIdentifier"),
    ("NodeType", "NodeType"),
    ("ClusterStatus", "ClusterStatus"),
    ("MasterUsername", "MasterUsername"),
    ("DBName", "DBName"),
    ("Endpoint", "Endpoint"),
    ("NumberOfNodes", "NumberOfNodes"),
    ("VpcId", "VpcId"),
)


class WarehouseClusterProbe(Probe):
    """[8/8] Redshift 클러스터"""

    category = ResourceCategory.REDSHIFT_CLUSTER
    step = "8"
    service = "redshift"
    fields = REDSHIFT_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        clusters = ctx.paginate("redshift", "describe_clusters", "Clusters")

        for cluster in clusters:
            hostname = get_path(cluster, "Endpoint.Address")
            if hostname and ctx.matches(ctx.resolver.resolve_first(hostname)):
                return self.build_result(ctx, cluster)

        return None
