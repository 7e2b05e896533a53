"""
plugins/ip_finder/probes/elasticache.py - ElastiCache 클러스터 프로브
"""

from __future__ import annotations

from ..types import ProbeResult, ResourceCategory
from .base import FieldSpec, Probe, ProbeContext, get_path

CACHE_FIELDS: FieldSpec = (
    ("CacheClusterId", "CacheClusterId"),
    ("CacheNodeType", "CacheNodeType"),
    ("Engine", "Engine"),
    ("EngineVersion", "EngineVersion"),
    ("CacheClusterStatus", "CacheClusterStatus"),
    ("NumCacheNodes", "NumCacheNodes"),
)


class CacheClusterProbe(Probe):
    """[7/8] ElastiCache 클러스터

    노드별 엔드포인트를 해석해 비교하고, 매칭된 노드 엔드포인트를 보조 정보로 남깁니다.
    """

    category = ResourceCategory.ELASTICACHE_CLUSTER
    step = "7"
    service = "elasticache"
    fields = CACHE_FIELDS

    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        clusters = ctx.paginate(
            "elasticache",
            "describe_cache_clusters",
            "CacheClusters",
            ShowCacheNodeInfo=True,
        )

        for cluster in clusters:
            for node in cluster.get("CacheNodes", []):
                hostname = get_path(node, "Endpoint.Address")
                if not hostname:
                    continue
                if ctx.matches(ctx.resolver.resolve_first(hostname)):
                    return self.build_result(ctx, cluster, extras={"NodeEndpoint": hostname})

        return None
