"""
plugins/ip_finder - Private IP Finder

사설 IP 주소를 사용 중인 AWS 리소스를 찾습니다.
ENI → EC2 → RDS → ELB → ECS → Lambda → ElastiCache → Redshift 순으로 검색하며
첫 번째 매칭에서 종료합니다.

Example:
    from plugins.ip_finder import RegionSearcher, Reporter, SearchRequest

    searcher = RegionSearcher(session, reporter=Reporter())
    outcome = searcher.search(SearchRequest.create("10.0.1.100", ["ap-northeast-2"]))
"""

from .orchestrator import RegionSearcher, ResultCell, check_identity, resolve_regions
from .pipeline import TOTAL_STEPS, run_pipeline
from .probes import DEFAULT_PROBES
from .report import Reporter
from .resolver import EndpointResolver
from .types import (
    ProbeResult,
    RegionOutcome,
    ResourceCategory,
    SearchMode,
    SearchOutcome,
    SearchRequest,
    is_valid_ip,
)

__all__ = [
    "DEFAULT_PROBES",
    "TOTAL_STEPS",
    "EndpointResolver",
    "ProbeResult",
    "RegionOutcome",
    "RegionSearcher",
    "Reporter",
    "ResourceCategory",
    "ResultCell",
    "SearchMode",
    "SearchOutcome",
    "SearchRequest",
    "check_identity",
    "is_valid_ip",
    "resolve_regions",
    "run_pipeline",
]
