"""
plugins/ip_finder/probes - 리소스 카테고리별 프로브

DEFAULT_PROBES 순서가 곧 검색 순서입니다 (가장 포괄적인 ENI가 먼저).
같은 IP가 여러 계층에서 보이면 앞 단계 카테고리로 보고됩니다.
"""

from .base import Probe, ProbeContext, extract_fields, get_path
from .ec2 import InstanceProbe, NetworkInterfaceProbe
from .ecs import TaskProbe
from .elasticache import CacheClusterProbe
from .elb import ClassicLoadBalancerProbe, LoadBalancerProbe
from .lambda_ import FunctionProbe
from .rds import DBInstanceProbe
from .redshift import WarehouseClusterProbe

DEFAULT_PROBES: tuple[Probe, ...] = (
    NetworkInterfaceProbe(),
    InstanceProbe(),
    DBInstanceProbe(),
    LoadBalancerProbe(),
    ClassicLoadBalancerProbe(),
    TaskProbe(),
    FunctionProbe(),
    CacheClusterProbe(),
    WarehouseClusterProbe(),
)

__all__ = [
    "DEFAULT_PROBES",
    "Probe",
    "ProbeContext",
    "extract_fields",
    "get_path",
    "NetworkInterfaceProbe",
    "InstanceProbe",
    "DBInstanceProbe",
    "LoadBalancerProbe",
    "ClassicLoadBalancerProbe",
    "TaskProbe",
    "FunctionProbe",
    "CacheClusterProbe",
    "WarehouseClusterProbe",
]
