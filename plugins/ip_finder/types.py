"""
plugins/ip_finder/types.py - 사설 IP 검색 데이터 모델

검색 요청, 프로브 결과, 리전/전체 검색 결과를 정의합니다.
모든 객체는 호출마다 새로 생성되며 생성 후 변경되지 않습니다.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from core.exceptions import ValidationError

# 점으로 구분된 4개 ASCII 숫자 그룹 (옥텟 범위는 검사하지 않음: 999.999.999.999 허용)
IP_PATTERN = re.compile(r"^[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}$")


def is_valid_ip(text: str) -> bool:
    """dotted-quad 형식 여부 확인"""
    return bool(IP_PATTERN.fullmatch(text))


class ResourceCategory(Enum):
    """검색 대상 리소스 카테고리 (프로브 순서)"""

    NETWORK_INTERFACE = "network_interface"
    EC2_INSTANCE = "ec2_instance"
    RDS_INSTANCE = "rds_instance"
    LOAD_BALANCER = "load_balancer"
    CLASSIC_LOAD_BALANCER = "classic_load_balancer"
    ECS_TASK = "ecs_task"
    LAMBDA_FUNCTION = "lambda_function"
    ELASTICACHE_CLUSTER = "elasticache_cluster"
    REDSHIFT_CLUSTER = "redshift_cluster"

    @property
    def display_name(self) -> str:
        """표시용 이름"""
        return {
            ResourceCategory.NETWORK_INTERFACE: "Network Interface (ENI)",
            ResourceCategory.EC2_INSTANCE: "EC2 Instance",
            ResourceCategory.RDS_INSTANCE: "RDS Instance",
            ResourceCategory.LOAD_BALANCER: "Load Balancer",
            ResourceCategory.CLASSIC_LOAD_BALANCER: "Classic Load Balancer",
            ResourceCategory.ECS_TASK: "ECS Task",
            ResourceCategory.LAMBDA_FUNCTION: "Lambda Function",
            ResourceCategory.ELASTICACHE_CLUSTER: "ElastiCache Cluster",
            ResourceCategory.REDSHIFT_CLUSTER: "Redshift Cluster",
        }[self]


class SearchMode(Enum):
    """멀티 리전 검색 모드"""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


def _freeze(values: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True)
class SearchRequest:
    """검색 요청

    Attributes:
        ip: 검색할 사설 IP (dotted-quad)
        regions: 검색 대상 리전 (비어 있으면 안 됨, 순서 유지)
        mode: 순차/병렬 검색 모드
    """

    ip: str
    regions: tuple[str, ...]
    mode: SearchMode = SearchMode.SEQUENTIAL

    def __post_init__(self) -> None:
        if not is_valid_ip(self.ip):
            raise ValidationError("ip", self.ip, "dotted-quad (예: 10.0.1.100)")
        if not self.regions:
            raise ValidationError("regions", self.regions, "최소 1개 리전")

    @classmethod
    def create(
        cls,
        ip: str,
        regions: Iterable[str],
        parallel: bool = False,
    ) -> SearchRequest:
        """리전 iterable과 병렬 플래그로 요청 생성"""
        return cls(
            ip=ip,
            regions=tuple(regions),
            mode=SearchMode.PARALLEL if parallel else SearchMode.SEQUENTIAL,
        )

    @property
    def is_parallel(self) -> bool:
        """병렬 실행 여부 (리전이 2개 이상일 때만 의미 있음)"""
        return self.mode == SearchMode.PARALLEL and len(self.regions) > 1


@dataclass(frozen=True)
class ProbeResult:
    """프로브 매칭 결과

    Attributes:
        category: 매칭된 리소스 카테고리
        details: 리소스 필드 (카테고리별 고정 필드 집합, 읽기 전용)
        region: 리소스가 발견된 리전
        secondary: 부가 리소스 (예: ENI에 연결된 EC2 인스턴스)
        extras: 보조 정보 (예: TargetGroupArn, NodeEndpoint)
    """

    category: ResourceCategory
    details: Mapping[str, Any]
    region: str
    secondary: ProbeResult | None = None
    extras: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", _freeze(self.details))
        object.__setattr__(self, "extras", _freeze(self.extras))


@dataclass(frozen=True)
class RegionOutcome:
    """리전별 검색 결과 (매칭 시에만 result 존재)"""

    region: str
    result: ProbeResult | None = None

    @property
    def found(self) -> bool:
        return self.result is not None


@dataclass(frozen=True)
class SearchOutcome:
    """전체 검색 결과

    Attributes:
        result: 채택된 첫 번째 매칭 결과 (없으면 None)
        searched_regions: 실제 검색한 리전 목록 (보고용)
        account_id: 검색한 AWS 계정 ID
    """

    result: ProbeResult | None
    searched_regions: tuple[str, ...]
    account_id: str = ""

    @property
    def found(self) -> bool:
        return self.result is not None
