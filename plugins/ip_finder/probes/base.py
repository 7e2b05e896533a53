"""
plugins/ip_finder/probes/base.py - 프로브 공통 인터페이스

모든 프로브는 같은 형태를 따릅니다:
    (a) 리전 범위에서 후보 리소스 조회
    (b) 후보별 비교 주소 도출 (직접 필드, DNS 해석, LB 타겟)
    (c) 대상 IP와 문자열 완전 일치 비교
    (d) 첫 번째 일치 시 카테고리별 고정 필드로 ProbeResult 생성

API 호출 실패는 ProbeContext.call()에서 흡수되어 "후보 없음"으로 처리됩니다.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from core.parallel import ErrorCollector, ErrorSeverity, get_client, try_or_default

from ..resolver import EndpointResolver
from ..types import ProbeResult, ResourceCategory

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)

T = TypeVar("T")

# (출력 필드명, 원본 경로) 목록. 경로는 "Attachment.InstanceId" 처럼 점으로 구분
FieldSpec = Sequence[tuple[str, str]]


def get_path(source: Mapping[str, Any], path: str) -> Any:
    """점 구분 경로로 중첩 딕셔너리 값 조회 (없으면 None)"""
    value: Any = source
    for key in path.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(key)
        if value is None:
            return None
    return value


def extract_fields(source: Mapping[str, Any], fields: FieldSpec) -> dict[str, Any]:
    """FieldSpec에 정의된 필드만 추출 (누락 필드는 None)"""
    return {name: get_path(source, path) for name, path in fields}


def unique(values: Iterable[str | None]) -> list[str]:
    """빈 값 제거 + 순서 유지 중복 제거"""
    seen: dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def chunked(items: Sequence[T], size: int) -> Iterable[Sequence[T]]:
    """고정 크기 배치로 분할"""
    for start in range(0, len(items), size):
        yield items[start : start + size]


class ProbeContext:
    """리전 단위 프로브 실행 컨텍스트

    하나의 리전 검색 동안 client를 재사용하고, API 호출 실패를 수집합니다.

    Attributes:
        session: boto3 Session
        region: 검색 리전
        ip: 대상 IP
        collector: 에러 수집기
        resolver: 엔드포인트 DNS 해석기
    """

    def __init__(
        self,
        session: boto3.Session,
        region: str,
        ip: str,
        collector: ErrorCollector | None = None,
        resolver: EndpointResolver | None = None,
    ):
        self.session = session
        self.region = region
        self.ip = ip
        self.collector = collector if collector is not None else ErrorCollector()
        self.resolver = resolver if resolver is not None else EndpointResolver()
        self._clients: dict[str, Any] = {}

    def client(self, service: str) -> Any:
        """리전 client 조회 (생성 후 캐시)"""
        if service not in self._clients:
            self._clients[service] = get_client(self.session, service, region_name=self.region)
        return self._clients[service]

    def call(
        self,
        service: str,
        operation: str,
        func: Callable[[], T],
        default: T,
        resource_id: str | None = None,
    ) -> T:
        """API 호출 실행, 실패 시 에러 수집 후 default 반환

        실패는 사용자에게 에러로 표시하지 않으므로 DEBUG 심각도로 수집합니다.
        """
        return try_or_default(
            func,
            default=default,
            collector=self.collector,
            region=self.region,
            service=service,
            operation=operation,
            severity=ErrorSeverity.DEBUG,
            resource_id=resource_id,
        )

    def paginate(self, service: str, operation: str, result_key: str, **kwargs: Any) -> list[dict[str, Any]]:
        """paginator로 전체 페이지 수집

        중간 페이지에서 실패하면 해당 호출 전체를 빈 결과로 처리합니다.
        """

        def _collect() -> list[dict[str, Any]]:
            paginator = self.client(service).get_paginator(operation)
            items: list[dict[str, Any]] = []
            for page in paginator.paginate(**kwargs):
                items.extend(page.get(result_key, []))
            return items

        return self.call(service, operation, _collect, default=[])

    def matches(self, address: str | None) -> bool:
        """대상 IP와 문자열 완전 일치 여부"""
        return address is not None and address == self.ip


class Probe(ABC):
    """리소스 카테고리별 조회-비교 단계

    Attributes:
        category: 매칭 시 보고할 리소스 카테고리
        step: 진행 표시용 단계 라벨 ("1" ~ "8", 클래식 LB는 "4b")
        service: 주로 호출하는 AWS 서비스 (에러 분류용)
        fields: 결과에 포함할 필드 정의
    """

    category: ResourceCategory
    step: str
    service: str
    fields: FieldSpec = ()

    @abstractmethod
    def attempt(self, ctx: ProbeContext) -> ProbeResult | None:
        """대상 IP를 가진 리소스를 찾으면 ProbeResult, 없으면 None"""

    def build_result(
        self,
        ctx: ProbeContext,
        source: Mapping[str, Any],
        secondary: ProbeResult | None = None,
        extras: Mapping[str, str] | None = None,
    ) -> ProbeResult:
        """원본 레코드에서 고정 필드를 추출해 ProbeResult 생성"""
        return ProbeResult(
            category=self.category,
            details=extract_fields(source, self.fields),
            region=ctx.region,
            secondary=secondary,
            extras=extras or {},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(step={self.step!r})"
