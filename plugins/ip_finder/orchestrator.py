"""
plugins/ip_finder/orchestrator.py - 멀티 리전 검색 오케스트레이터

검색 대상 리전 결정, 신원 확인, 리전별 파이프라인 실행을 담당합니다.

검색 모드:
    - 순차: 리전 목록 순서대로 검색, 첫 매칭에서 종료 (이후 리전은 시작하지 않음)
    - 병렬: 리전당 스레드 1개로 동시에 시작, 전체 완료까지 대기 (취소 없음)

병렬 모드에서 여러 리전이 매칭되면 가장 먼저 완료된 매칭을 채택합니다.
완료 순서는 실행마다 달라질 수 있습니다.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from core.auth import check_identity, get_default_region
from core.parallel import ErrorCollector, ErrorSeverity
from core.region import list_all_regions

from .pipeline import run_pipeline
from .probes import DEFAULT_PROBES, Probe
from .resolver import EndpointResolver
from .types import ProbeResult, RegionOutcome, SearchOutcome, SearchRequest

if TYPE_CHECKING:
    import boto3

    from .report import Reporter

logger = logging.getLogger(__name__)

__all__ = [
    "ResultCell",
    "RegionSearcher",
    "check_identity",
    "resolve_regions",
]


def resolve_regions(
    session: boto3.Session,
    explicit: Sequence[str] = (),
    all_regions: bool = False,
) -> list[str]:
    """검색 대상 리전 결정

    우선순위: 명시 리전 (--all-regions와 함께 주어져도 우선) → 전체 리전 → 기본 리전

    Args:
        session: boto3 Session
        explicit: 명시적으로 지정한 리전 목록 (순서/중복 그대로 사용)
        all_regions: 전체 리전 검색 여부

    Returns:
        리전 목록 (비어 있지 않음)
    """
    if explicit:
        return list(explicit)
    if all_regions:
        return list_all_regions(session)
    return [get_default_region(session)]


class ResultCell:
    """첫 번째 결과만 보관하는 스레드 세이프 슬롯"""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._result: ProbeResult | None = None

    def offer(self, result: ProbeResult) -> bool:
        """비어 있을 때만 결과 저장

        Returns:
            저장되었으면 True, 이미 다른 결과가 있으면 False
        """
        with self._lock:
            if self._result is not None:
                return False
            self._result = result
            return True

    @property
    def value(self) -> ProbeResult | None:
        with self._lock:
            return self._result


class RegionSearcher:
    """리전별 프로브 파이프라인 실행기

    Example:
        searcher = RegionSearcher(session, reporter=Reporter())
        request = SearchRequest.create("10.0.1.100", ["ap-northeast-2", "us-east-1"], parallel=True)
        outcome = searcher.search(request)
    """

    def __init__(
        self,
        session: boto3.Session,
        reporter: Reporter | None = None,
        collector: ErrorCollector | None = None,
        resolver: EndpointResolver | None = None,
        probes: Sequence[Probe] = DEFAULT_PROBES,
    ):
        self.session = session
        self.reporter = reporter
        self.collector = collector if collector is not None else ErrorCollector()
        self.resolver = resolver if resolver is not None else EndpointResolver()
        self.probes = probes

    def search(self, request: SearchRequest, account_id: str = "") -> SearchOutcome:
        """검색 실행

        Args:
            request: 검색 요청
            account_id: 보고용 계정 ID

        Returns:
            SearchOutcome (searched_regions는 실제로 시작한 리전)
        """
        if request.is_parallel:
            result, searched = self._search_parallel(request)
        else:
            result, searched = self._search_sequential(request)

        return SearchOutcome(result=result, searched_regions=tuple(searched), account_id=account_id)

    def _search_region(self, request: SearchRequest, region: str, buffered: bool) -> RegionOutcome:
        if self.reporter is None:
            return run_pipeline(
                self.session,
                region,
                request.ip,
                probes=self.probes,
                collector=self.collector,
                resolver=self.resolver,
            )

        with self.reporter.region_block(buffered=buffered):
            self.reporter.region_header(region)
            return run_pipeline(
                self.session,
                region,
                request.ip,
                probes=self.probes,
                reporter=self.reporter,
                collector=self.collector,
                resolver=self.resolver,
            )

    def _search_sequential(self, request: SearchRequest) -> tuple[ProbeResult | None, list[str]]:
        searched: list[str] = []
        for region in request.regions:
            searched.append(region)
            outcome = self._search_region(request, region, buffered=False)
            if outcome.found:
                return outcome.result, searched
        return None, searched

    def _run_region(self, request: SearchRequest, region: str, cell: ResultCell) -> RegionOutcome:
        """병렬 작업 단위: 매칭 시 결과 슬롯에 기록"""
        outcome = self._search_region(request, region, buffered=True)
        if outcome.result is not None and not cell.offer(outcome.result):
            logger.debug(f"다른 리전의 결과가 먼저 채택됨, 무시: {region}")
        return outcome

    def _search_parallel(self, request: SearchRequest) -> tuple[ProbeResult | None, list[str]]:
        cell = ResultCell()

        with ThreadPoolExecutor(max_workers=len(request.regions)) as executor:
            futures = {
                executor.submit(self._run_region, request, region, cell): region for region in request.regions
            }

            # 매칭이 나와도 취소하지 않고 모든 리전 완료까지 대기
            for future in as_completed(futures):
                region = futures[future]
                try:
                    future.result()
                except Exception as e:
                    # 리전 작업 실패는 해당 리전 미발견으로 처리
                    self.collector.collect(e, region, "ip_finder", "search_region", severity=ErrorSeverity.WARNING)

        return cell.value, list(request.regions)
