"""
plugins/ip_finder/pipeline.py - 리전 단위 프로브 파이프라인

한 리전에서 프로브를 고정 순서로 실행하고 첫 번째 매칭에서 멈춥니다.
리전 안에서는 동시성이 없으며 모든 호출이 순차적으로 블로킹됩니다.

Example:
    outcome = run_pipeline(session, "ap-northeast-2", "10.0.1.100")
    if outcome.found:
        print(outcome.result.category.display_name)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from core.parallel import ErrorCollector, ErrorSeverity

from .probes import DEFAULT_PROBES, Probe, ProbeContext
from .resolver import EndpointResolver
from .types import RegionOutcome

if TYPE_CHECKING:
    import boto3

    from .report import Reporter

logger = logging.getLogger(__name__)

# 진행 표시의 분모 (4b는 4단계의 하위 단계)
TOTAL_STEPS = 8


def run_pipeline(
    session: boto3.Session,
    region: str,
    ip: str,
    probes: Sequence[Probe] = DEFAULT_PROBES,
    reporter: Reporter | None = None,
    collector: ErrorCollector | None = None,
    resolver: EndpointResolver | None = None,
) -> RegionOutcome:
    """리전 하나에서 프로브를 순서대로 실행

    Args:
        session: boto3 Session
        region: 검색 리전
        ip: 대상 IP
        probes: 실행할 프로브 (순서 유지)
        reporter: 진행 상황 출력 (None이면 출력 없음)
        collector: API 에러 수집기
        resolver: 엔드포인트 DNS 해석기

    Returns:
        RegionOutcome (매칭 시 result 포함)
    """
    ctx = ProbeContext(session, region, ip, collector=collector, resolver=resolver)

    for probe in probes:
        if reporter is not None:
            reporter.step(probe.step, TOTAL_STEPS, probe.category)

        try:
            result = probe.attempt(ctx)
        except Exception as e:
            # 프로브 하나의 예기치 않은 실패로 리전 검색 전체를 중단하지 않음
            ctx.collector.collect(e, region, probe.service, "attempt", severity=ErrorSeverity.WARNING)
            continue

        if result is not None:
            logger.debug(f"매칭 [{region}] {probe!r}: {result.category.value}")
            return RegionOutcome(region=region, result=result)

    return RegionOutcome(region=region)
