"""
core/parallel/errors.py - 에러 수집 및 관리

리전/프로브 실행 중 발생하는 AWS API 에러를 일관되게 수집하고 관리하는 유틸리티입니다.
검색은 best-effort 정책을 따르므로 여기서 수집된 에러는 검색을 중단시키지 않습니다.

주요 구성 요소:
- ErrorSeverity: 에러 심각도 분류
- CollectedError: 수집된 에러 상세 정보
- ErrorCollector: 스레드 세이프 에러 수집기
- categorize_error / get_error_code: 예외 분류 헬퍼
- try_or_default: 실패 시 기본값 반환 헬퍼

Example:
    collector = ErrorCollector()

    interfaces = try_or_default(
        lambda: ec2.describe_network_interfaces()["NetworkInterfaces"],
        default=[],
        collector=collector,
        region="ap-northeast-2",
        service="ec2",
        operation="describe_network_interfaces",
    )

    if collector.has_errors:
        print(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TypeVar

from botocore.exceptions import ClientError

from core.exceptions import is_access_denied, is_not_found, is_throttling

from .types import ErrorCategory

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorSeverity(Enum):
    """에러 심각도 분류

    수집된 에러의 심각도를 나타내며, 로깅 레벨을 결정합니다.
    """

    CRITICAL = "critical"  # 핵심 기능 실패
    WARNING = "warning"  # 부분 실패 - 계속 진행
    INFO = "info"  # 정보성 (권한 없음 등)
    DEBUG = "debug"


@dataclass
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        region: AWS 리전
        service: AWS 서비스 이름 (예: "ec2", "rds")
        operation: API 작업 이름 (예: "describe_db_instances")
        error_code: AWS 에러 코드 (예: "AccessDenied")
        error_message: 에러 메시지
        severity: 에러 심각도
        category: 에러 카테고리
        resource_id: 관련 리소스 ID (선택사항)
    """

    timestamp: datetime
    region: str
    service: str
    operation: str
    error_code: str
    error_message: str
    severity: ErrorSeverity
    category: ErrorCategory
    resource_id: str | None = None

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.region} - {self.service}.{self.operation}: {self.error_code}"


def categorize_error_code(error_code: str) -> ErrorCategory:
    """에러 코드 문자열을 기반으로 ErrorCategory 분류

    Args:
        error_code: AWS 에러 코드 문자열 (예: "AccessDenied", "ThrottlingException")

    Returns:
        분류된 에러 카테고리. 매칭되는 키워드가 없으면 UNKNOWN.
    """
    code = error_code.lower()

    if any(x in code for x in ["accessdenied", "unauthorized", "forbidden"]):
        return ErrorCategory.ACCESS_DENIED
    if any(x in code for x in ["notfound", "nosuch", "doesnotexist"]):
        return ErrorCategory.NOT_FOUND
    if any(x in code for x in ["throttl", "ratelimit", "toomanyrequests"]):
        return ErrorCategory.THROTTLING
    if "expiredtoken" in code:
        return ErrorCategory.EXPIRED_TOKEN
    if any(x in code for x in ["timeout", "timedout"]):
        return ErrorCategory.TIMEOUT
    if any(x in code for x in ["invalid", "validation", "malformed"]):
        return ErrorCategory.INVALID_REQUEST
    if any(x in code for x in ["internal", "serviceunavailable", "serviceerror"]):
        return ErrorCategory.SERVICE_ERROR

    return ErrorCategory.UNKNOWN


def categorize_error(error: Exception) -> ErrorCategory:
    """예외 객체를 분석하여 ErrorCategory로 분류

    ClientError는 response의 에러 코드로, 네트워크/타임아웃 에러는 타입으로 분류합니다.
    """
    if is_throttling(error):
        return ErrorCategory.THROTTLING
    if is_access_denied(error):
        return ErrorCategory.ACCESS_DENIED
    if is_not_found(error):
        return ErrorCategory.NOT_FOUND

    response = getattr(error, "response", None)
    if response is not None:
        return categorize_error_code(response.get("Error", {}).get("Code", ""))

    if isinstance(error, TimeoutError):
        return ErrorCategory.TIMEOUT
    if isinstance(error, (ConnectionError, OSError)):
        return ErrorCategory.NETWORK

    # botocore의 EndpointConnectionError 등은 OSError를 상속하지 않음
    name = error.__class__.__name__
    if "Timeout" in name:
        return ErrorCategory.TIMEOUT
    if "Connection" in name or "Endpoint" in name:
        return ErrorCategory.NETWORK

    return ErrorCategory.UNKNOWN


def get_error_code(error: Exception) -> str:
    """예외 객체에서 에러 코드 문자열 추출

    ClientError의 경우 response에서 Code를 추출하고, 그 외에는 예외 클래스명을 반환합니다.
    """
    response = getattr(error, "response", None)
    if response is not None:
        code: str = response.get("Error", {}).get("Code", "Unknown")
        return code
    return error.__class__.__name__


class ErrorCollector:
    """스레드 세이프 에러 수집기

    병렬 리전 검색 중 여러 스레드에서 발생하는 에러를 안전하게 수집하고
    심각도별로 요약합니다.

    Example:
        collector = ErrorCollector()

        try:
            result = client.list_functions()
        except ClientError as e:
            collector.collect(e, region, "lambda", "list_functions")

        if collector.has_errors:
            print(collector.get_summary())
    """

    def __init__(self) -> None:
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: Exception,
        region: str,
        service: str,
        operation: str,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        resource_id: str | None = None,
    ) -> CollectedError:
        """예외를 수집하고 로깅

        에러 카테고리를 자동 분류하며, ACCESS_DENIED는 심각도를 INFO로 낮춥니다.

        Args:
            error: 발생한 예외 (ClientError 또는 기타)
            region: AWS 리전
            service: AWS 서비스 이름
            operation: API 작업 이름
            severity: 에러 심각도 (기본: WARNING)
            resource_id: 관련 리소스 ID (선택사항)

        Returns:
            수집된 CollectedError
        """
        if isinstance(error, ClientError):
            error_info = error.response.get("Error", {})
            error_code = error_info.get("Code", "Unknown")
            error_message = error_info.get("Message", str(error))
        else:
            error_code = get_error_code(error)
            error_message = str(error)

        category = categorize_error(error)

        # 권한 없음은 INFO로 다운그레이드 (DEBUG는 유지)
        if category == ErrorCategory.ACCESS_DENIED and severity != ErrorSeverity.DEBUG:
            severity = ErrorSeverity.INFO

        collected = CollectedError(
            timestamp=datetime.now(),
            region=region,
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            severity=severity,
            category=category,
            resource_id=resource_id,
        )

        with self._lock:
            self._errors.append(collected)

        log_msg = f"{collected}"
        if severity == ErrorSeverity.CRITICAL:
            logger.error(log_msg)
        elif severity == ErrorSeverity.WARNING:
            logger.warning(log_msg)
        elif severity == ErrorSeverity.INFO:
            logger.info(log_msg)
        else:
            logger.debug(log_msg)

        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        """에러 존재 여부"""
        with self._lock:
            return len(self._errors) > 0

    def get_summary(self) -> str:
        """심각도별 에러 건수를 포함한 요약 문자열 반환

        Returns:
            포맷팅된 요약 문자열 (예: "에러 3건 (info: 1건, warning: 2건)")
        """
        with self._lock:
            if not self._errors:
                return "에러 없음"

            by_severity: dict[str, int] = {}
            for e in self._errors:
                by_severity[e.severity.value] = by_severity.get(e.severity.value, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(by_severity.items())]
            return f"에러 {len(self._errors)}건 ({', '.join(parts)})"


def try_or_default(
    func: Callable[[], T],
    default: T,
    collector: ErrorCollector | None = None,
    region: str = "",
    service: str = "",
    operation: str = "",
    severity: ErrorSeverity = ErrorSeverity.WARNING,
    resource_id: str | None = None,
) -> T:
    """함수 실행, 실패 시 기본값 반환 + 에러 수집

    개별 API 호출이 실패해도 전체 검색을 중단하지 않고 기본값(빈 결과)으로 대체합니다.

    Args:
        func: 실행할 함수 (인자 없음)
        default: 실패 시 반환할 기본값
        collector: ErrorCollector 인스턴스 (None이면 로깅만)
        region: AWS 리전
        service: AWS 서비스 이름
        operation: API 작업 이름
        severity: 에러 심각도
        resource_id: 관련 리소스 ID

    Returns:
        함수 실행 결과 또는 실패 시 default 값

    Example:
        clusters = try_or_default(
            lambda: ecs.list_clusters()["clusterArns"],
            default=[],
            collector=collector,
            region=region,
            service="ecs",
            operation="list_clusters",
        )
    """
    try:
        return func()
    except Exception as e:
        if collector:
            collector.collect(e, region, service, operation, severity, resource_id)
        else:
            logger.debug(f"[{region}] {service}.{operation}: {get_error_code(e)} - {e}")
        return default
