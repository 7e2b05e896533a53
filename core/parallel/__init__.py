"""
core/parallel - AWS 호출 공통 유틸리티

리전별 검색 작업에서 공유하는 client 생성 헬퍼와 에러 수집기를 제공합니다.

주요 구성 요소:
- get_client: 타임아웃/retry 정책이 적용된 boto3 client 생성
- ErrorCollector: 스레드 세이프 에러 수집기
- try_or_default: 실패 시 기본값을 반환하는 호출 래퍼

Example:
    from core.parallel import ErrorCollector, get_client, try_or_default

    collector = ErrorCollector()
    rds = get_client(session, "rds", region_name=region)
    instances = try_or_default(
        lambda: rds.describe_db_instances()["DBInstances"],
        default=[],
        collector=collector,
        region=region,
        service="rds",
        operation="describe_db_instances",
    )
"""

from .client import get_client
from .errors import (
    CollectedError,
    ErrorCollector,
    ErrorSeverity,
    categorize_error,
    categorize_error_code,
    get_error_code,
    try_or_default,
)
from .types import ErrorCategory

__all__: list[str] = [
    # Client
    "get_client",
    # Error handling
    "ErrorCollector",
    "ErrorSeverity",
    "CollectedError",
    "categorize_error",
    "categorize_error_code",
    "get_error_code",
    "try_or_default",
    # Types
    "ErrorCategory",
]
