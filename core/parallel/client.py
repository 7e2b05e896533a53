"""
core/parallel/client.py - boto3 client 생성 헬퍼

타임아웃 + 연결 풀 + retry 정책이 설정된 boto3 client를 생성합니다.

검색 도구는 실패한 호출을 재시도하지 않고 즉시 "데이터 없음"으로 처리하므로
기본값은 단일 시도(max_attempts=1)입니다.

Example:
    from core.parallel.client import get_client

    ec2 = get_client(session, "ec2", region_name="ap-northeast-2")

    # 커스텀 설정
    ec2 = get_client(session, "ec2", max_attempts=3, connect_timeout=10)
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 1  # 재시도 없음
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 10

# boto3 Session.client()는 스레드 안전하지 않음 (생성된 client는 안전)
_session_lock = threading.Lock()


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """설정이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2, rds, elbv2 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        max_pool_connections: HTTP 연결 풀 크기
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # session.client은 문자열 서비스명을 받지만 boto3-stubs는 Literal 타입 요구
    with _session_lock:
        return session.client(  # pyright: ignore[reportCallIssue]
            cast(Any, service_name),
            region_name=region_name,
            config=config,
            **kwargs,
        )
