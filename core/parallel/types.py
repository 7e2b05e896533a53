"""
core/parallel/types.py - 에러 분류 타입

AWS API 호출 실패를 분류하는 카테고리 열거형입니다.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """AWS API 에러 카테고리"""

    THROTTLING = "throttling"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    TIMEOUT = "timeout"
    EXPIRED_TOKEN = "expired_token"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    UNKNOWN = "unknown"
