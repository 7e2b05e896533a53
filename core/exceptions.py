"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.

예외 계층 구조:
    FinderError (베이스)
    ├── ConfigurationError (자격 증명 없음/만료, 신원 확인 실패)
    └── ValidationError (입력 검증)

개별 프로브의 API 호출 실패는 예외로 전파하지 않고 빈 결과로 처리합니다.
이 계층은 검색 전체를 중단해야 하는 경우에만 사용됩니다.

Usage:
    from core.exceptions import ConfigurationError

    try:
        sts.get_caller_identity()
    except ClientError as e:
        raise ConfigurationError("credentials", "AWS 자격 증명이 없거나 만료되었습니다", cause=e)
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class FinderError(Exception):
    """Private IP Finder 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigurationError(FinderError):
    """설정/자격 증명 관련 예외

    검색 시작 전 신원 확인(sts:GetCallerIdentity)이 실패하면 발생합니다.
    """

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(FinderError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
    "UnauthorizedOperation",
}

THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}

NOT_FOUND_CODES = {
    "ResourceNotFoundException",
    "NotFoundException",
    "ClusterNotFoundException",
    "DBInstanceNotFound",
    "LoadBalancerNotFound",
    "TargetGroupNotFound",
    "CacheClusterNotFound",
    "InvalidInstanceID.NotFound",
}


def _error_code(error: Exception) -> str:
    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code", "")
    return ""


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인"""
    return _error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    return _error_code(error) in THROTTLING_CODES


def is_not_found(error: Exception) -> bool:
    """리소스를 찾을 수 없는 오류인지 확인"""
    return _error_code(error) in NOT_FOUND_CODES


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, FinderError):
        # 원인 예외가 AWS 에러면 친절한 메시지를 덧붙임
        if error.cause is not None and hasattr(error.cause, "response"):
            return f"{error.message} ({format_error_for_user(error.cause)})"
        return str(error)

    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))

        friendly_messages = {
            "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
            "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
            "InvalidClientTokenId": "잘못된 자격 증명입니다.",
            "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
        }

        return friendly_messages.get(code, f"{code}: {message}")

    return str(error)
