# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

boto3 세션 생성과 검색 전 신원 확인을 담당합니다.

사용 예시:
    from core.auth import get_session, check_identity

    session = get_session(profile_name="my-profile")
    account_id = check_identity(session)  # 실패 시 ConfigurationError
"""

from .session import check_identity, get_default_region, get_session

__all__ = [
    "get_session",
    "get_default_region",
    "check_identity",
]
