# core/__init__.py
"""
core - AWS 호출 공통 인프라

사설 IP 검색 플러그인이 공유하는 인증, 리전 조회, API 호출, 설정, 예외를 포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── auth/           # boto3 세션 생성, 신원 확인
    ├── parallel/       # client 생성 헬퍼, 에러 수집기
    ├── region/         # 계정 활성 리전 조회
    ├── config.py       # 환경 변수 기반 설정
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import load_settings
    settings = load_settings()

    # 예외 처리
    from core.exceptions import ConfigurationError, format_error_for_user
    try:
        account_id = check_identity(session)
    except ConfigurationError as e:
        print(format_error_for_user(e))

    # 인증
    from core.auth import get_session, check_identity
    session = get_session(profile_name="my-profile")
"""

from core import auth, config, exceptions, parallel, region

__all__: list[str] = [
    # 서브패키지
    "auth",
    "region",
    "parallel",
    # 모듈
    "config",
    "exceptions",
]
