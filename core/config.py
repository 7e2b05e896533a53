"""
core/config.py - 애플리케이션 설정

환경 변수 기반 설정과 버전 정보를 제공합니다.

환경 변수:
    AWS_PROFILE                       기본 AWS 프로파일 (--profile로 덮어쓰기)
    FIND_PRIVATE_IP_LANG              출력 언어 (ko | en, 기본: en)
    FIND_PRIVATE_IP_DNS_TIMEOUT       DNS 질의 타임아웃 (초, 기본: 3.0)
    FIND_PRIVATE_IP_DNS_LIFETIME      DNS 질의 전체 제한 시간 (초, 기본: 5.0)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# 기본 리전 조회가 실패하거나 설정이 없을 때 사용하는 리전
FALLBACK_REGION = "us-east-1"

DEFAULT_LANG = "en"
DEFAULT_DNS_TIMEOUT = 3.0
DEFAULT_DNS_LIFETIME = 5.0

ENV_LANG = "FIND_PRIVATE_IP_LANG"
ENV_DNS_TIMEOUT = "FIND_PRIVATE_IP_DNS_TIMEOUT"
ENV_DNS_LIFETIME = "FIND_PRIVATE_IP_DNS_LIFETIME"


def get_version() -> str:
    """버전 문자열 반환"""
    return VERSION


@dataclass(frozen=True)
class Settings:
    """실행 설정

    Attributes:
        profile: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        lang: 출력 언어
        dns_timeout: DNS 서버당 타임아웃 (초)
        dns_lifetime: DNS 질의 전체 제한 시간 (초)
    """

    profile: str | None = None
    lang: str = DEFAULT_LANG
    dns_timeout: float = DEFAULT_DNS_TIMEOUT
    dns_lifetime: float = DEFAULT_DNS_LIFETIME


def _read_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"{key} 값이 올바르지 않아 기본값 사용: {raw!r}")
        return default
    if value <= 0:
        logger.warning(f"{key} 값은 0보다 커야 합니다. 기본값 사용: {raw!r}")
        return default
    return value


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """환경 변수에서 설정 로드

    Args:
        env: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        Settings
    """
    if env is None:
        env = os.environ

    lang = env.get(ENV_LANG, DEFAULT_LANG).strip().lower() or DEFAULT_LANG
    if lang not in ("ko", "en"):
        logger.warning(f"지원하지 않는 언어: {lang!r}, 기본값({DEFAULT_LANG}) 사용")
        lang = DEFAULT_LANG

    return Settings(
        profile=env.get("AWS_PROFILE") or None,
        lang=lang,
        dns_timeout=_read_float(env, ENV_DNS_TIMEOUT, DEFAULT_DNS_TIMEOUT),
        dns_lifetime=_read_float(env, ENV_DNS_LIFETIME, DEFAULT_DNS_LIFETIME),
    )
