"""
core/auth/session.py - boto3 세션 및 신원 확인

주요 기능:
    - get_session: 프로파일 기반 boto3 Session 생성
    - get_default_region: 세션에 설정된 기본 리전 (없으면 FALLBACK_REGION)
    - check_identity: sts:GetCallerIdentity로 자격 증명 유효성 확인
"""

from __future__ import annotations

import logging
import threading

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.config import FALLBACK_REGION
from core.exceptions import ConfigurationError
from core.parallel import get_client

logger = logging.getLogger(__name__)

# boto3.Session 생성은 스레드 세이프하지 않음
_session_lock = threading.Lock()


def get_session(profile_name: str | None = None, region_name: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile_name: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        region_name: 기본 리전 (None이면 프로파일/환경 설정 사용)

    Returns:
        boto3.Session

    Raises:
        ConfigurationError: 프로파일을 찾을 수 없는 경우
    """
    with _session_lock:
        try:
            return boto3.Session(profile_name=profile_name, region_name=region_name)
        except BotoCoreError as e:
            raise ConfigurationError("profile", f"AWS 프로파일을 불러올 수 없습니다: {profile_name}", cause=e) from e


def get_default_region(session: boto3.Session) -> str:
    """세션의 기본 리전 반환

    `aws configure`의 region 또는 AWS_DEFAULT_REGION 값을 사용하며,
    설정되지 않은 경우 FALLBACK_REGION을 반환합니다.
    """
    region = session.region_name
    if not region:
        logger.debug(f"기본 리전 설정 없음, {FALLBACK_REGION} 사용")
        return FALLBACK_REGION
    return region


def check_identity(session: boto3.Session) -> str:
    """자격 증명 유효성 확인

    Args:
        session: boto3 Session

    Returns:
        AWS 계정 ID

    Raises:
        ConfigurationError: 자격 증명이 없거나 만료된 경우
    """
    try:
        sts = get_client(session, "sts", region_name=session.region_name or FALLBACK_REGION)
        identity = sts.get_caller_identity()
    except (ClientError, BotoCoreError) as e:
        raise ConfigurationError(
            "credentials",
            "AWS 자격 증명이 설정되지 않았거나 만료되었습니다",
            cause=e,
        ) from e

    account_id: str = identity.get("Account", "")
    logger.debug(f"신원 확인 완료: {identity.get('Arn', '')}")
    return account_id
