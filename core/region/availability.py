"""
core/region/availability.py - 계정에서 사용 가능한 리전 조회

EC2.describe_regions()를 사용하여 계정에서 접근 가능한 리전을 확인합니다.
조회가 실패하면 FALLBACK_REGION 하나만 반환합니다.

Usage:
    from core.region import list_all_regions

    regions = list_all_regions(session)  # ["ap-northeast-2", "us-east-1", ...]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.config import FALLBACK_REGION
from core.parallel import get_client

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


@dataclass
class RegionInfo:
    """리전 정보

    Attributes:
        region_name: 리전 코드 (예: "ap-northeast-2")
        endpoint: 리전 엔드포인트
        opt_in_status: 옵트인 상태 ("opt-in-not-required", "opted-in", "not-opted-in")
    """

    region_name: str
    endpoint: str = ""
    opt_in_status: str = "opt-in-not-required"

    @property
    def is_opted_in(self) -> bool:
        """옵트인 리전 여부 (활성화됨)"""
        return self.opt_in_status in ("opt-in-not-required", "opted-in")


def get_all_regions_info(session: boto3.Session) -> list[RegionInfo] | None:
    """계정에서 활성화된 리전 정보 조회

    describe_regions는 AllRegions 없이 호출하므로 활성화된 리전만 반환됩니다.

    Returns:
        RegionInfo 리스트 (API 응답 순서), 조회 실패 시 None
    """
    try:
        ec2 = get_client(session, "ec2", region_name=session.region_name or FALLBACK_REGION)
        response = ec2.describe_regions()
    except Exception as e:
        logger.warning(f"리전 목록 조회 실패: {e}")
        return None

    return [
        RegionInfo(
            region_name=region.get("RegionName", ""),
            endpoint=region.get("Endpoint", ""),
            opt_in_status=region.get("OptInStatus", "opt-in-not-required"),
        )
        for region in response.get("Regions", [])
        if region.get("RegionName")
    ]


def list_all_regions(session: boto3.Session) -> list[str]:
    """검색 가능한 모든 리전 코드 목록

    Args:
        session: boto3 Session

    Returns:
        리전 코드 리스트. 조회 실패 또는 빈 응답이면 [FALLBACK_REGION]
    """
    regions = get_all_regions_info(session)
    if not regions:
        return [FALLBACK_REGION]
    names = [r.region_name for r in regions if r.is_opted_in]
    return names or [FALLBACK_REGION]
