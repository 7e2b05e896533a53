# core/region - 리전 조회
"""
리전 조회 모듈

검색 대상 리전 목록을 결정하는 데 필요한 헬퍼를 제공합니다.
"""

from .availability import RegionInfo, get_all_regions_info, list_all_regions

__all__ = ["RegionInfo", "get_all_regions_info", "list_all_regions"]
