"""
cli/i18n/messages/finder.py - IP Finder Messages

Contains translations for search progress, the found panel and the
not-found summary.
"""

from __future__ import annotations

FINDER_MESSAGES = {
    # =========================================================================
    # Progress
    # =========================================================================
    "banner_title": {
        "ko": "AWS 사설 IP 검색",
        "en": "AWS Private IP Finder",
    },
    "searching_for": {
        "ko": "검색 IP: {ip}",
        "en": "Searching for IP: {ip}",
    },
    "account": {
        "ko": "AWS 계정: {account_id}",
        "en": "AWS Account: {account_id}",
    },
    "regions": {
        "ko": "검색 리전: {regions}",
        "en": "Regions to search: {regions}",
    },
    "parallel_mode": {
        "ko": "{count}개 리전 병렬 검색",
        "en": "Parallel search across {count} regions",
    },
    "region_header": {
        "ko": "리전 검색 중: {region}",
        "en": "Searching in region: {region}",
    },
    "step": {
        "ko": "[{step}/{total}] {name} 검색 중...",
        "en": "[{step}/{total}] Searching in {name}...",
    },
    # =========================================================================
    # Found
    # =========================================================================
    "found_title": {
        "ko": "발견: {name}",
        "en": "Found: {name}",
    },
    "found_region": {
        "ko": "리전: {region}",
        "en": "Region: {region}",
    },
    "attached_resource": {
        "ko": "연결된 리소스: {name}",
        "en": "Attached {name}",
    },
    "extra_TargetGroupArn": {
        "ko": "타겟 그룹 ARN",
        "en": "Target Group ARN",
    },
    "extra_InstanceId": {
        "ko": "인스턴스 ID",
        "en": "Instance ID",
    },
    "extra_NodeEndpoint": {
        "ko": "노드 엔드포인트",
        "en": "Node Endpoint",
    },
    # =========================================================================
    # Not Found
    # =========================================================================
    "not_found": {
        "ko": "IP 주소 {ip}를 사용하는 AWS 리소스를 찾지 못했습니다",
        "en": "IP address {ip} not found in any AWS resources",
    },
    "possible_reasons": {
        "ko": "가능한 원인:",
        "en": "Possible reasons:",
    },
    "reason_other_region": {
        "ko": "다른 리전에 있는 IP일 수 있습니다 (검색: {regions})",
        "en": "The IP might be in a different AWS region (searched: {regions})",
    },
    "reason_all_searched": {
        "ko": "요청한 모든 리전을 검색했습니다: {regions}",
        "en": "Searched all requested regions: {regions}",
    },
    "reason_released": {
        "ko": "최근에 해제된 IP일 수 있습니다",
        "en": "The IP might have been recently released",
    },
    "reason_uncovered": {
        "ko": "검색 대상이 아닌 서비스의 IP일 수 있습니다",
        "en": "The IP might belong to a service not covered by this tool",
    },
    "reason_permissions": {
        "ko": "일부 리소스 조회 권한이 없을 수 있습니다",
        "en": "Insufficient permissions to query certain resources",
    },
    "searched_regions": {
        "ko": "검색한 리전:",
        "en": "Searched regions:",
    },
    "searched_resources": {
        "ko": "리전별 검색 리소스:",
        "en": "Searched resources per region:",
    },
}
