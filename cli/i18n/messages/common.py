"""
cli/i18n/messages/common.py - Common Messages

Contains translations for CLI options, usage errors and process-level status.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    # =========================================================================
    # CLI Help
    # =========================================================================
    "help_description": {
        "ko": "사설 IP 주소를 사용 중인 AWS 리소스를 찾습니다.",
        "en": "Find the AWS resource that holds a private IP address.",
    },
    "help_region": {
        "ko": "검색할 리전 (여러 번 지정 가능)",
        "en": "Region to search (can be given multiple times)",
    },
    "help_all_regions": {
        "ko": "활성화된 모든 리전 검색",
        "en": "Search all enabled regions",
    },
    "help_parallel": {
        "ko": "리전을 병렬로 검색 (리전이 2개 이상일 때)",
        "en": "Search regions in parallel (when more than one region)",
    },
    "help_profile": {
        "ko": "사용할 AWS 프로파일",
        "en": "AWS profile to use",
    },
    "help_lang": {
        "ko": "출력 언어 (ko, en)",
        "en": "Output language (ko, en)",
    },
    "help_quiet": {
        "ko": "진행 상황 출력 생략 (결과만 출력)",
        "en": "Suppress progress output (print the result only)",
    },
    "help_debug": {
        "ko": "디버그 로그 및 API 에러 요약 출력",
        "en": "Enable debug logging and print the API error summary",
    },
    # =========================================================================
    # Usage Errors
    # =========================================================================
    "invalid_ip": {
        "ko": "잘못된 IP 주소 형식: {ip}",
        "en": "Invalid IP address format: {ip}",
    },
    "usage_example": {
        "ko": "예: find-private-ip 10.0.1.100 --region ap-northeast-2",
        "en": "Example: find-private-ip 10.0.1.100 --region us-east-1",
    },
    # =========================================================================
    # Process Status
    # =========================================================================
    "credentials_failed": {
        "ko": "AWS 자격 증명이 설정되지 않았거나 만료되었습니다",
        "en": "AWS credentials are not configured or have expired",
    },
    "interrupted": {
        "ko": "중단되었습니다",
        "en": "Interrupted",
    },
    "error_summary": {
        "ko": "API 에러 요약: {summary}",
        "en": "API error summary: {summary}",
    },
}
