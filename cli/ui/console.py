"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력을 위한 함수들.
검색 결과는 stdout 콘솔, 에러/경고는 stderr 콘솔로 출력합니다.
"""

import logging
import platform

from rich.console import Console

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)


def get_console(stderr: bool = False) -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다.

    Args:
        stderr: True면 표준 에러로 출력하는 콘솔
    """
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=stderr,
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()
error_console = get_console(stderr=True)


# =============================================================================
# 표준 출력 스타일 (이모지 없이 Rich 스타일만 사용)
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"  # 완료
SYMBOL_ERROR = "✗"  # 에러
SYMBOL_WARNING = "!"  # 경고
SYMBOL_INFO = "•"  # 정보


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X, stderr)

    Args:
        message: 출력할 메시지
    """
    error_console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고, stderr)

    Args:
        message: 출력할 메시지
    """
    error_console.print(f"[yellow]{SYMBOL_WARNING} {message}[/yellow]")
