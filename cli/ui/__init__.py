# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 UI 컴포넌트들 (배너, 콘솔 출력 등)
"""

from .banner import print_banner
from .console import (
    SYMBOL_ERROR,
    SYMBOL_INFO,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    error_console,
    get_console,
    print_error,
    print_warning,
)

__all__ = [
    "print_banner",
    "SYMBOL_ERROR",
    "SYMBOL_INFO",
    "SYMBOL_SUCCESS",
    "SYMBOL_WARNING",
    "console",
    "error_console",
    "get_console",
    "print_error",
    "print_warning",
]
