"""
cli/ui/banner.py - ASCII 아트 배너

검색 시작 시 도구 이름, 버전, 대상 IP를 표시합니다.
"""

from rich.console import Console
from rich.text import Text

from cli.i18n import t
from core.config import get_version

# (style, ascii_art, suffix) 형식
LOGO_LINES: list[tuple[str, str, str]] = [
    ("#FF9900", "    /\\  /\\", "    [bold white]{title}[/] [dim]v{version}[/]"),
    ("#FF9900", "   /  \\/  \\", "   {subtitle}"),
    ("#CC7700", "  / /\\  /\\ \\", ""),
    ("#995500", " /_/  \\/  \\_\\", ""),
]


def _render_logo_lines(console: Console, lines: list[tuple[str, str, str]], format_vars: dict[str, str]) -> None:
    """로고 라인 렌더링 (백슬래시 이스케이프 처리)"""
    for color, ascii_art, suffix in lines:
        text = Text()
        text.append(ascii_art, style=f"bold {color}")
        if suffix:
            # Rich 마크업이 포함된 suffix는 console.print로 출력
            console.print(text, suffix.format(**format_vars), end="")
            console.print()
        else:
            console.print(text)


def print_banner(console: Console, ip: str, lang: str | None = None) -> None:
    """배너 출력

    Args:
        console: Rich Console 인스턴스
        ip: 검색 대상 IP
        lang: 출력 언어 (None이면 현재 컨텍스트 언어)
    """
    format_vars = {
        "title": t("finder.banner_title", lang=lang),
        "version": get_version(),
        "subtitle": f"[cyan]{t('finder.searching_for', lang=lang, ip=ip)}[/]",
    }
    console.print()
    _render_logo_lines(console, LOGO_LINES, format_vars)
    console.print()
