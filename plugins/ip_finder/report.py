"""
plugins/ip_finder/report.py - 검색 진행/결과 출력

진행 상황(배너, 계정, 리전 계획, 리전 헤더, 단계 라인)은 quiet 모드에서 생략하고,
결과(발견 패널, 미발견 요약)는 항상 stdout으로 출력합니다.

병렬 검색에서는 리전별 출력을 region_block()으로 버퍼링한 뒤
하나의 블록으로 한 번에 출력해 리전 간 출력이 섞이지 않게 합니다.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any

from rich.console import Console, Group, RenderableType
from rich.json import JSON
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from cli.i18n import get_lang, t
from cli.ui import SYMBOL_ERROR, SYMBOL_INFO, SYMBOL_SUCCESS, console as default_console, print_banner

from .types import ProbeResult, ResourceCategory

# 미발견 요약에 표시하는 리전별 검색 대상
SEARCHED_RESOURCES = (
    "Network Interfaces (ENI)",
    "EC2 Instances",
    "RDS Instances",
    "Load Balancers (ALB/NLB/Classic)",
    "ECS Tasks",
    "Lambda Functions",
    "ElastiCache Clusters",
    "Redshift Clusters",
)


def json_default(value: Any) -> str:
    """JSON 직렬화 불가 값 변환 (datetime은 ISO-8601)"""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


class Reporter:
    """검색 진행/결과 출력기

    Worker 스레드는 ContextVar 언어 설정을 상속하지 않으므로 생성 시점의 언어를 고정합니다.

    Attributes:
        console: 출력 대상 Rich Console
        quiet: True면 진행 상황 출력 생략
        lang: 출력 언어
    """

    def __init__(self, console: Console | None = None, quiet: bool = False, lang: str | None = None):
        self.console = console if console is not None else default_console
        self.quiet = quiet
        self.lang = lang or get_lang()
        self._lock = threading.Lock()

    def _t(self, key: str, **kwargs: Any) -> str:
        return t(key, lang=self.lang, **kwargs)

    def _progress(self, *objects: Any, **kwargs: Any) -> None:
        if not self.quiet:
            self.console.print(*objects, **kwargs)

    # =========================================================================
    # 진행 상황
    # =========================================================================

    def banner(self, ip: str) -> None:
        if not self.quiet:
            print_banner(self.console, ip, lang=self.lang)

    def identity(self, account_id: str) -> None:
        self._progress(Text(self._t("finder.account", account_id=account_id), style="green"))

    def region_plan(self, regions: Sequence[str], parallel: bool) -> None:
        self._progress(Text(self._t("finder.regions", regions=" ".join(regions)), style="blue"))
        if parallel:
            self._progress(Text(self._t("finder.parallel_mode", count=len(regions)), style="blue"))
        self._progress()

    def region_header(self, region: str) -> None:
        self._progress(Rule(self._t("finder.region_header", region=region), style="blue"))

    def step(self, step: str, total: int, category: ResourceCategory) -> None:
        self._progress(
            Text(self._t("finder.step", step=step, total=total, name=category.display_name), style="yellow")
        )

    @contextmanager
    def region_block(self, buffered: bool = True) -> Iterator[None]:
        """리전 출력 블록

        buffered=True면 블록 안의 출력을 현재 스레드에서 캡처했다가
        블록 종료 시 lock을 잡고 한 번에 출력합니다 (Rich capture는 스레드별 버퍼).
        """
        if not buffered or self.quiet:
            yield
            return

        with self.console.capture() as capture:
            yield

        text = capture.get()
        with self._lock:
            self.console.file.write(text)
            self.console.file.flush()

    # =========================================================================
    # 결과
    # =========================================================================

    def _details(self, details: Any) -> JSON:
        return JSON.from_data(dict(details), default=json_default)

    def found(self, result: ProbeResult) -> None:
        """발견 패널 출력 (quiet 모드에서도 출력)"""
        body: list[RenderableType] = [self._details(result.details)]

        for key, value in result.extras.items():
            body.append(Text(f"{self._t(f'finder.extra_{key}')}: {value}", style="blue"))

        if result.secondary is not None:
            body.append(Text())
            body.append(
                Text(self._t("finder.attached_resource", name=result.secondary.category.display_name), style="bold")
            )
            body.append(self._details(result.secondary.details))

        body.append(Text())
        body.append(Text(self._t("finder.found_region", region=result.region), style="green"))

        title = f"{SYMBOL_SUCCESS} {self._t('finder.found_title', name=result.category.display_name)}"
        self.console.print()
        self.console.print(Panel(Group(*body), title=Text(title, style="bold green"), border_style="green"))

    def not_found(self, ip: str, searched_regions: Sequence[str], all_regions: bool = False) -> None:
        """미발견 요약 출력 (가능한 원인, 검색 리전, 검색 리소스)"""
        regions_text = " ".join(searched_regions)

        if not all_regions and len(searched_regions) == 1:
            first_reason = self._t("finder.reason_other_region", regions=regions_text)
        else:
            first_reason = self._t("finder.reason_all_searched", regions=regions_text)
        reasons = [
            first_reason,
            self._t("finder.reason_released"),
            self._t("finder.reason_uncovered"),
            self._t("finder.reason_permissions"),
        ]

        out = self.console
        out.print()
        out.print(Text(f"{SYMBOL_ERROR} {self._t('finder.not_found', ip=ip)}", style="red"))
        out.print()
        out.print(Text(self._t("finder.possible_reasons"), style="yellow"))
        for index, reason in enumerate(reasons, start=1):
            out.print(Text(f"  {index}. {reason}"))
        out.print()
        out.print(Text.assemble((self._t("finder.searched_regions"), "blue"), " ", ", ".join(searched_regions)))
        out.print()
        out.print(Text(self._t("finder.searched_resources"), style="blue"))
        for name in SEARCHED_RESOURCES:
            out.print(Text(f"  {SYMBOL_INFO} {name}"))
