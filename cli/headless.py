"""
cli/headless.py - 검색 실행기

대화형 프롬프트 없이 세션 생성 → 신원 확인 → 리전 결정 → 검색 → 결과 출력을 수행합니다.
Click 명령(cli/app.py)이 옵션을 FinderConfig로 변환해 호출합니다.

종료 코드:
    0: 발견
    1: 미발견, 자격 증명 실패, 예기치 않은 오류
    130: 사용자 중단 (Ctrl+C)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import boto3
from rich.console import Console

from cli.i18n import get_lang, t
from cli.ui import console as default_console
from cli.ui import print_error, print_warning
from core.auth import get_session
from core.config import DEFAULT_DNS_LIFETIME, DEFAULT_DNS_TIMEOUT
from core.exceptions import ConfigurationError, FinderError, format_error_for_user
from core.parallel import ErrorCollector
from plugins.ip_finder import (
    EndpointResolver,
    RegionSearcher,
    Reporter,
    SearchOutcome,
    SearchRequest,
    check_identity,
    resolve_regions,
)

logger = logging.getLogger(__name__)


@dataclass
class FinderConfig:
    """검색 실행 설정"""

    ip: str

    # 대상
    regions: list[str] = field(default_factory=list)
    all_regions: bool = False
    parallel: bool = False

    # 인증
    profile: str | None = None

    # 출력
    lang: str | None = None
    quiet: bool = False
    debug: bool = False

    # DNS
    dns_timeout: float = DEFAULT_DNS_TIMEOUT
    dns_lifetime: float = DEFAULT_DNS_LIFETIME


class FinderRunner:
    """Private IP 검색 실행기

    Example:
        code = FinderRunner(FinderConfig(ip="10.0.1.100", regions=["ap-northeast-2"])).run()
    """

    def __init__(self, config: FinderConfig, console: Console | None = None):
        self.config = config
        self.console = console if console is not None else default_console
        self.collector = ErrorCollector()
        self.reporter = Reporter(self.console, quiet=config.quiet, lang=config.lang or get_lang())

    def run(self) -> int:
        """검색 실행

        Returns:
            0: 발견
            1: 미발견 또는 실패
            130: 사용자 중단
        """
        try:
            # 1. 세션 및 신원 확인
            session = get_session(profile_name=self.config.profile)
            self.reporter.banner(self.config.ip)
            account_id = check_identity(session)
            self.reporter.identity(account_id)

            # 2. 리전 결정
            regions = resolve_regions(session, self.config.regions, self.config.all_regions)
            request = SearchRequest.create(self.config.ip, regions, parallel=self.config.parallel)
            self.reporter.region_plan(request.regions, request.is_parallel)

            # 3. 검색
            outcome = self._search(session, request, account_id)

            # 4. 결과 출력
            return self._report(outcome)

        except KeyboardInterrupt:
            print_warning(t("common.interrupted", lang=self.reporter.lang))
            return 130
        except ConfigurationError as e:
            if e.config_key == "credentials":
                print_error(f"{t('common.credentials_failed', lang=self.reporter.lang)}: {e.cause}")
            else:
                print_error(format_error_for_user(e))
            return 1
        except FinderError as e:
            print_error(format_error_for_user(e))
            return 1
        except Exception as e:
            logger.debug("예기치 않은 오류", exc_info=True)
            print_error(str(e))
            return 1

    def _search(self, session: boto3.Session, request: SearchRequest, account_id: str) -> SearchOutcome:
        resolver = EndpointResolver(timeout=self.config.dns_timeout, lifetime=self.config.dns_lifetime)
        searcher = RegionSearcher(session, reporter=self.reporter, collector=self.collector, resolver=resolver)
        return searcher.search(request, account_id=account_id)

    def _report(self, outcome: SearchOutcome) -> int:
        if outcome.result is not None:
            self.reporter.found(outcome.result)
        else:
            self.reporter.not_found(
                self.config.ip,
                outcome.searched_regions,
                all_regions=self.config.all_regions and not self.config.regions,
            )

        if self.config.debug and self.collector.has_errors:
            print_warning(t("common.error_summary", lang=self.reporter.lang, summary=self.collector.get_summary()))
            for error in self.collector.errors:
                logger.debug(str(error))

        return 0 if outcome.found else 1
