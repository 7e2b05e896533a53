"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 단일 명령 CLI입니다.

명령어 구조:
    find-private-ip IP                              # 기본 리전 검색
    find-private-ip IP --region R [--region R ...]  # 지정 리전 검색
    find-private-ip IP --all-regions --parallel     # 전체 리전 병렬 검색
    find-private-ip --version                       # 버전 표시

사용 오류(인자 누락, 잘못된 IP, 알 수 없는 옵션, 초과 인자)는 모두 종료 코드 1입니다.
-h/--help는 다른 인자나 자격 증명 상태와 관계없이 도움말을 출력하고 0으로 종료합니다.

Usage:
    # 명령줄에서 직접 실행
    $ find-private-ip 10.0.1.100 --region ap-northeast-2

    # 모듈로 실행
    $ python -m cli.app 10.0.1.100
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import click
from click import Context

from cli.headless import FinderConfig, FinderRunner
from cli.i18n import SUPPORTED_LANGS, set_lang, t
from core.config import get_version, load_settings
from plugins.ip_finder import is_valid_ip

# Keep lightweight, centralized logging config
# WARNING 레벨로 설정하여 INFO 로그가 검색 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

VERSION = get_version()

# --debug에서도 WARNING 유지 (요청/응답 덤프)
NOISY_LOGGERS = ("botocore", "boto3", "urllib3")


def _configure_logging(debug: bool) -> None:
    if not debug:
        return
    logging.getLogger().setLevel(logging.DEBUG)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class FinderCommand(click.Command):
    """사용 오류를 종료 코드 1로 처리하는 Click 명령

    Click 기본값(2) 대신 1을 사용하고, 도움말 옵션은 파싱 전에 처리합니다.
    """

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        help_names = set(self.get_help_option_names(ctx))
        for arg in args:
            if arg == "--":
                break
            if arg in help_names:
                click.echo(ctx.get_help(), color=ctx.color)
                ctx.exit(0)

        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = 1
            raise


def _validate_ip(ctx: Context, param: click.Parameter, value: str) -> str:
    if not is_valid_ip(value):
        raise click.BadParameter(f"{t('common.invalid_ip', ip=value)}\n{t('common.usage_example')}")
    return value


@click.command(
    cls=FinderCommand,
    help=t("common.help_description"),
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(VERSION, prog_name="find-private-ip")
@click.argument("ip", callback=_validate_ip)
@click.option("-r", "--region", "regions", multiple=True, help=t("common.help_region"))
@click.option("--all-regions", is_flag=True, help=t("common.help_all_regions"))
@click.option("--parallel", is_flag=True, help=t("common.help_parallel"))
@click.option("-p", "--profile", default=None, help=t("common.help_profile"))
@click.option("--lang", type=click.Choice(list(SUPPORTED_LANGS)), default=None, help=t("common.help_lang"))
@click.option("-q", "--quiet", is_flag=True, help=t("common.help_quiet"))
@click.option("--debug", is_flag=True, help=t("common.help_debug"))
@click.pass_context
def find_private_ip(
    ctx: Context,
    ip: str,
    regions: tuple[str, ...],
    all_regions: bool,
    parallel: bool,
    profile: str | None,
    lang: str | None,
    quiet: bool,
    debug: bool,
) -> None:
    """사설 IP 주소를 사용 중인 AWS 리소스 검색"""
    _configure_logging(debug)

    settings = load_settings()
    lang = lang or settings.lang
    set_lang(lang)

    config = FinderConfig(
        ip=ip,
        regions=list(regions),
        all_regions=all_regions,
        parallel=parallel,
        profile=profile or settings.profile,
        lang=lang,
        quiet=quiet,
        debug=debug,
        dns_timeout=settings.dns_timeout,
        dns_lifetime=settings.dns_lifetime,
    )
    ctx.exit(FinderRunner(config).run())


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point. 종료 코드를 반환합니다 (sys.exit은 호출자 몫)."""
    extra: dict[str, Any] = {"prog_name": "find-private-ip", "standalone_mode": False}
    try:
        rv = find_private_ip.main(args=list(argv) if argv is not None else None, **extra)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        return 130
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
