"""
plugins/ip_finder/resolver.py - 엔드포인트 DNS 해석

RDS, ElastiCache, Redshift처럼 호스트명으로만 주소가 노출되는 리소스를
A 레코드로 해석합니다. CNAME 체인은 resolver가 따라갑니다.

비교에는 첫 번째로 해석된 주소만 사용합니다. A 레코드가 여러 개인 호스트명에서
두 번째 이후 주소만 대상 IP와 같으면 매칭되지 않습니다.
"""

from __future__ import annotations

import logging
import threading

import dns.exception
import dns.resolver

from core.config import DEFAULT_DNS_LIFETIME, DEFAULT_DNS_TIMEOUT

logger = logging.getLogger(__name__)


class EndpointResolver:
    """호스트명 → IPv4 주소 해석기

    시스템 resolver 설정(/etc/resolv.conf)을 사용합니다. 설정은 첫 질의 시점에 읽으며,
    설정이 없으면(NoResolverConfiguration) 이후 모든 질의가 빈 결과를 반환합니다.
    해석 실패(NXDOMAIN, NoAnswer, 타임아웃 등)는 빈 결과로 처리합니다.

    Example:
        resolver = EndpointResolver(timeout=3.0, lifetime=5.0)
        resolver.resolve_first("mydb.abc123.ap-northeast-2.rds.amazonaws.com")
        # "10.0.12.34" 또는 None
    """

    def __init__(
        self,
        timeout: float = DEFAULT_DNS_TIMEOUT,
        lifetime: float = DEFAULT_DNS_LIFETIME,
        resolver: dns.resolver.Resolver | None = None,
    ):
        self._timeout = timeout
        self._lifetime = lifetime
        self._resolver = resolver
        self._unavailable = False
        self._lock = threading.Lock()
        self._lookups = 0

    def _get_resolver(self) -> dns.resolver.Resolver | None:
        """시스템 설정으로 resolver 생성 (최초 1회), 설정이 없으면 None"""
        with self._lock:
            if self._resolver is None and not self._unavailable:
                try:
                    resolver = dns.resolver.Resolver(configure=True)
                except dns.resolver.NoResolverConfiguration as e:
                    logger.debug(f"DNS resolver 설정 없음, 엔드포인트 해석 생략: {e}")
                    self._unavailable = True
                    return None
                resolver.timeout = self._timeout
                resolver.lifetime = self._lifetime
                self._resolver = resolver
            return self._resolver

    @property
    def lookups(self) -> int:
        """지금까지 수행한 DNS 질의 수"""
        with self._lock:
            return self._lookups

    def resolve_all(self, hostname: str) -> list[str]:
        """호스트명의 A 레코드 주소 목록 (응답 순서 유지)

        Args:
            hostname: 해석할 호스트명

        Returns:
            IPv4 주소 문자열 리스트, 실패 시 빈 리스트
        """
        if not hostname:
            return []

        resolver = self._get_resolver()
        if resolver is None:
            return []

        with self._lock:
            self._lookups += 1

        try:
            answer = resolver.resolve(hostname, "A")
        except dns.resolver.NXDOMAIN:
            logger.debug(f"존재하지 않는 도메인: {hostname}")
            return []
        except dns.resolver.NoAnswer:
            logger.debug(f"A 레코드 없음: {hostname}")
            return []
        except dns.resolver.NoNameservers:
            logger.debug(f"응답 가능한 네임서버 없음: {hostname}")
            return []
        except dns.exception.Timeout:
            logger.debug(f"DNS 질의 타임아웃: {hostname}")
            return []
        except dns.exception.DNSException as e:
            logger.debug(f"DNS 질의 실패 [{hostname}]: {e}")
            return []

        return [rdata.to_text() for rdata in answer]

    def resolve_first(self, hostname: str) -> str | None:
        """첫 번째로 해석된 주소 반환 (없으면 None)"""
        addresses = self.resolve_all(hostname)
        return addresses[0] if addresses else None
