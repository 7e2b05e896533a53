"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(fake_aws, fake_resolver):
        fake_aws.pages("ec2", "describe_network_interfaces", [{"NetworkInterfaces": [...]}])
        fake_resolver.addresses["db.example.com"] = ["10.0.2.5"]
"""

import io
import os
import sys
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트 환경 설정"""
    # 테스트용 환경 변수 설정
    os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-2")
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

    yield


@pytest.fixture(autouse=True)
def reset_lang():
    """언어 설정 초기화"""
    from cli.i18n import set_lang

    set_lang("en")
    yield
    set_lang("en")


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


class FakeAWS:
    """서비스별 MagicMock client를 돌려주는 boto3.Session 대역

    paginator 응답은 pages()로 등록하고, 등록되지 않은 작업은 빈 결과를 반환합니다.
    """

    def __init__(self, region_name: Optional[str] = "ap-northeast-2"):
        self.clients: Dict[str, MagicMock] = defaultdict(MagicMock)
        self.created: List[tuple] = []
        self._pages: Dict[tuple, List[Dict[str, Any]]] = {}
        self._failures: Dict[tuple, Exception] = {}
        self.paginate_kwargs: List[tuple] = []

        self.session = MagicMock()
        self.session.region_name = region_name
        self.session.client.side_effect = self._client

    def _client(self, service_name: str, region_name: Optional[str] = None, config: Any = None, **kwargs: Any):
        self.created.append((service_name, region_name))
        client = self.clients[service_name]
        client.get_paginator.side_effect = lambda operation, svc=service_name: self._paginator(svc, operation)
        return client

    def _paginator(self, service: str, operation: str) -> MagicMock:
        paginator = MagicMock()
        key = (service, operation)

        def paginate(**kwargs: Any) -> List[Dict[str, Any]]:
            self.paginate_kwargs.append((service, operation, kwargs))
            if key in self._failures:
                raise self._failures[key]
            return self._pages.get(key, [])

        paginator.paginate.side_effect = paginate
        return paginator

    def pages(self, service: str, operation: str, pages: List[Dict[str, Any]]) -> None:
        """paginator 응답 페이지 등록"""
        self._pages[(service, operation)] = pages

    def fail(self, service: str, operation: str, error: Exception) -> None:
        """paginator 호출 실패 등록"""
        self._failures[(service, operation)] = error

    def paginate_calls(self, service: str) -> List[str]:
        """서비스 client에서 get_paginator로 요청한 작업 목록"""
        return [c.args[0] for c in self.clients[service].get_paginator.call_args_list]


@pytest.fixture
def fake_aws():
    """FakeAWS 인스턴스"""
    return FakeAWS()


class FakeResolver:
    """호스트명 → 주소 목록 매핑 기반 DNS 대역"""

    def __init__(self):
        self.addresses: Dict[str, List[str]] = {}
        self.queries: List[str] = []

    @property
    def lookups(self) -> int:
        return len(self.queries)

    def resolve_all(self, hostname: str) -> List[str]:
        self.queries.append(hostname)
        return list(self.addresses.get(hostname, []))

    def resolve_first(self, hostname: str) -> Optional[str]:
        addresses = self.resolve_all(hostname)
        return addresses[0] if addresses else None


@pytest.fixture
def fake_resolver():
    """FakeResolver 인스턴스"""
    return FakeResolver()


@pytest.fixture
def probe_context(fake_aws, fake_resolver):
    """10.0.1.100 검색용 ProbeContext"""
    from plugins.ip_finder.probes import ProbeContext

    return ProbeContext(fake_aws.session, "ap-northeast-2", "10.0.1.100", resolver=fake_resolver)


# =============================================================================
# 출력 픽스처
# =============================================================================


@pytest.fixture
def record_console():
    """출력 내용을 문자열로 확인할 수 있는 Console"""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


# =============================================================================
# 유틸리티 함수
# =============================================================================


@pytest.fixture
def client_error():
    """ClientError 팩토리 픽스처"""
    return create_mock_client_error


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation,
    )
